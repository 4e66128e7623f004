import pytest

from hmm_tagger import HiddenMarkovModel, train


TAGS = [["D", "N", "V"], ["N", "V"]]
WORDS = [["the", "dog", "runs"], ["dog", "runs"]]


@pytest.fixture
def tiny_corpus():
    return [list(t) for t in TAGS], [list(w) for w in WORDS]


@pytest.fixture
def tables(tiny_corpus):
    return train(*tiny_corpus)


@pytest.fixture
def model(tiny_corpus):
    return HiddenMarkovModel().train(*tiny_corpus)


@pytest.fixture
def corpus_files(tmp_path):
    tags = tmp_path / "train-tags.txt"
    sentences = tmp_path / "train-sentences.txt"
    tags.write_text("D N V\nN V\n\nD N V\n", encoding="utf-8")
    sentences.write_text("The dog runs\ndog runs\n\nthe cat runs\n", encoding="utf-8")
    return tags, sentences

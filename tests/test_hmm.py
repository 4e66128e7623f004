import pytest

from hmm_tagger import HiddenMarkovModel, ModelNotTrainedError


def test_predict_string_and_tokens(model):
    assert model.predict("The dog runs") == ["D", "N", "V"]
    assert model.predict(["dog", "runs"]) == ["N", "V"]


def test_predict_keeps_length():
    model = HiddenMarkovModel().train([["D", "N", "V", "D", "N"]], [["the", "dog", "saw", "the", "cat"]])
    sentence = "the dog saw the purple zebra and the cat"
    assert len(model.predict(sentence)) == len(sentence.split())


def test_untrained_model_raises():
    with pytest.raises(ModelNotTrainedError):
        HiddenMarkovModel().predict("dog runs")


def test_retraining_starts_from_scratch(model):
    model.train([["X"]], [["dog"]])
    assert model.tags == ["X"]
    assert model.predict("dog") == ["X"]


def test_save_and_load(model, tmp_path):
    path = tmp_path / "model.pkl"
    model.save(path)

    loaded = HiddenMarkovModel.from_file(path)
    assert loaded.transitions == model.transitions
    assert loaded.emissions == model.emissions
    assert loaded.predict("the dog runs") == model.predict("the dog runs")


def test_penalty_is_kept(tiny_corpus, tmp_path):
    model = HiddenMarkovModel(unseen_penalty=-7.0).train(*tiny_corpus)
    path = tmp_path / "model.pkl"
    model.save(path)
    assert HiddenMarkovModel().load(path).unseen_penalty == -7.0


def test_penalty_setter_reaches_decoder(model):
    model.unseen_penalty = 0.0

    assert model.unseen_penalty == 0.0
    assert model.viterbi.unseen_penalty == 0.0
    assert model.predict("zebra") == ["D"]

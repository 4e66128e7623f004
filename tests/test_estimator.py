from math import log

import pytest

from hmm_tagger import AlignmentError, ParameterEstimator, ReservedTagError, TableSpentError, config, train


def test_transitions_start_from_sentinel(tables):
    transitions, _ = tables

    assert set(transitions[config.START]) == {"D", "N"}
    assert transitions[config.START]["D"] == pytest.approx(log(0.5))
    assert transitions["D"]["N"] == pytest.approx(0.0)
    assert transitions["N"]["V"] == pytest.approx(0.0)
    # V only ever ends a sentence
    assert "V" not in transitions


def test_start_is_never_a_destination(tables):
    transitions, _ = tables
    for source in transitions:
        assert config.START not in transitions[source]


def test_emissions_are_lowercased():
    _, emissions = train([["N", "N"]], [["Dog", "DOG"]])
    assert dict(emissions["N"]) == {"dog": 0.0}


def test_probability_conservation(tables):
    for table in tables:
        for source in table:
            assert table.total_mass(source) == pytest.approx(1.0)


def test_training_is_deterministic(tiny_corpus):
    assert train(*tiny_corpus) == train(*tiny_corpus)


def test_ragged_sentence_is_rejected():
    with pytest.raises(AlignmentError, match="sentence 1"):
        train([["N"], ["N", "V"]], [["dog"], ["dog"]])


def test_sentence_count_mismatch_is_rejected():
    with pytest.raises(AlignmentError):
        train([["N"], ["N"]], [["dog"]])


def test_estimator_cannot_be_reused():
    estimator = ParameterEstimator()
    estimator.observe(["N"], ["dog"])
    estimator.estimate()

    with pytest.raises(TableSpentError):
        estimator.observe(["N"], ["dog"])
    with pytest.raises(TableSpentError):
        estimator.estimate()


def test_empty_sentence_adds_nothing():
    transitions, emissions = train([[], ["N"]], [[], ["dog"]])
    assert list(transitions) == [config.START]
    assert list(emissions) == ["N"]


def test_start_tag_in_training_data_is_rejected():
    with pytest.raises(ReservedTagError, match="sentence 0"):
        train([["N", config.START]], [["price", "#"]])

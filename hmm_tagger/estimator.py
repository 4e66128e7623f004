import logging

from . import config
from .errors import AlignmentError, ReservedTagError, TableSpentError
from .tables import CountTable

logger = logging.getLogger(__name__)


class ParameterEstimator:
    """Two-phase builder for the HMM tables.

    observe() counts tag bigrams and tag/word pairs one sentence at a time,
    estimate() normalizes both count tables exactly once into
    log-probability tables. The estimator is spent afterwards.
    """

    def __init__(self, start=config.START):

        self.start = start
        self.transition_counts = CountTable()
        self.emission_counts = CountTable()
        self.sentences = 0
        self._estimated = False

    def observe(self, tags, words, index=None):

        if self._estimated:
            raise TableSpentError("estimator was already normalized")

        tags = list(tags)
        words = list(words)
        if len(tags) != len(words):
            where = "" if index is None else f"sentence {index}: "
            raise AlignmentError(f"{where}{len(tags)} tags for {len(words)} words")
        if self.start in tags:
            where = "" if index is None else f" in sentence {index}"
            raise ReservedTagError(f"tag {self.start!r}{where} is reserved for the start state")

        #the first word of a sentence comes out of the start state
        prev_tag = self.start
        for tag, word in zip(tags, words):
            self.transition_counts.add(prev_tag, tag)
            self.emission_counts.add(tag, word.lower())
            prev_tag = tag

        self.sentences += 1

    def estimate(self):

        if self._estimated:
            raise TableSpentError("estimator was already normalized")
        self._estimated = True

        transitions = self.transition_counts.normalize()
        emissions = self.emission_counts.normalize()

        vocabulary = {word for tag in emissions.sources() for word in emissions.row(tag)}
        logger.debug("estimated tables from %d sentences: %d tags, %d words",
                     self.sentences, len(emissions), len(vocabulary))
        return transitions, emissions


def train(tag_sequences, word_sequences, start=config.START):
    """Learn (transitions, emissions) from parallel tag and word sequences."""

    tag_sequences = list(tag_sequences)
    word_sequences = list(word_sequences)
    if len(tag_sequences) != len(word_sequences):
        raise AlignmentError(f"{len(tag_sequences)} tag sentences for {len(word_sequences)} word sentences")

    estimator = ParameterEstimator(start)
    for index, (tags, words) in enumerate(zip(tag_sequences, word_sequences)):
        estimator.observe(tags, words, index)

    return estimator.estimate()

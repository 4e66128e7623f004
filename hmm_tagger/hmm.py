import logging
import pickle

from . import config
from .corpus import tokenize
from .errors import ModelNotTrainedError
from .estimator import train
from .viterbi import Viterbi

logger = logging.getLogger(__name__)


class HiddenMarkovModel:

    def __init__(self, unseen_penalty=config.UNSEEN_PENALTY):

        self.viterbi = None
        self._unseen_penalty = unseen_penalty

    def train(self, tag_sequences, word_sequences):

        #counts are rebuilt from scratch on every call, a trained model is never updated in place
        transitions, emissions = train(tag_sequences, word_sequences)
        self.viterbi = Viterbi(transitions, emissions, self._unseen_penalty)
        logger.info("trained model with %d tags", len(emissions))
        return self

    @property
    def unseen_penalty(self):
        if self.viterbi is not None:
            return self.viterbi.unseen_penalty
        return self._unseen_penalty

    @unseen_penalty.setter
    def unseen_penalty(self, value):

        self._unseen_penalty = value
        if self.viterbi is not None:
            self.viterbi.unseen_penalty = value

    @property
    def trained(self):
        return self.viterbi is not None

    @property
    def transitions(self):
        return self._decoder().transitions

    @property
    def emissions(self):
        return self._decoder().emissions

    @property
    def tags(self):
        return self._decoder().tags

    def predict(self, sentence, unseen_penalty=None):

        if isinstance(sentence, str):
            sentence = tokenize(sentence)
        return self._decoder().viterbi(sentence, unseen_penalty)

    def _decoder(self):

        if self.viterbi is None:
            raise ModelNotTrainedError("model has not been trained or loaded")
        return self.viterbi

    def save(self, filename=config.MODEL_PATH):

        with open(filename, 'wb') as out:
            pickle.dump(self._decoder(), out, pickle.HIGHEST_PROTOCOL)
        logger.info("saved model to %s", filename)

    def load(self, filename=config.MODEL_PATH):

        with open(filename, 'rb') as inp:
            self.viterbi = pickle.load(inp)
        self._unseen_penalty = self.viterbi.unseen_penalty
        logger.info("loaded model from %s", filename)
        return self

    @classmethod
    def from_file(cls, filename=config.MODEL_PATH):
        return cls().load(filename)

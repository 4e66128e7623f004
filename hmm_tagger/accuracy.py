import logging
from itertools import zip_longest

import numpy as np
import pandas as pd

from .errors import AlignmentError, DeadEndError

logger = logging.getLogger(__name__)


class AccuracyReport:

    def __init__(self, gold, predicted):

        # one row per gold position; a missing prediction is None and never matches
        self.gold = np.asarray(gold, dtype=object)
        self.predicted = np.asarray(predicted, dtype=object)
        self.matches = self.gold == self.predicted if len(self.gold) else np.zeros(0, dtype=bool)

    @property
    def correct(self):
        return int(self.matches.sum())

    @property
    def total(self):
        return len(self.matches)

    @property
    def incorrect(self):
        return self.total - self.correct

    @property
    def accuracy(self):
        return self.correct / self.total if self.total else 0.0

    @property
    def per_tag(self):
        """Gold tag, how often it occurred, how often it was predicted right."""

        frame = pd.DataFrame({'tag': self.gold, 'correct': self.matches})
        if frame.empty:
            return pd.DataFrame(columns=['count', 'correct', 'accuracy'])

        table = frame.groupby('tag', dropna=False)['correct'].agg(['count', 'sum'])
        table = table.rename(columns={'sum': 'correct'})
        table['correct'] = table['correct'].astype(int)
        table['accuracy'] = table['correct'] / table['count']
        return table.sort_values('count', ascending=False)

    def summary(self):
        return f"The solution got {self.correct} tags right and {self.incorrect} tags wrong."


def score(gold_sequences, predicted_sequences):
    """Compare gold and predicted tags position by position."""

    gold_sequences = list(gold_sequences)
    predicted_sequences = list(predicted_sequences)
    if len(gold_sequences) != len(predicted_sequences):
        raise AlignmentError(f"{len(gold_sequences)} gold sentences for {len(predicted_sequences)} predicted")

    gold = []
    predicted = []
    for gold_tags, predicted_tags in zip(gold_sequences, predicted_sequences):
        for gold_tag, predicted_tag in zip_longest(gold_tags, predicted_tags):
            #extra predictions past the gold tags still count as wrong
            gold.append(gold_tag)
            predicted.append(predicted_tag)

    return AccuracyReport(gold, predicted)


def evaluate(model, tag_sequences, word_sequences):

    predictions = []
    for index, words in enumerate(word_sequences):
        try:
            predictions.append(model.predict(list(words)))
        except DeadEndError as e:
            #a sentence the model cannot finish scores every position as wrong
            logger.warning("sentence %d: %s", index, e)
            predictions.append([])

    return score(tag_sequences, predictions)


def tagged_frame(model, sentence, unseen_penalty=None):
    words = sentence.split() if isinstance(sentence, str) else list(sentence)
    return pd.DataFrame({'word': words, 'tag': model.predict(words, unseen_penalty)})

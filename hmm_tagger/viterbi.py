import logging

from . import config
from .errors import DeadEndError

logger = logging.getLogger(__name__)


def decode(sentence, transitions, emissions, unseen_penalty=config.UNSEEN_PENALTY, start=config.START):
    """Most likely tag sequence for ``sentence`` under the trained tables.

    Scores are summed log-probabilities. A word never seen under a tag scores
    ``unseen_penalty`` for that tag. When two paths reach a tag with the same
    score the one seen first is kept.
    """

    words = [word.lower() for word in sentence]
    if not words:
        return []

    frontier = {start: 0.0}
    trellis = []  # one {tag: (previous tag, score)} per word

    for i, word in enumerate(words):
        step = {}

        #only tags reachable from something already in the frontier get explored
        for curr_tag, curr_score in frontier.items():
            for next_tag, trans_score in transitions.row(curr_tag).items():
                score = curr_score + trans_score + emissions.log_prob(next_tag, word, unseen_penalty)

                if next_tag not in step or score > step[next_tag][1]:
                    step[next_tag] = (curr_tag, score)

        if not step:
            raise DeadEndError(i, word)

        trellis.append(step)
        frontier = {tag: score for tag, (_, score) in step.items()}

    #finding the best final tag
    best_tag = None
    best_score = None
    for tag, score in frontier.items():
        if best_score is None or score > best_score:
            best_tag = tag
            best_score = score

    logger.debug("decoded %d words, best score %.3f", len(words), best_score)
    return backtrace(trellis, best_tag)


def backtrace(trellis, last_tag):

    tags = [last_tag]
    for step in reversed(trellis[1:]):
        tags.append(step[tags[-1]][0])
    tags.reverse()
    return tags


class Viterbi:

    # transitions: tag (or start) -> next tag -> log P(next | tag)
    # emissions: tag -> word -> log P(word | tag)
    # the tables are only ever read here, so one instance can be shared
    def __init__(self, transitions, emissions, unseen_penalty=config.UNSEEN_PENALTY, start=config.START):

        self.transitions = transitions
        self.emissions = emissions
        self.unseen_penalty = unseen_penalty
        self.start = start

    @property
    def tags(self):
        return self.emissions.sources()

    def viterbi(self, sentence, unseen_penalty=None):

        if unseen_penalty is None:
            unseen_penalty = self.unseen_penalty
        return decode(sentence, self.transitions, self.emissions, unseen_penalty, self.start)

    decode = viterbi

import logging

import nltk
from nltk.corpus import brown

from . import config
from .errors import AlignmentError

logger = logging.getLogger(__name__)


def tokenize(line):
    # plain whitespace split, punctuation stays on the token it touches
    return line.split()


def read_lines(path):
    with open(path, 'r', encoding='utf-8') as f:
        return [line.rstrip('\n') for line in f]


def read_tagged_corpus(tags_path, sentences_path):
    """Read a pair of line-aligned files, one line of tags per line of words.

    Returns (tag_sequences, word_sequences). A line pair where both sides are
    blank is skipped.
    """

    tag_lines = read_lines(tags_path)
    word_lines = read_lines(sentences_path)
    if len(tag_lines) != len(word_lines):
        raise AlignmentError(f"{tags_path} has {len(tag_lines)} lines but {sentences_path} has {len(word_lines)}")

    tag_sequences = []
    word_sequences = []
    for tag_line, word_line in zip(tag_lines, word_lines):
        tags = tokenize(tag_line)
        words = tokenize(word_line)
        if not tags and not words:
            continue
        tag_sequences.append(tags)
        word_sequences.append(words)

    logger.info("read %d sentences from %s", len(tag_sequences), sentences_path)
    return tag_sequences, word_sequences


def load_brown(tagset=config.BROWN_TAGSET, limit=None):
    """The NLTK Brown corpus split into parallel tag and word sequences."""

    nltk.download('brown', quiet=True)
    if tagset == 'universal':
        nltk.download('universal_tagset', quiet=True)

    dataset = brown.tagged_sents(tagset=tagset)
    if limit is not None:
        dataset = dataset[:limit]

    tag_sequences = []
    word_sequences = []
    for sent in dataset:
        word_sequences.append([word for word, _ in sent])
        tag_sequences.append([tag for _, tag in sent])

    logger.info("loaded %d brown sentences (%s tagset)", len(tag_sequences), tagset)
    return tag_sequences, word_sequences

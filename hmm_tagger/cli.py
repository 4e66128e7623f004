import argparse
import logging
import sys

from . import config
from .accuracy import evaluate
from .console import run_console
from .corpus import load_brown, read_tagged_corpus
from .errors import TaggerError
from .hmm import HiddenMarkovModel

logger = logging.getLogger(__name__)


def build_parser():

    parser = argparse.ArgumentParser(prog='hmm-tagger', description='Part-of-speech tagging with a Hidden Markov Model')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    train = sub.add_parser('train', help='train a model and save it')
    train.add_argument('--tags', default=config.TRAIN_TAGS_PATH)
    train.add_argument('--sentences', default=config.TRAIN_SENTENCES_PATH)
    train.add_argument('--brown', action='store_true', help='train on the NLTK Brown corpus instead of files')
    train.add_argument('--model', default=config.MODEL_PATH)
    train.set_defaults(func=cmd_train)

    test = sub.add_parser('test', help='score a saved model against gold tags')
    test.add_argument('--tags', default=config.TEST_TAGS_PATH)
    test.add_argument('--sentences', default=config.TEST_SENTENCES_PATH)
    test.set_defaults(func=cmd_test)

    tag = sub.add_parser('tag', help='tag one sentence')
    tag.add_argument('sentence', nargs='+')
    tag.set_defaults(func=cmd_tag)

    console = sub.add_parser('console', help='tag sentences interactively')
    console.set_defaults(func=cmd_console)

    for p in (test, tag, console):
        p.add_argument('--model', default=config.MODEL_PATH)
        p.add_argument('--penalty', type=float, default=None, help='log-score for unseen words')

    return parser


def load_model(args):

    model = HiddenMarkovModel.from_file(args.model)
    if args.penalty is not None:
        model.unseen_penalty = args.penalty
    return model


def cmd_train(args):

    if args.brown:
        tag_sequences, word_sequences = load_brown()
    else:
        tag_sequences, word_sequences = read_tagged_corpus(args.tags, args.sentences)

    model = HiddenMarkovModel().train(tag_sequences, word_sequences)
    model.save(args.model)
    print(f"Trained on {len(tag_sequences)} sentences, {len(model.tags)} tags -> {args.model}")


def cmd_test(args):

    model = load_model(args)
    tag_sequences, word_sequences = read_tagged_corpus(args.tags, args.sentences)
    report = evaluate(model, tag_sequences, word_sequences)
    print(report.summary())
    print(f"Accuracy: {report.accuracy:.4f}")


def cmd_tag(args):

    model = load_model(args)
    words = ' '.join(args.sentence).split()
    print(' '.join(f"{word}/{tag}" for word, tag in zip(words, model.predict(words))))


def cmd_console(args):
    run_console(load_model(args))


def main(argv=None):

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=config.LOG_FORMAT)

    try:
        args.func(args)
    except (TaggerError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

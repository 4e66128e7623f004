import logging

from . import config
from .errors import DeadEndError

logger = logging.getLogger(__name__)


def run_console(model, read=input, write=print, prompt=config.PROMPT):
    """Tag lines typed by the user until they send ``exit`` or input runs out."""

    write("Console test started")
    while True:
        try:
            answer = read(prompt)
        except EOFError:
            break

        if answer.strip() == config.EXIT_COMMAND:
            break

        try:
            write(model.predict(answer))
        except DeadEndError as e:
            logger.warning("could not tag %r: %s", answer, e)
            write(f"could not tag this sentence: {e}")

    write("Ending console test...")

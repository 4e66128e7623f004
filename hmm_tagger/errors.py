class TaggerError(Exception):
    """Base class for every error raised by the tagger."""


class AlignmentError(TaggerError, ValueError):
    """Tag and word inputs do not line up sentence by sentence or token by token."""


class TableSpentError(TaggerError, RuntimeError):
    """A count table was used again after it was normalized."""


class ModelNotTrainedError(TaggerError, RuntimeError):
    pass


class DeadEndError(TaggerError):
    """No tag in the frontier has an outgoing transition, so decoding cannot go on."""

    def __init__(self, position, word):
        super().__init__(f"no transition leads to word {position} ({word!r})")
        self.position = position
        self.word = word


class ReservedTagError(TaggerError, ValueError):
    """Training data uses the tag reserved for the start state."""

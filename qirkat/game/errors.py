"""Exception types raised by the Qirkat game engine."""


class QirkatError(Exception):
    """Base exception for game-engine errors."""

    pass


class ParseError(QirkatError, ValueError):
    """Raised when move or board text is malformed."""

    pass


class InvalidLayout(QirkatError, ValueError):
    """Raised when a board description is not a usable layout."""

    pass


class InvalidMove(QirkatError, ValueError):
    """Raised when a step or jump is geometrically impossible."""

    pass


class IllegalMove(QirkatError):
    """Raised when a move is rejected by the rules at apply time."""

    pass


class EmptyHistory(QirkatError):
    """Raised on undo when no move has been applied."""

    pass

"""Exceptions raised by the rules engine."""


class InvariantViolation(Exception):
    """The board no longer matches the rules engine's model.

    Raised when an undo entry cannot be inverted or cards are lost or
    duplicated. This is fatal: callers should not try to continue the game.
    """

    pass

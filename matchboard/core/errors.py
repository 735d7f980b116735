"""Error taxonomy for board generation.

Every error is fatal for the round being dealt: nothing is retried and no
partial board is ever returned.
"""


class MatchBoardError(Exception):
    """Base class for all board generation errors."""


class InvalidInput(MatchBoardError):
    """Bad item, empty pool, or an inconsistent game configuration."""


class PoolExhausted(MatchBoardError):
    """A tier ran out of items before its draw quota was met."""


class SizeMismatch(MatchBoardError):
    """Deck length does not match the number of board cells."""


class IntegrityViolation(MatchBoardError):
    """An identifier appears a number of times other than exactly two."""

"""
Domain exceptions.

Rejected moves are NOT exceptions: the match simply declines them.
These are only raised for input that cannot describe a match at all.
"""


class GameError(Exception):
    """Base class for all errors raised by this package."""


class GameStateError(GameError):
    """A match cannot be created / driven in the requested way."""


class InvalidRequestError(GameError):
    """Request data that fails validation at the boundary."""


class InvalidBoardError(GameError):
    """Board data that does not describe an 8x8 grid of known cell values."""


class MatchNotFoundError(GameError):
    """No match is registered under the given code."""

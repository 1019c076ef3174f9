"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the domain layer (lower) both translate to/from the model defined here,
so neither needs to know about the other's representation.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make MatchModel easier to read
PieceColor = str
PlayerId = str


@dataclass
class MatchModel:
    """Transport-safe snapshot of a checkers match, as it should be broadcast after every move attempt."""

    code: str
    players: dict[PieceColor, PlayerId]
    board: list[list[int]]
    turn: PieceColor
    clocks_ms: dict[PieceColor, int]
    status: str
    winner: Optional[PlayerId] = None
    end_reason: Optional[str] = None

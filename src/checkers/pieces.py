"""Defines the values a cell on the board can hold"""

from enum import Enum
from typing import Optional, Self

from src.core.shared_types import Color

# Rows are numbered from White's side: White moves up the board, Red moves down
FORWARD: dict[Color, int] = {
    Color.WHITE: 1,
    Color.RED: -1,
}

PROMOTION_ROW: dict[Color, int] = {
    Color.WHITE: 7,
    Color.RED: 0,
}


class Cell(Enum):
    """
    The five values a cell can take.

    NOTE: The values are the wire encoding. For each color the king is the man + 1,
    but nothing outside this class should rely on that.
    """

    EMPTY = 0
    WHITE_MAN = 1
    WHITE_KING = 2
    RED_MAN = 3
    RED_KING = 4

    @classmethod
    def man(cls, color: Color) -> Self:
        return cls(_MAN_VALUE[color])

    @classmethod
    def king(cls, color: Color) -> Self:
        return cls(_MAN_VALUE[color] + 1)

    @property
    def color(self) -> Optional[Color]:
        if self == Cell.EMPTY:
            return None
        return Color.WHITE if self in (Cell.WHITE_MAN, Cell.WHITE_KING) else Color.RED

    @property
    def is_empty(self) -> bool:
        return self == Cell.EMPTY

    @property
    def is_king(self) -> bool:
        return self in (Cell.WHITE_KING, Cell.RED_KING)

    @property
    def is_man(self) -> bool:
        return self in (Cell.WHITE_MAN, Cell.RED_MAN)

    def promoted(self) -> Self:
        """A man becomes the king of the same color. Anything else is returned unchanged."""
        if not self.is_man:
            return self
        return Cell(self.value + 1)

    def to_char(self) -> str:
        return CELL_TO_CHAR[self]

    @classmethod
    def from_char(cls, character: str) -> Self:
        return CHAR_TO_CELL[character]


_MAN_VALUE: dict[Color, int] = {
    Color.WHITE: 1,
    Color.RED: 3,
}

# Board diagram notation: lower case for men, upper case for kings
CHAR_TO_CELL: dict[str, Cell] = {
    ".": Cell.EMPTY,
    "w": Cell.WHITE_MAN,
    "W": Cell.WHITE_KING,
    "r": Cell.RED_MAN,
    "R": Cell.RED_KING,
}

CELL_TO_CHAR: dict[Cell, str] = {value: key for key, value in CHAR_TO_CELL.items()}

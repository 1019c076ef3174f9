"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers is played on an 8x8 board: (columns, rows)
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


@dataclass(frozen=True)
class Square:
    """(column, row) with both in [0, 7]. Row 0 is White's home row, row 7 is Red's."""

    col: int
    row: int

    @classmethod
    def from_pair(cls, pair: tuple[int, int] | list[int]) -> Square:
        col, row = pair
        return cls(col, row)

    def to_pair(self) -> tuple[int, int]:
        return (self.col, self.row)

    def is_within_bounds(self) -> bool:
        return (0 <= self.col < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )

    def is_dark(self) -> bool:
        """Only dark squares ever hold a piece."""
        return (self.col + self.row) % 2 == 1

    def offset(self, delta: Vector, steps: int = 1) -> Square:
        return Square(self.col + steps * delta[0], self.row + steps * delta[1])

    def midpoint(self, other: Square) -> Square:
        """The square jumped over when moving two diagonal steps from self to other."""
        return Square((self.col + other.col) // 2, (self.row + other.row) // 2)

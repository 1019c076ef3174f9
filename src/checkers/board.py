"""The board holds the position (which cell holds which piece). All rule knowledge lives in rules.py"""

from dataclasses import dataclass
from typing import Self

from src.checkers.pieces import Cell
from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Color

# Standard opening: White on the first three rows, Red on the last three (dark squares only)
STARTING_DIAGRAM = [
    ".w.w.w.w",
    "w.w.w.w.",
    ".w.w.w.w",
    "........",
    "........",
    "r.r.r.r.",
    ".r.r.r.r",
    "r.r.r.r.",
]


@dataclass
class Board:
    grid: list[list[Cell]]  # grid[row][col]

    @classmethod
    def empty(cls) -> Self:
        return cls(
            [
                [Cell.EMPTY for _ in range(BOARD_DIMENSIONS[0])]
                for _ in range(BOARD_DIMENSIONS[1])
            ]
        )

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_diagram(STARTING_DIAGRAM)

    @classmethod
    def from_grid(cls, values: list[list[int]]) -> Self:
        """Construct a board from the wire representation: row-major rows of cell values 0-4."""
        cls._check_dimensions(values)
        try:
            grid = [[Cell(value) for value in row] for row in values]
        except ValueError as e:
            raise InvalidBoardError(f"Unknown cell value in grid: {e}") from e
        return cls(grid)

    def to_grid(self) -> list[list[int]]:
        return [[cell.value for cell in row] for row in self.grid]

    @classmethod
    def from_diagram(cls, rows: list[str]) -> Self:
        """
        Construct a board from a text diagram.

        The first string is row 0 (White's home row), each character a column:
        '.' empty, 'w'/'W' white man/king, 'r'/'R' red man/king
        """
        cls._check_dimensions(rows)
        try:
            grid = [[Cell.from_char(character) for character in row] for row in rows]
        except KeyError as e:
            raise InvalidBoardError(f"Unknown character in board diagram: {e}") from e
        return cls(grid)

    def to_diagram(self) -> list[str]:
        return ["".join(cell.to_char() for cell in row) for row in self.grid]

    def cell(self, square: Square) -> Cell:
        return self.grid[square.row][square.col]

    def place(self, square: Square, cell: Cell) -> None:
        self.grid[square.row][square.col] = cell

    def clear(self, square: Square) -> None:
        self.place(square, Cell.EMPTY)

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Relocate whatever stands on from_square. No rule checks."""
        self.place(to_square, self.cell(from_square))
        self.clear(from_square)

    def squares(self) -> list[Square]:
        return [
            Square(col, row)
            for row in range(BOARD_DIMENSIONS[1])
            for col in range(BOARD_DIMENSIONS[0])
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square in self.squares() if self.cell(square).color == color]

    def count(self, color: Color) -> int:
        return len(self.locate_color(color))

    @staticmethod
    def _check_dimensions(rows: list) -> None:
        if len(rows) != BOARD_DIMENSIONS[1] or any(
            len(row) != BOARD_DIMENSIONS[0] for row in rows
        ):
            raise InvalidBoardError(
                f"Board must be {BOARD_DIMENSIONS[1]} rows of {BOARD_DIMENSIONS[0]} cells."
            )

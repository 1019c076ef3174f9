"""
Movement and capturing rules (the "rule engine").

Key idea: every function is pure and takes the board it reasons about explicitly.
Nothing here mutates the board or remembers anything between calls; the Match owns the state.

Every board read is preceded by a bounds check, so off-board squares are simply "not occupied" / "not empty".
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.checkers.pieces import FORWARD, Cell
from src.checkers.square import Square, Vector
from src.core.shared_types import Color


class Board(Protocol):
    """Just the parts the rules need"""

    def cell(self, square: Square) -> Cell: ...
    def locate_color(self, color: Color) -> list[Square]: ...


@dataclass(frozen=True)
class Move:
    """A single diagonal step or jump. Multi-jump chains are made of several of these."""

    from_square: Square
    to_square: Square

    @property
    def is_capture(self) -> bool:
        return abs(self.to_square.row - self.from_square.row) == 2

    @property
    def jumped_square(self) -> Optional[Square]:
        if not self.is_capture:
            return None
        return self.from_square.midpoint(self.to_square)


# --- OCCUPANCY ---
def is_occupied_by(board: Board, color: Color, square: Square) -> bool:
    if not square.is_within_bounds():
        return False
    return board.cell(square).color == color


def is_empty(board: Board, square: Square) -> bool:
    if not square.is_within_bounds():
        return False
    return board.cell(square).is_empty


def is_king(board: Board, square: Square) -> bool:
    """Only meaningful for an occupied square. Empty / off-board squares never hold a king."""
    if not square.is_within_bounds():
        return False
    return board.cell(square).is_king


# --- DIRECTIONS ---
def directions(cell: Cell) -> list[Vector]:
    """Men only go forward (2 diagonals), kings go both ways (4 diagonals)."""
    if cell.color is None:
        return []
    forward = FORWARD[cell.color]
    steps: list[Vector] = [(-1, forward), (1, forward)]
    if cell.is_king:
        steps.extend([(-1, -forward), (1, -forward)])
    return steps


# --- TARGETS ---
def capture_targets(board: Board, square: Square) -> list[Square]:
    """Landing squares of every single jump available to the piece on square."""
    if not square.is_within_bounds():
        return []
    cell = board.cell(square)
    if cell.color is None:
        return []

    opponent = cell.color.opponent()
    targets: list[Square] = []
    for delta in directions(cell):
        over = square.offset(delta)
        landing = square.offset(delta, steps=2)
        if is_occupied_by(board, opponent, over) and is_empty(board, landing):
            targets.append(landing)
    return targets


def move_targets(board: Board, square: Square) -> list[Square]:
    """Non-capturing single diagonal steps. Only relevant when no capture is mandatory."""
    if not square.is_within_bounds():
        return []
    cell = board.cell(square)
    return [
        square.offset(delta)
        for delta in directions(cell)
        if is_empty(board, square.offset(delta))
    ]


def has_any_capture(board: Board, color: Color) -> bool:
    """
    Forced capture is global per player: if ANY of your pieces can jump, no piece may make a plain step.
    Recomputed on every call because the board changes every move.
    """
    return any(capture_targets(board, square) for square in board.locate_color(color))


def legal_targets(board: Board, color: Color, square: Square) -> list[Square]:
    """
    Where may the piece on square go this turn?
    ---
    If a capture is available anywhere for color, only this piece's captures count (possibly none).
    """
    if not is_occupied_by(board, color, square):
        return []
    if has_any_capture(board, color):
        return capture_targets(board, square)
    return move_targets(board, square)


def legal_moves(board: Board, color: Color) -> list[Move]:
    """Every move available to color, honoring the forced capture rule."""
    must_capture = has_any_capture(board, color)
    targets_fn = capture_targets if must_capture else move_targets
    return [
        Move(square, target)
        for square in board.locate_color(color)
        for target in targets_fn(board, square)
    ]

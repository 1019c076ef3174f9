"""
The Match owns the board and the piece counters, and executes committed moves:
mutating the board, enforcing forced captures and capture chains, promoting men, and deciding whether the turn is over.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

import src.checkers.rules as rules
from src.checkers.board import Board
from src.checkers.pieces import PROMOTION_ROW
from src.checkers.rules import Move
from src.checkers.square import Square
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt. A rejected attempt left the match untouched."""

    accepted: bool
    turn_ends: bool = False
    captured: Optional[Square] = None
    promoted: bool = False

    @classmethod
    def rejected(cls) -> Self:
        return cls(accepted=False)


@dataclass
class Match:
    board: Board
    white_remaining: int = field(init=False)
    red_remaining: int = field(init=False)
    # The piece that just jumped and must keep jumping (None outside of a capture chain)
    chain_square: Optional[Square] = None

    def __post_init__(self):
        # NOTE counters start from the live board and are only ever touched by a capture afterwards
        self.white_remaining = self.board.count(Color.WHITE)
        self.red_remaining = self.board.count(Color.RED)

    @classmethod
    def new_match(cls) -> Self:
        return cls(Board.starting_position())

    def count_pieces(self) -> dict[Color, int]:
        """Live count straight from the board (the counters must always agree with this)."""
        return {color: self.board.count(color) for color in Color}

    def legal_moves(self, color: Color) -> list[Move]:
        """Moves color may make right now. Inside a capture chain only the chaining piece may jump."""
        if self.chain_square is not None:
            if not rules.is_occupied_by(self.board, color, self.chain_square):
                return []
            return [
                Move(self.chain_square, target)
                for target in rules.capture_targets(self.board, self.chain_square)
            ]
        return rules.legal_moves(self.board, color)

    def apply_move(self, color: Color, from_square: Square, to_square: Square) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. validate: own piece, empty destination, destination among the legal targets, chain piece (if chaining)
        2. update the board (remove the jumped piece and update the counter for a capture)
        3. promote a man that reached the far row
        4. decide whether the turn is over
        """
        if not self._is_acceptable(color, from_square, to_square):
            logger.debug(
                "Rejected move %s -> %s for %s",
                from_square.to_pair(),
                to_square.to_pair(),
                color,
            )
            return MoveResult.rejected()

        move = Move(from_square, to_square)
        captured = move.jumped_square
        self.board.move_piece(from_square, to_square)
        if captured is not None:
            self._remove_captured(captured, color.opponent())

        promoted = self._promote_if_needed(to_square, color)

        # promotion always ends the turn, even when another jump would be available
        if promoted:
            turn_ends = True
        elif captured is not None:
            turn_ends = not rules.capture_targets(self.board, to_square)
        else:
            turn_ends = True

        self.chain_square = None if turn_ends else to_square
        return MoveResult(
            accepted=True, turn_ends=turn_ends, captured=captured, promoted=promoted
        )

    def find_winner(self) -> Optional[Color]:
        """The side that still has pieces once the other has none."""
        if self.red_remaining == 0:
            return Color.WHITE
        if self.white_remaining == 0:
            return Color.RED
        return None

    # -- PRIVATE HELPERS ---
    def _is_acceptable(self, color: Color, from_square: Square, to_square: Square) -> bool:
        if not rules.is_occupied_by(self.board, color, from_square):
            return False
        if not rules.is_empty(self.board, to_square):
            return False
        if self.chain_square is not None and from_square != self.chain_square:
            return False
        return to_square in rules.legal_targets(self.board, color, from_square)

    def _remove_captured(self, square: Square, captured_color: Color) -> None:
        self.board.clear(square)
        if captured_color == Color.WHITE:
            self.white_remaining -= 1
        else:
            self.red_remaining -= 1

    def _promote_if_needed(self, square: Square, color: Color) -> bool:
        cell = self.board.cell(square)
        if not cell.is_man or square.row != PROMOTION_ROW[color]:
            return False
        self.board.place(square, cell.promoted())
        return True

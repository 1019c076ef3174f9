"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Cell
from src.checkers.square import Square
from src.config.settings import Settings
from tests.fakes import FakeScheduler, ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=1_000_000)


@pytest.fixture
def scheduler(clock: ManualClock) -> Generator[FakeScheduler, None, None]:
    """Ensures to drop recorded timers between tests"""
    fake = FakeScheduler(clock)
    try:
        yield fake
    finally:
        fake.clear()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(MAX_BUDGET_MINUTES=59, DEFAULT_BUDGET_MINUTES=10, LOG_LEVEL="DEBUG")


@pytest.fixture
def board_with_pieces() -> Callable[[dict[tuple[int, int], Cell]], Board]:
    """Call the inner function with {(col, row): cell} to get an otherwise empty board"""

    def _create_board(pieces: dict[tuple[int, int], Cell]) -> Board:
        board = Board.empty()
        for pair, cell in pieces.items():
            board.place(Square.from_pair(pair), cell)
        return board

    return _create_board

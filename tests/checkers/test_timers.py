"""Unit tests for /src/checkers/timers.py"""

import asyncio
from unittest.mock import Mock, patch

import pytest

from src.checkers.session import SessionController
from src.checkers.timers import AsyncioScheduler, monotonic_ms
from src.core.shared_types import Color, EndReason


def test_monotonic_ms_converts_nanoseconds() -> None:
    with patch("src.checkers.timers.time.monotonic_ns", return_value=5_123_456_789):
        assert monotonic_ms() == 5_123


def test_call_later_converts_to_seconds() -> None:
    loop = Mock(spec=asyncio.AbstractEventLoop)
    callback = Mock()
    scheduler = AsyncioScheduler(loop)

    scheduler.call_later(1_500, callback)
    loop.call_later.assert_called_once_with(1.5, callback)


def test_negative_delay_fires_immediately() -> None:
    loop = Mock(spec=asyncio.AbstractEventLoop)
    callback = Mock()
    AsyncioScheduler(loop).call_later(-20, callback)
    loop.call_later.assert_called_once_with(0, callback)


@pytest.mark.asyncio
async def test_timer_fires_on_running_loop() -> None:
    fired = asyncio.Event()
    scheduler = AsyncioScheduler()

    scheduler.call_later(10, fired.set)
    await asyncio.wait_for(fired.wait(), timeout=1)
    assert fired.is_set()


@pytest.mark.asyncio
async def test_cancelled_timer_never_fires() -> None:
    callback = Mock()
    handle = AsyncioScheduler().call_later(10, callback)
    handle.cancel()

    await asyncio.sleep(0.05)
    callback.assert_not_called()
    # cancelling twice (or after the fact) is harmless
    handle.cancel()


@pytest.mark.asyncio
async def test_session_times_out_on_event_loop() -> None:
    """End-to-end with the real loop: a 20ms budget runs out while nobody moves"""
    ended = asyncio.Event()
    session = SessionController(
        code="abcd",
        players={Color.WHITE: "w", Color.RED: "r"},
        budget_ms=20,
        scheduler=AsyncioScheduler(),
        on_ended=lambda _: ended.set(),
    )
    await asyncio.wait_for(ended.wait(), timeout=1)

    assert session.winner == Color.WHITE
    assert session.end_reason == EndReason.TIMEOUT

"""
Scheduling of forfeit timers.

The session only needs "call this once after N milliseconds, unless cancelled".
Protocols keep the session independent of the host's event loop, so tests can drive time by hand.
"""

import asyncio
import time
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Best effort. Cancelling a timer that already fired is a no-op."""
        ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once, after delay_ms milliseconds."""
        ...


Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Default clock: wall-time differences in milliseconds, immune to system clock changes."""
    return time.monotonic_ns() // 1_000_000


class AsyncioScheduler:
    """Timers on the asyncio event loop: callbacks run on the loop thread, so they never race a move handler."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay_ms, 0) / 1000, callback)

"""
Hand-driven stand-ins for the clock and the scheduler.

Time never really passes in the tests: a ManualClock is advanced by hand and the FakeScheduler fires
every due timer when asked to.
"""

from typing import Callable


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeTimer:
    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Mock the Scheduler: records timers against a ManualClock, fires them on `run_due()`."""

    def __init__(self, clock: ManualClock) -> None:
        self.clock = clock
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.clock() + delay_ms, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def run_due(self) -> int:
        """Fire every active timer whose due time has passed. Returns how many fired."""
        due = [t for t in self.active if t.due <= self.clock()]
        for timer in due:
            timer.fired = True
            timer.callback()
        return len(due)

    def fire_all(self) -> None:
        """Simulate a late timer: fire regardless of cancellation (the session must shrug it off)."""
        for timer in list(self.timers):
            timer.fired = True
            timer.callback()

    def clear(self) -> None:
        self.timers.clear()

"""
Deferred callbacks for frame-driven game loops
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


# Timers due within this many seconds of the clock count as due (float sums of
# delays may not land exactly on the clock value)
DUE_TOLERANCE = 1e-6


@dataclass(order=True)
class _Timer:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class TimerScheduler:
    """
    Single-threaded timer queue fired from the game loop.

    Nothing sleeps here: callers register callbacks with call_later() and
    the loop calls update() every frame, which runs every timer whose due
    time has passed, in due order.

    A timer scheduled from inside a firing callback is measured from the
    moment that callback ran: its due time, or the clock if the frame came
    late. After a stalled frame the rest of a chain is delayed, never
    squeezed together, and one update() runs each chain at most one link
    further (zero delays excepted).

    Example:
        scheduler = TimerScheduler()
        scheduler.call_later(500, lambda: print("half a second later"))

        # In update loop (runs every 20ms):
        scheduler.update()
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        """
        Initialize scheduler.

        Args:
            clock: Function returning the current time in seconds
        """
        self.clock = clock
        self._timers: List[_Timer] = []
        self._next_seq = 0
        self._firing_at: Optional[float] = None

    def now(self) -> float:
        """Current scheduling time in seconds"""
        current = self.clock()
        if self._firing_at is not None:
            return max(self._firing_at, current)
        return current

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> int:
        """
        Schedule callback to run after delay_ms milliseconds.

        Returns:
            Timer handle usable with cancel()
        """
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms}")
        timer = _Timer(self.now() + delay_ms / 1000.0, self._next_seq, callback)
        self._next_seq += 1
        self._timers.append(timer)
        self._timers.sort()
        return timer.seq

    def cancel(self, handle: int) -> bool:
        """Cancel a pending timer. Returns True if it was still pending."""
        for timer in self._timers:
            if timer.seq == handle and not timer.cancelled:
                timer.cancelled = True
                return True
        return False

    def cancel_all(self) -> None:
        """Drop every pending timer"""
        for timer in self._timers:
            timer.cancelled = True
        self._timers.clear()

    def update(self) -> int:
        """
        Fire all timers that are due.

        Returns:
            Number of callbacks that ran
        """
        current = self.clock()
        fired = 0
        while self._timers and self._timers[0].due <= current + DUE_TOLERANCE:
            timer = self._timers.pop(0)
            if timer.cancelled:
                continue
            self._firing_at = timer.due
            try:
                timer.callback()
            finally:
                self._firing_at = None
            fired += 1
        return fired

    @property
    def pending_count(self) -> int:
        """Number of timers still waiting to fire"""
        return sum(1 for timer in self._timers if not timer.cancelled)

    def __str__(self) -> str:
        return f"TimerScheduler(pending={self.pending_count})"

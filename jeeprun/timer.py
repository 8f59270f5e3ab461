"""Countdown timers driven by a monotonic clock."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


def now() -> float:
    """Return the current time in seconds from a monotonic clock."""
    return time.monotonic()


class Timer:
    """A simple timer that reports when a target duration has elapsed."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else now
        self._start_time = 0.0
        self._end_time = 0.0
        self._checked = False
        self._running = False

    def start(self, end_time: float) -> None:
        """Start the timer now; it finishes after ``end_time`` seconds."""
        self._end_time = float(end_time)
        self._start_time = self._clock()
        self._checked = False
        self._running = True

    def finished(self) -> bool:
        """Return True once more than the target time has passed since the start."""
        if self._clock() - self._start_time > self._end_time:
            self._checked = True
            return True
        return False

    def is_running(self) -> bool:
        """Return True if the timer has been started."""
        return self._running

    def run_time(self) -> float:
        """Return the seconds elapsed since the timer was started."""
        return self._clock() - self._start_time

    def target(self) -> float:
        """Return the duration the timer was started with."""
        return self._end_time
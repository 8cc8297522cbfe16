"""A simple wall-clock stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures the time between :meth:`start` and :meth:`stop`."""

    def __init__(self) -> None:
        now = time.perf_counter_ns()
        self._begin = now
        self._end = now
        self.running = False

    def start(self) -> None:
        self.running = True
        self._begin = time.perf_counter_ns()

    def stop(self) -> None:
        self._end = time.perf_counter_ns()
        self.running = False

    def total(self) -> float:
        """Seconds between the last start and the last stop."""
        return (self._end - self._begin) / 1e9

    def __str__(self) -> str:
        return f"{self.total():g}"
"\"\"\"Stopwatch helper for timing leaderboard operations.\"\"\""

from __future__ import annotations

import time
from typing import Callable

NANOS_PER_MILLI = 1_000_000


def to_milliseconds(nanoseconds: int) -> float:
    """Convert a nanosecond duration to milliseconds."""
    return nanoseconds / NANOS_PER_MILLI


class PerformanceMetrics:
    """Monotonic stopwatch.

    Safe to reuse sequentially (start/stop/start/stop). An instance is not
    meant to be shared between concurrent callers.
    """

    def __init__(self, *, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or time.perf_counter_ns
        self._started_at: int | None = None
        self._elapsed: int | None = None

    def start(self) -> None:
        self._started_at = self._clock()
        self._elapsed = None

    def stop(self) -> int:
        if self._started_at is None:
            raise RuntimeError("Stopwatch stopped before it was started")
        self._elapsed = self._clock() - self._started_at
        self._started_at = None
        return self._elapsed

    def elapsed(self) -> int:
        """Return the last measured duration in nanoseconds."""
        if self._elapsed is None:
            raise RuntimeError("No completed measurement available")
        return self._elapsed

    def elapsed_ms(self) -> float:
        return to_milliseconds(self.elapsed())

    def __enter__(self) -> "PerformanceMetrics":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["NANOS_PER_MILLI", "PerformanceMetrics", "to_milliseconds"]

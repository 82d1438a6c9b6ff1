"""A simple wall-clock stopwatch."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Measures the time elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        """Return the elapsed time in seconds."""
        return self._clock() - self._start

    def reset(self) -> None:
        """Start measuring again from now."""
        self._start = self._clock()

    def formatted(self) -> str:
        """Return the elapsed time as ``HH:MM:SS.sss``."""
        seconds = self.elapsed()
        whole = int(seconds)
        hours = whole // 3600
        minutes = (whole % 3600) // 60
        seconds -= hours * 3600 + minutes * 60
        return f"{hours:02d}:{minutes:02d}:{seconds:.3f}"
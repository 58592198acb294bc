"""A stopwatch measuring elapsed wall time."""

from __future__ import annotations

import math
import time


class Clock:
    """Stopwatch: while running it measures up to now, else up to the stop."""

    def __init__(self) -> None:
        self._begin = time.monotonic()
        self._end = time.monotonic()
        self.running = False

    def start(self) -> None:
        """Start measuring from now."""
        self.running = True
        self._begin = time.monotonic()

    def stop(self) -> None:
        """Stop measuring at now."""
        self.running = False
        self._end = time.monotonic()

    def reset(self) -> None:
        """Set both ends of the measured span to now."""
        self._begin = time.monotonic()
        self._end = time.monotonic()

    def _elapsed(self) -> float:
        end = time.monotonic() if self.running else self._end
        return end - self._begin

    def to_microseconds(self) -> float:
        """Elapsed time in whole microseconds."""
        return float(math.trunc(self._elapsed() * 1_000_000))

    def to_milliseconds(self) -> float:
        """Elapsed time in whole milliseconds."""
        return float(math.trunc(self._elapsed() * 1_000))

    def to_seconds(self) -> float:
        """Elapsed time in whole seconds."""
        return float(math.trunc(self._elapsed()))
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock abstraction.

    The game loop times answers through this interface rather than calling
    real time directly, so headless runs can script elapsed time.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


def elapsed_ms(started_s: float, stopped_s: float) -> int:
    """Whole milliseconds between two clock readings (never negative)."""

    return max(0, int(round((stopped_s - started_s) * 1000.0)))

"""Monotonic timing helpers shared by the benchmark phases."""

from __future__ import annotations

import time


def now() -> float:
    """Return a high-resolution monotonic timestamp in seconds."""
    return time.perf_counter()


def elapsed_ms(start: float) -> float:
    """Milliseconds elapsed since *start* (a value returned by ``now()``)."""
    return (time.perf_counter() - start) * 1000.0

"""Wall-clock time since the epoch in integer units."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the current time since the epoch in milliseconds."""
    return time.time_ns() // 1_000_000


def now_us() -> int:
    """Return the current time since the epoch in microseconds."""
    return time.time_ns() // 1_000
"""Millisecond clock and a sleep that wakes up on time."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0002


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Sleep for at least ``milliseconds`` ms, polling in short steps."""
    start = current_time_ms()
    while current_time_ms() - start < milliseconds:
        time.sleep(_POLL_SECONDS)
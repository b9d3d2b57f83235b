"""Millisecond clock and an interruptible sleep."""

from __future__ import annotations

import time
from typing import Callable

_POLL_SECONDS = 50e-6


def now_ms() -> int:
    """Return a monotonic timestamp in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def precise_sleep(duration: float, should_stop: Callable[[], bool]) -> bool:
    """Sleep for ``duration`` milliseconds in short steps.

    Stops early once ``should_stop()`` is true. Returns True when the full
    duration elapsed.
    """
    start = now_ms()
    while now_ms() - start < duration:
        if should_stop():
            return False
        time.sleep(_POLL_SECONDS)
    return True
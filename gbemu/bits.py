"""Small bit-level helpers shared by the emulator components."""

from __future__ import annotations

import time


def bit(value: int, n: int) -> int:
    """Return bit ``n`` of ``value`` as 0 or 1."""
    return 1 if value & (1 << n) else 0


def bit_set(value: int, n: int, on: bool) -> int:
    """Return ``value`` with bit ``n`` set when ``on`` is true, cleared otherwise."""
    if on:
        return value | (1 << n)
    return value & ~(1 << n)


def between(value: int, low: int, high: int) -> bool:
    """Return whether ``low <= value <= high``."""
    return low <= value <= high


def delay(ms: int) -> None:
    """Block for ``ms`` milliseconds."""
    time.sleep(ms / 1000)
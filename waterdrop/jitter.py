"""Random jitter for integers and durations."""

from __future__ import annotations

import math
import random
from datetime import timedelta
from typing import Optional

_COEFFICIENT = 0.1
_MAX_INT64 = 2**63 - 1
_MICROSECOND = timedelta(microseconds=1)


def _bounds(n: int, factor: float) -> tuple[int, int]:
    """Return the lowest and highest values of n scaled by factor, capped at int64."""
    low = math.floor(n * (1 - factor))
    high = math.ceil(n * (1 + factor))
    return int(low), min(int(high), _MAX_INT64)


def _rand_range(low: int, high: int) -> int:
    """Return a random integer in [low, high), or low when the range is empty."""
    if low == high:
        return low
    return random.randrange(low, high)


def jitter(n: int, factor: Optional[float] = None) -> int:
    """Scale n randomly within ``factor`` (default 0.1).

    A non-positive n, or a factor outside (0, 1], gives n back unchanged.
    """
    if n <= 0:
        return n
    if factor is None:
        factor = _COEFFICIENT
    elif factor > 1.0 or factor <= 0:
        return n
    low, high = _bounds(n, factor)
    return _rand_range(low, high)


def jitter_time(d: timedelta, factor: Optional[float] = None) -> timedelta:
    """Scale a duration randomly within ``factor`` (default 0.1).

    A non-positive duration, or a factor outside (0, 1], gives d back unchanged.
    """
    if d <= timedelta(0):
        return d
    if factor is not None and (factor > 1.0 or factor <= 0):
        return d
    return timedelta(microseconds=jitter(d // _MICROSECOND, factor))
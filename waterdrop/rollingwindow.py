"""A time-bucketed rolling window of running sums and counts."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class Bucket:
    """Sum and count of the values recorded during one time slot."""

    sum: float = 0.0
    count: int = 0

    def _add(self, value: float) -> None:
        self.sum += value
        self.count += 1

    def _reset(self) -> None:
        self.sum = 0.0
        self.count = 0


class RollingWindow:
    """A ring of ``bucket_size`` buckets, each covering ``bucket_duration`` seconds.

    ``clock`` returns the current time in nanoseconds; it defaults to
    :func:`time.time_ns`.
    """

    def __init__(
        self,
        bucket_size: int,
        bucket_duration: float,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if bucket_size <= 0:
            raise ValueError("bucket_size must be positive")
        duration_ns = int(round(bucket_duration * 1_000_000_000))
        if duration_ns <= 0:
            raise ValueError("bucket_duration must be positive")
        self._size = bucket_size
        self._duration_ns = duration_ns
        self._clock = clock or time.time_ns
        self._buckets = [Bucket() for _ in range(bucket_size)]
        self._last_offset = 0
        self._last_time = 0
        self._lock = threading.Lock()

    def add(self, value: float) -> None:
        """Record a value in the bucket for the current time slot."""
        with self._lock:
            self._update_offset()
            self._buckets[self._last_offset]._add(value)

    def reduce(self, fn: Callable[[Bucket], None]) -> None:
        """Call fn on every bucket, provided the window is still current."""
        with self._lock:
            adjusted, offset = self._slot()
            # Once the clock has moved a whole window past the last write, or
            # wrapped around the ring, the buckets no longer describe the present.
            if adjusted - self._last_time < self._size and offset >= self._last_offset:
                for bucket in self._buckets:
                    fn(bucket)

    def _slot(self) -> tuple[int, int]:
        adjusted = self._clock() // self._duration_ns
        return adjusted, adjusted % self._size

    def _update_offset(self) -> None:
        adjusted, offset = self._slot()
        elapsed = adjusted - self._last_time

        if elapsed > self._size:
            for bucket in self._buckets:
                bucket._reset()

        if adjusted != self._last_time and elapsed < self._size:
            self._reset_buckets_up_to(offset)

        if adjusted != self._last_time:
            self._last_time = adjusted
            self._last_offset = offset

    def _reset_buckets_up_to(self, offset: int) -> None:
        distance = offset - self._last_offset
        if distance < 0:
            distance = (self._size - self._last_offset) + offset
        for step in range(1, distance + 1):
            self._buckets[(step + self._last_offset) % self._size]._reset()
"""Byte buffers with a tracked capacity, and pools for reusing them."""

from __future__ import annotations

import threading
from collections import deque


class Buffer:
    """A growable byte buffer that keeps track of its reserved capacity."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray()
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold without growing."""
        return self._capacity

    def write(self, data: bytes) -> int:
        """Append data, growing if needed; return the number of bytes written."""
        self.grow(len(data))
        self._data.extend(data)
        return len(data)

    def grow(self, n: int) -> None:
        """Make room for at least n more bytes."""
        if n < 0:
            raise ValueError("cannot grow buffer by a negative count")
        needed = len(self._data) + n
        if needed > self._capacity:
            self._capacity = max(2 * self._capacity + n, needed)

    def reset(self) -> None:
        """Empty the buffer, keeping its capacity."""
        self._data.clear()

    def getvalue(self) -> bytes:
        """Return the buffered bytes."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)


class BufferPool:
    """An unbounded pool of buffers; oversized buffers are not kept."""

    def __init__(self, alloc: int) -> None:
        self._alloc = alloc
        self._buffers: list[Buffer] = []
        self._lock = threading.Lock()

    @property
    def alloc(self) -> int:
        """Initial capacity of new buffers."""
        return self._alloc

    def get(self) -> Buffer:
        """Take a buffer from the pool, or make a new one."""
        with self._lock:
            if self._buffers:
                return self._buffers.pop()
        return Buffer(self._alloc)

    def put(self, buffer: Buffer) -> None:
        """Return a buffer to the pool unless it grew beyond alloc."""
        if buffer.capacity <= self._alloc:
            buffer.reset()
            with self._lock:
                self._buffers.append(buffer)


class SizedBufferPool:
    """A pool retaining at most ``size`` buffers of ``alloc`` initial capacity."""

    def __init__(self, size: int, alloc: int) -> None:
        self._size = size
        self._alloc = alloc
        self._buffers: deque[Buffer] = deque()
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return self._size

    @property
    def alloc(self) -> int:
        return self._alloc

    def get(self) -> Buffer:
        """Reuse a pooled buffer if one is available, else create a new one."""
        with self._lock:
            if self._buffers:
                return self._buffers.popleft()
        return Buffer(self._alloc)

    def put(self, buffer: Buffer) -> None:
        """Return a buffer; oversized ones are replaced by a fresh buffer."""
        with self._lock:
            if buffer.capacity > self._alloc:
                if len(self._buffers) >= self._size:
                    return
                buffer = Buffer(self._alloc)
            else:
                buffer.reset()
            if len(self._buffers) < self._size:
                self._buffers.append(buffer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)
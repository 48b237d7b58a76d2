"""A thread-safe least-recently-used cache."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional

EvictCallback = Callable[[Hashable, Any], None]


class LRUCache:
    """LRU cache; ``max_entries`` of zero means no limit."""

    def __init__(self, max_entries: int = 0, on_evicted: Optional[EvictCallback] = None) -> None:
        self.max_entries = max_entries
        self.on_evicted = on_evicted
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()

    def add(self, key: Hashable, value: Any) -> None:
        """Store a value, marking it most recently used and evicting if full."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._entries[key] = value
                return
            self._entries[key] = value
            if self.max_entries and len(self._entries) > self.max_entries:
                self._evict(next(iter(self._entries)))

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for key (marking it recently used), or default."""
        with self._lock:
            if key not in self._entries:
                return default
            self._entries.move_to_end(key)
            return self._entries[key]

    def remove(self, key: Hashable) -> None:
        """Remove key if present."""
        with self._lock:
            if key in self._entries:
                self._evict(key)

    def remove_oldest(self) -> None:
        """Remove the least recently used entry, if any."""
        with self._lock:
            if self._entries:
                self._evict(next(iter(self._entries)))

    def _evict(self, key: Hashable) -> None:
        value = self._entries.pop(key)
        if self.on_evicted is not None:
            self.on_evicted(key, value)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop every entry, reporting each to the eviction callback."""
        with self._lock:
            if self.on_evicted is not None:
                for key, value in self._entries.items():
                    self.on_evicted(key, value)
            self._entries = OrderedDict()
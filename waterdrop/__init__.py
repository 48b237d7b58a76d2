"""Small utilities for services: buffer pools, an LRU cache, rolling windows, a keyword trie, list helpers, jitter, time and IP helpers."""

__version__ = "1.3.6"
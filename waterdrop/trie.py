"""A keyword trie that finds and masks sensitive words in text."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional

DEFAULT_MASK = "*"


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    end: bool = False


class Trie:
    """A thread-safe trie of keywords; matches in text are replaced by ``mask``."""

    def __init__(self, keywords: Optional[Iterable[str]] = None, mask: str = DEFAULT_MASK) -> None:
        if len(mask) != 1:
            raise ValueError("mask must be a single character")
        self._root = _Node()
        self._mask = mask
        self._lock = threading.RLock()
        for keyword in keywords or ():
            self.add(keyword)

    @property
    def mask(self) -> str:
        return self._mask

    def add(self, keyword: str) -> None:
        """Insert a keyword."""
        if not keyword:
            return
        with self._lock:
            node = self._root
            for char in keyword:
                node = node.children.setdefault(char, _Node())
            node.end = True

    def delete(self, keyword: str) -> None:
        """Unmark a keyword; its nodes are kept in the trie."""
        if not keyword:
            return
        with self._lock:
            node = self._root
            for char in keyword:
                child = node.children.get(char)
                if child is None:
                    return
                node = child
            node.end = False

    def delete_all(self) -> None:
        """Remove every keyword."""
        with self._lock:
            self._root = _Node()

    def query(self, text: str) -> tuple[str, list[str], bool]:
        """Return (masked text, keywords found, whether any were found)."""
        if not text:
            return "", [], False
        chars = list(text)
        keywords: list[str] = []
        with self._lock:
            root = self._root
            for i, char in enumerate(chars):
                node = root.children.get(char)
                if node is None:
                    continue
                for j in range(i + 1, len(chars)):
                    node = node.children.get(chars[j])
                    if node is None:
                        break
                    if node.end:
                        keywords.append("".join(chars[i : j + 1]))
                        chars[i : j + 1] = self._mask * (j + 1 - i)
        return "".join(chars), keywords, bool(keywords)

    def query_all(self) -> list[str]:
        """Return every keyword stored in the trie."""
        with self._lock:
            return list(self._walk(self._root, ""))

    def _walk(self, node: _Node, prefix: str):
        for char, child in node.children.items():
            word = prefix + char
            if child.end:
                yield word
            if child.children:
                yield from self._walk(child, word)
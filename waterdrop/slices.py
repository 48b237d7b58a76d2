"""List helpers: membership, removal, set-like operations, merging and sorting.

Equality is tested with ``==``, so a NaN never matches anything, not even itself.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def contain(values: Iterable[T], target: T) -> bool:
    """Return True if any element equals target."""
    return any(value == target for value in values)


def remove(values: Iterable[T], target: T) -> List[T]:
    """Return a new list without the elements equal to target."""
    return [value for value in values if value != target]


def reverse(values: List[T]) -> List[T]:
    """Reverse the list in place and return it."""
    values.reverse()
    return values


def diff(first: Iterable[T], second: Sequence[T]) -> List[T]:
    """Return the elements of first that do not occur in second, in order."""
    return [value for value in first if not contain(second, value)]


def intersect(first: Iterable[T], second: Sequence[T]) -> List[T]:
    """Return the elements of first that also occur in second, in order."""
    return [value for value in first if contain(second, value)]


def unique(values: Iterable[Hashable]) -> List[Any]:
    """Return the distinct elements, each at the place it first appears."""
    return list(dict.fromkeys(values))


def merge(first: List[T], *args: Iterable[T]) -> List[T]:
    """Concatenate lists; with nothing to add, first itself is returned."""
    if not args:
        return first
    merged = list(first)
    for extra in args:
        merged.extend(extra)
    return merged


def sort_values(values: List[T]) -> List[T]:
    """Sort the list in place in ascending order and return it."""
    values.sort()
    return values
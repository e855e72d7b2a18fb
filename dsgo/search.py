"""Binary searches, ordered insertion and selection on sorted sequences."""

from __future__ import annotations

import bisect
from typing import Any, MutableSequence, Sequence


def search(values: Sequence[Any], key: Any) -> int:
    """Return an index holding ``key`` (not necessarily the first), or -1."""
    low, high = 0, len(values)
    while low < high:
        mid = low + (high - low) // 2
        if values[mid] < key:
            low = mid + 1
        elif key < values[mid]:
            high = mid
        else:
            return mid
    return -1


def search_successor(values: Sequence[Any], key: Any) -> int:
    """Return the index of the first item greater than ``key``."""
    return bisect.bisect_right(values, key)


def search_first_ge(values: Sequence[Any], key: Any) -> int:
    """Return the index of the first item greater than or equal to ``key``."""
    return bisect.bisect_left(values, key)


def search_last_le(values: Sequence[Any], key: Any) -> int:
    """Return the index of the last item less than or equal to ``key``, or -1."""
    return bisect.bisect_right(values, key) - 1


def search_range(values: Sequence[Any], key: Any) -> tuple[int, int] | None:
    """Return the inclusive index range holding ``key``, or None if absent."""
    last = search_last_le(values, key)
    if last == -1 or values[last] != key:
        return None
    return search_first_ge(values, key), last


def insert(values: list[Any], key: Any) -> int:
    """Insert ``key`` into the sorted list after any equal items; return its index."""
    spot = search_successor(values, key)
    values.insert(spot, key)
    return spot


def pick(values: MutableSequence[Any], k: int) -> Any:
    """Return the k-th smallest item (1-based), reordering ``values`` in place."""
    if k <= 0 or k > len(values):
        raise IndexError("out of range")
    begin, end = 0, len(values)
    while begin < end - 1:
        pivot = values[(begin + end) // 2]
        a, b = begin, end - 1
        while True:
            while values[a] < pivot:
                a += 1
            while pivot < values[b]:
                b -= 1
            if a >= b:
                break
            values[a], values[b] = values[b], values[a]
            a += 1
            b -= 1
        if k <= a:
            end = a
        else:
            begin = a
    return values[k - 1]
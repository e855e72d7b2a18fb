"""Elementary in-place sorts: bubble, selection, insertion variants and heap sort."""

from __future__ import annotations

import bisect
from typing import Any, MutableSequence, Sequence


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(not b < a for a, b in zip(values, values[1:]))


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Stable bubble sort: O(N^2) comparisons and moves."""
    size = len(values)
    for i in range(size - 1):
        for j in range(size - 1, i, -1):
            if values[j] < values[j - 1]:
                values[j], values[j - 1] = values[j - 1], values[j]


def select_sort(values: MutableSequence[Any]) -> None:
    """Unstable selection sort: O(N^2) comparisons, O(N) moves."""
    size = len(values)
    for i in range(size - 1):
        pos = i
        for j in range(i + 1, size):
            if values[j] < values[pos]:
                pos = j
        values[pos], values[i] = values[i], values[pos]


def insert_sort(values: MutableSequence[Any]) -> None:
    """Stable binary insertion sort: O(N log N) comparisons, O(N^2) moves."""
    for i in range(1, len(values)):
        key = values[i]
        spot = bisect.bisect_right(values, key, 0, i)
        values[spot + 1 : i + 1] = values[spot:i]
        values[spot] = key


def simple_sort(values: MutableSequence[Any]) -> None:
    """Stable linear insertion sort, fast on short or nearly sorted input."""
    if len(values) < 2:
        return
    for i in range(1, len(values)):
        key = values[i]
        if key < values[0]:
            values[1 : i + 1] = values[0:i]
            values[0] = key
        else:
            pos = i
            while key < values[pos - 1]:
                values[pos] = values[pos - 1]
                pos -= 1
            values[pos] = key


def simple_sort_v2(values: MutableSequence[Any]) -> None:
    """Insertion sort that first moves the minimum to the front as a sentinel."""
    if len(values) < 2:
        return
    best = 0
    for i in range(1, len(values)):
        if values[i] < values[best]:
            best = i
    values[0], values[best] = values[best], values[0]
    for i in range(1, len(values)):
        key, pos = values[i], i
        while key < values[pos - 1]:
            values[pos] = values[pos - 1]
            pos -= 1
        values[pos] = key


def _sift_down(values: MutableSequence[Any], size: int, pos: int) -> None:
    key = values[pos]
    kid, last = pos * 2 + 1, size - 1
    while kid < last:
        if values[kid] < values[kid + 1]:
            kid += 1
        if not key < values[kid]:
            break
        values[pos] = values[kid]
        pos, kid = kid, kid * 2 + 1
    if kid == last and key < values[kid]:
        values[pos] = values[kid]
        pos = kid
    values[pos] = key


def heap_sort(values: MutableSequence[Any]) -> None:
    """Unstable heap sort: O(N log N) time and O(1) extra space."""
    size = len(values)
    for idx in range(size // 2 - 1, -1, -1):
        _sift_down(values, size, idx)
    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)
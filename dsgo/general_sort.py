"""Introspective sort driven by a caller-supplied ``less`` predicate."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

Less = Callable[[Any, Any], bool]

_LOWER_BOUND = 16


def sort_with(values: MutableSequence[Any], less: Less) -> None:
    """Sort ``values`` in place so that ``less`` never holds for a later item.

    Unstable; O(N log N) in the worst case.
    """
    life = len(values).bit_length() * 2
    _intro_sort(values, 0, len(values), life, less)


def _intro_sort(values: MutableSequence[Any], lo: int, hi: int, life: int, less: Less) -> None:
    if hi - lo < _LOWER_BOUND:
        _simple_sort(values, lo, hi, less)
        return
    life -= 1
    if life < 0:
        _heap_sort(values, lo, hi, less)
        return
    mid = _partition(values, lo, hi, less)
    _intro_sort(values, lo, mid, life, less)
    _intro_sort(values, mid, hi, life, less)


def _simple_sort(values: MutableSequence[Any], lo: int, hi: int, less: Less) -> None:
    for i in range(lo + 1, hi):
        key = values[i]
        if less(key, values[lo]):
            values[lo + 1 : i + 1] = values[lo:i]
            values[lo] = key
        else:
            pos = i
            while less(key, values[pos - 1]):
                values[pos] = values[pos - 1]
                pos -= 1
            values[pos] = key


def _heap_down(values: MutableSequence[Any], lo: int, size: int, pos: int, less: Less) -> None:
    key = values[lo + pos]
    kid, last = pos * 2 + 1, size - 1
    while kid < last:
        if less(values[lo + kid], values[lo + kid + 1]):
            kid += 1
        if not less(key, values[lo + kid]):
            break
        values[lo + pos] = values[lo + kid]
        pos, kid = kid, kid * 2 + 1
    if kid == last and less(key, values[lo + kid]):
        values[lo + pos] = values[lo + kid]
        pos = kid
    values[lo + pos] = key


def _heap_sort(values: MutableSequence[Any], lo: int, hi: int, less: Less) -> None:
    size = hi - lo
    for idx in range(size // 2 - 1, -1, -1):
        _heap_down(values, lo, size, idx, less)
    for end in range(size - 1, 0, -1):
        values[lo], values[lo + end] = values[lo + end], values[lo]
        _heap_down(values, lo, end, 0, less)


def _partition(values: MutableSequence[Any], lo: int, hi: int, less: Less) -> int:
    pivot = values[lo + (hi - lo) // 2]
    a, b = lo, hi - 1
    while True:
        while less(values[a], pivot):
            a += 1
        while less(pivot, values[b]):
            b -= 1
        if a >= b:
            break
        values[a], values[b] = values[b], values[a]
        a += 1
        b -= 1
    return a
"""Stable merge sorts: a top-down ping-pong merge sort and an in-place symmerge sort."""

from __future__ import annotations

from typing import Any, MutableSequence

from dsgo.basic_sort import simple_sort

_LOWER_BOUND = 16


def _simple_sort_range(values: MutableSequence[Any], lo: int, hi: int) -> None:
    chunk = list(values[lo:hi])
    simple_sort(chunk)
    values[lo:hi] = chunk


def merge_sort(values: MutableSequence[Any]) -> None:
    """Stable merge sort using O(N) extra space."""
    if len(values) < _LOWER_BOUND:
        simple_sort(values)
        return
    scratch = list(values)
    _merge_sort(scratch, values, 0, len(values))


def _merge_sort(src: MutableSequence[Any], dst: MutableSequence[Any], lo: int, hi: int) -> None:
    # src and dst hold the same items on [lo, hi); leaves dst[lo:hi] sorted.
    if hi - lo < _LOWER_BOUND:
        chunk = list(src[lo:hi])
        simple_sort(chunk)
        dst[lo:hi] = chunk
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(dst, src, lo, mid)
    _merge_sort(dst, src, mid, hi)

    i, j, pos = lo, mid, lo
    while i < mid and j < hi:
        if src[j] < src[i]:
            dst[pos] = src[j]
            j += 1
        else:
            dst[pos] = src[i]
            i += 1
        pos += 1
    dst[pos:hi] = list(src[i:mid]) + list(src[j:hi])


def sym_merge_sort(values: MutableSequence[Any]) -> None:
    """Stable bottom-up merge sort that merges in place by rotations."""
    size = len(values)
    step = _LOWER_BOUND
    a, b = 0, step
    while b <= size:
        _simple_sort_range(values, a, b)
        a, b = b, b + step
    _simple_sort_range(values, a, size)

    while step < size:
        a, b = 0, step * 2
        while b <= size:
            _symmerge(values, a, b, step)
            a, b = b, b + step * 2
        if a + step < size:
            _symmerge(values, a, size, step)
        step *= 2


def _rotate(values: MutableSequence[Any], lo: int, hi: int, border: int) -> None:
    values[lo:hi] = list(values[border:hi]) + list(values[lo:border])


def _symmerge(values: MutableSequence[Any], lo: int, hi: int, border: int) -> None:
    """Merge the sorted runs values[lo:lo+border] and values[lo+border:hi]."""
    size = hi - lo

    if border == 1:
        curr = values[lo]
        a, b = 1, size
        while a < b:
            m = (a + b) // 2
            if values[lo + m] < curr:
                a = m + 1
            else:
                b = m
        values[lo : lo + a - 1] = values[lo + 1 : lo + a]
        values[lo + a - 1] = curr
        return

    if border == size - 1:
        curr = values[lo + border]
        a, b = 0, border
        while a < b:
            m = (a + b) // 2
            if curr < values[lo + m]:
                b = m
            else:
                a = m + 1
        values[lo + a + 1 : lo + border + 1] = values[lo + a : lo + border]
        values[lo + a] = curr
        return

    half = size // 2
    n = border + half
    a, b = 0, border
    if border > half:
        a, b = n - size, half
    p = n - 1
    while a < b:
        m = (a + b) // 2
        if values[lo + p - m] < values[lo + m]:
            b = m
        else:
            a = m + 1
    b = n - a
    if a < border < b:
        _rotate(values, lo + a, lo + b, lo + border)
    if 0 < a < half:
        _symmerge(values, lo, lo + half, a)
    if half < b < size:
        _symmerge(values, lo + half, hi, b - half)
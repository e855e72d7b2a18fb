"""Stable LSD radix sort for fixed-width integers."""

from __future__ import annotations

from typing import MutableSequence

_RADIX_BITS = 8
_BUCKETS = 1 << _RADIX_BITS


def radix_sort(values: MutableSequence[int], bits: int = 64, signed: bool = False) -> None:
    """Sort integers of the given width in place, one byte per pass.

    ``bits`` must be a positive multiple of 8; every value must fit in that
    width, as a two's-complement number when ``signed`` is set.
    """
    if bits <= 0 or bits % _RADIX_BITS:
        raise ValueError("bits must be a positive multiple of 8")
    offset = 1 << (bits - 1) if signed else 0
    low, high = -offset, (1 << bits) - 1 - offset
    for value in values:
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in {bits} bits")

    keys = [value + offset for value in values]
    for shift in range(0, bits, _RADIX_BITS):
        buckets: list[list[int]] = [[] for _ in range(_BUCKETS)]
        for key in keys:
            buckets[(key >> shift) & (_BUCKETS - 1)].append(key)
        keys = [key for bucket in buckets for key in bucket]
    values[:] = [key - offset for key in keys]
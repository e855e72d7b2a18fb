"""Random permutations and small list helpers."""

from __future__ import annotations

import random
from typing import Any


def random_shuffle(values: list[Any]) -> None:
    """Permute ``values`` uniformly at random in place."""
    random.shuffle(values)


def random_partition(values: list[Any], n: int) -> None:
    """Move a uniformly random choice of ``n`` items to the front of ``values``.

    Nothing happens unless ``0 < n < len(values)``.
    """
    if 0 < n < len(values):
        for i in range(n, len(values)):
            j = random.randrange(i + 1)
            values[i], values[j] = values[j], values[i]


def random_ints(n: int, m: int) -> list[int]:
    """Return ``m`` distinct random integers from ``range(n)``.

    Cheaper than a partition when ``m`` is much smaller than ``n``. Returns an
    empty list unless ``0 < m < n``.
    """
    if m <= 0 or n <= m:
        return []
    picked: list[int] = []
    swapped: dict[int, int] = {}
    while m > 0:
        i = random.randrange(n)
        chosen = swapped.get(i, i)
        if i != n - 1:
            swapped[i] = swapped.get(n - 1, n - 1)
        n -= 1
        m -= 1
        picked.append(chosen)
    picked.reverse()
    return picked


def reverse(values: list[Any]) -> None:
    """Reverse ``values`` in place."""
    values.reverse()


def insert_to(values: list[Any], pos: int, value: Any) -> None:
    """Insert ``value`` at ``pos``, which may be anywhere from 0 to ``len(values)``."""
    if pos < 0 or pos > len(values):
        raise IndexError("illegal pos")
    values.insert(pos, value)


def erase_from(values: list[Any], pos: int, keep_order: bool) -> None:
    """Remove the item at ``pos``.

    Without ``keep_order`` the last item fills the gap instead of shifting.
    """
    if pos < 0 or pos >= len(values):
        raise IndexError("illegal pos")
    if keep_order:
        del values[pos]
    else:
        values[pos] = values[-1]
        values.pop()
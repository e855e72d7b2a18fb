"""Minimal-collision perfect hashing of a fixed key set (BDZ construction)."""

from __future__ import annotations

import logging
import secrets
from typing import Sequence

from dsgo.hashing import hash128

_log = logging.getLogger(__name__)

_MAX_KEYS = 0x7FFFFFFF
_TRIES = 8
_UNSET = 3


class PerfectHashError(Exception):
    """Raised when no perfect hash can be built for the given keys."""


class PerfectHasher:
    """Maps each key of a fixed set to its own slot in ``range(3 * width)``.

    The keys are edges of a random 3-uniform hypergraph; peeling that graph
    and assigning two-bit values to its vertices selects one distinct vertex
    per key. Keys outside the set hash to some slot as well.
    """

    def __init__(self, keys: Sequence[str]) -> None:
        keys = list(keys)
        if len(keys) > _MAX_KEYS:
            raise PerfectHashError("too many keys")
        self._width = ((len(keys) * 105 + 255) // 256) | 1
        slot_count = self._width * 3

        for attempt in range(_TRIES):
            self._seed = secrets.randbits(32)
            if attempt:
                _log.debug("retry with seed %x", self._seed)
            edges = [self._slots(key) for key in keys]
            order = _peel(edges, slot_count)
            if len(order) == len(edges):
                self._marks = _assign(edges, order, slot_count)
                return
        raise PerfectHashError("cannot build a perfect hash for these keys")

    def _slots(self, key: str) -> tuple[int, int, int]:
        a, b = hash128(self._seed, key)
        w = self._width
        return (
            (a & 0xFFFFFFFF) % w,
            ((a >> 32) & 0xFFFFFFFF) % w + w,
            (b & 0xFFFFFFFF) % w + w * 2,
        )

    def hash(self, key: str) -> int:
        slots = self._slots(key)
        mark = sum(self._marks[slot] for slot in slots)
        return slots[mark % 3]


def _peel(edges: list[tuple[int, int, int]], slot_count: int) -> list[int]:
    """Return edges in the order they can be peeled off through degree-one vertices."""
    degree = [0] * slot_count
    # XOR of incident edge numbers: names the last edge once degree reaches one.
    incident = [0] * slot_count
    for e, slots in enumerate(edges):
        for slot in slots:
            degree[slot] += 1
            incident[slot] ^= e

    queued = bytearray(len(edges))
    order: list[int] = []
    for e in reversed(range(len(edges))):
        if any(degree[slot] == 1 for slot in edges[e]):
            queued[e] = 1
            order.append(e)

    head = 0
    while head < len(order):
        e = order[head]
        head += 1
        for slot in edges[e]:
            degree[slot] -= 1
            incident[slot] ^= e
            if degree[slot] == 1:
                other = incident[slot]
                if not queued[other]:
                    queued[other] = 1
                    order.append(other)
    return order


def _assign(edges: list[tuple[int, int, int]], order: list[int], slot_count: int) -> bytearray:
    """Give each edge a free vertex, so that the marks of its vertices sum to that vertex."""
    marks = bytearray([_UNSET]) * slot_count
    visited = bytearray(slot_count)
    for e in reversed(order):
        v0, v1, v2 = edges[e]
        if not visited[v0]:
            visited[v0] = visited[v1] = visited[v2] = 1
            marks[v0] = (6 - (marks[v1] + marks[v2])) % 3
        elif not visited[v1]:
            visited[v1] = visited[v2] = 1
            marks[v1] = (7 - (marks[v0] + marks[v2])) % 3
        elif not visited[v2]:
            visited[v2] = 1
            marks[v2] = (8 - (marks[v0] + marks[v1])) % 3
        else:
            raise PerfectHashError("all nodes are occupied")
    return marks
"""A string set with separate chaining and incremental rehashing."""

from __future__ import annotations

import bisect

from dsgo.hashing import hash32

# Bucket counts, the same prime sequence as common STL hash tables.
_PRIMES = (
    17, 29, 53, 97, 193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317, 196613,
    393241, 786433, 1572869, 3145739, 6291469, 12582917, 25165843, 50331653, 1610612741,
)


def _hash(key: str) -> int:
    return hash32(0, key)


class ChainedSet:
    """A string set whose resizing is spread out over later operations.

    When the table grows or shrinks, the old table is kept and one of its
    rows is moved into the new table on every search, insert or remove.
    """

    def __init__(self) -> None:
        self._buckets: list[list[str]] = []
        self._old: list[list[str]] = []
        self._next_line = 0
        self._size = 0
        self.clear()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._buckets = [[] for _ in range(_PRIMES[0])]
        self._old = []
        self._next_line = 0
        self._size = 0

    def _is_moving(self) -> bool:
        return bool(self._old)

    def _is_crowded(self) -> bool:
        return self._size * 2 > len(self._buckets) * 3

    def _is_wasteful(self) -> bool:
        return self._size * 10 < len(self._buckets)

    def _resize(self, count: int) -> None:
        self._old, self._buckets = self._buckets, [[] for _ in range(count)]
        self._next_line = 0

    def _move_line(self) -> None:
        width = len(self._buckets)
        for key in self._old[self._next_line]:
            self._buckets[_hash(key) % width].append(key)
        self._old[self._next_line] = []
        self._next_line += 1
        if self._next_line == len(self._old):
            self._next_line = 0
            self._old = []

    def search(self, key: str) -> bool:
        code = _hash(key)
        found = key in self._buckets[code % len(self._buckets)]
        if self._is_moving():
            if not found:
                found = key in self._old[code % len(self._old)]
            self._move_line()
        return found

    def insert(self, key: str) -> bool:
        """Add ``key``; return False if it was already present."""
        code = _hash(key)
        bucket = self._buckets[code % len(self._buckets)]
        conflict = key in bucket
        if self._is_moving():
            if not conflict:
                conflict = key in self._old[code % len(self._old)]
            self._move_line()
        if conflict:
            return False
        bucket.append(key)
        self._size += 1
        if not self._is_moving() and self._is_crowded():
            idx = bisect.bisect_right(_PRIMES, len(self._buckets))
            if idx < len(_PRIMES):
                self._resize(_PRIMES[idx])
        return True

    def remove(self, key: str) -> bool:
        """Remove ``key``; return False if it was absent."""
        code = _hash(key)
        done = _discard(self._buckets[code % len(self._buckets)], key)
        if self._is_moving():
            if not done:
                done = _discard(self._old[code % len(self._old)], key)
            self._move_line()
        if done:
            self._size -= 1
            if not self._is_moving() and self._is_wasteful():
                idx = bisect.bisect_left(_PRIMES, len(self._buckets)) - 1
                if idx >= 0:
                    self._resize(_PRIMES[idx])
        return done


def _discard(bucket: list[str], key: str) -> bool:
    try:
        bucket.remove(key)
    except ValueError:
        return False
    return True
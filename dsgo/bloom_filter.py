"""A Bloom filter for strings, split into fixed-size pieces with eight probes per key."""

from __future__ import annotations

import time

from dsgo.hashing import hash160

PIECE_SIZE = 1 << 13
PIECE_CAPACITY = PIECE_SIZE * 2 // 5

_MAX_CAPACITY = 0xFFFFFFFF
_SEED_MASK = 0xFFFFFFFFFFFFFFFF


class BloomFilter:
    """A probabilistic string set: no false negatives, rare false positives.

    Each piece is an 8 KiB bit array meant for about four thousand keys; a
    key hashes to one piece and sets eight bits in it. With this load the
    expected false-positive rate is below one in ten thousand.
    """

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= _MAX_CAPACITY:
            raise ValueError("capacity must be between 0 and 2**32 - 1")
        capacity = max(capacity, 1)
        count = (capacity + PIECE_CAPACITY - 1) // PIECE_CAPACITY
        self._pieces = [bytearray(PIECE_SIZE) for _ in range(count)]
        self._size = 0
        self._seed = time.time_ns() & _SEED_MASK

    def __len__(self) -> int:
        """Number of insertions that set at least one new bit."""
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def capacity(self) -> int:
        return len(self._pieces) * PIECE_CAPACITY

    def _locate(self, key: str) -> tuple[bytearray, list[tuple[int, int]]]:
        a, b, z = hash160(self._seed, key)
        piece = self._pieces[(z & 0xFFFFFFFF) % len(self._pieces)]
        probes = [(word >> shift) & 0xFFFF for word in (a, b) for shift in (0, 16, 32, 48)]
        return piece, [(probe >> 3, 1 << (probe & 7)) for probe in probes]

    def insert(self, key: str) -> None:
        piece, probes = self._locate(key)
        missed = False
        for pos, mask in probes:
            if not piece[pos] & mask:
                piece[pos] |= mask
                missed = True
        if missed:
            self._size += 1

    def search(self, key: str) -> bool:
        """Return False if ``key`` was surely never inserted, True if it may have been."""
        piece, probes = self._locate(key)
        return all(piece[pos] & mask for pos, mask in probes)
"""A set of strings kept in four cuckoo hash tables."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Optional

from dsgo.hashing import hash128

_WAYS = 4


@dataclass(frozen=True)
class _Entry:
    key: str
    code: tuple[int, int, int, int]


def _hash(key: str) -> tuple[int, int, int, int]:
    a, b = hash128(0, key)
    return (a & 0xFFFFFFFF, a >> 32, b & 0xFFFFFFFF, b >> 32)


class CuckooSet:
    """A string set using four cuckoo tables, each with its own hash word.

    Tables have power-of-two sizes; when an insertion cycles back to the new
    key, the smallest table grows sixteenfold and becomes the master.
    """

    def __init__(self) -> None:
        self._tables: list[list[Optional[_Entry]]] = []
        self._master = 0
        self._size = 0
        self._full = 0
        self.clear()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._master = 0
        self._size = 0
        # Table 3 is the smallest (4 slots), table 0 the largest (32 slots).
        self._tables = [[None] * (4 << (3 - i)) for i in range(_WAYS)]
        self._full = len(self._tables[0]) * 3 // 2

    def _find(self, key: str, erase: bool) -> bool:
        code = _hash(key)
        for step in range(_WAYS):
            idx = (self._master + step) % _WAYS
            table = self._tables[idx]
            pos = code[idx] & (len(table) - 1)
            target = table[pos]
            if target is not None and target.code == code and target.key == key:
                if erase:
                    table[pos] = None
                return True
        return False

    def search(self, key: str) -> bool:
        return self._find(key, erase=False)

    def remove(self, key: str) -> bool:
        """Remove ``key``; return False if it was absent."""
        if self._find(key, erase=True):
            self._size -= 1
            return True
        return False

    def insert(self, key: str) -> bool:
        """Add ``key``; return False if it was already present.

        Raises RuntimeError if the key cannot be placed even after growing.
        """
        if self._find(key, erase=False):
            return False
        self._size += 1

        fresh = _Entry(key, _hash(key))
        item = fresh
        for attempt in count():
            idx, tries = self._master, 0
            while tries < _WAYS:
                table = self._tables[idx]
                pos = item.code[idx] & (len(table) - 1)
                occupant = table[pos]
                if occupant is None:
                    table[pos] = item
                    return True
                table[pos], item = item, occupant
                if item is fresh:
                    if self._size > self._full:
                        break
                    tries += 1
                idx = (idx + 1) % _WAYS

            if attempt > 0:
                raise RuntimeError("too many conflicts")
            self._expand()
        raise AssertionError("unreachable")

    def _expand(self) -> None:
        self._master = (self._master + 3) % _WAYS
        old = self._tables[self._master]
        table: list[Optional[_Entry]] = [None] * (len(old) << 4)
        mask = len(table) - 1
        for entry in old:
            if entry is not None:
                # The old slot's bits are kept, so entries never collide here.
                table[entry.code[self._master] & mask] = entry
        self._tables[self._master] = table
        self._full = len(table) * 3 // 2
"""Mergeable binomial min-heap."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Any, Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Tree:
    key: Any
    children: list[_Tree] = field(default_factory=list)  # by increasing order

    @property
    def level(self) -> int:
        return len(self.children)


def _link(a: _Tree, b: _Tree) -> _Tree:
    if b.key < a.key:
        a, b = b, a
    a.children.append(b)
    return a


def _union(*forests: Iterable[_Tree]) -> list[_Tree]:
    slots: dict[int, _Tree] = {}
    for tree in chain(*forests):
        while tree.level in slots:
            tree = _link(slots.pop(tree.level), tree)
        slots[tree.level] = tree
    return [slots[level] for level in sorted(slots)]


class BinomialHeap(Generic[T]):
    """A min-heap with O(1) ``top`` and O(log N) ``push``, ``pop`` and ``merge``."""

    def __init__(self) -> None:
        self._roots: list[_Tree] = []
        self._top: _Tree | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return not self._roots

    def clear(self) -> None:
        self._roots = []
        self._top = None
        self._size = 0

    def top(self) -> T:
        if self._top is None:
            raise IndexError("empty heap")
        return self._top.key

    def push(self, key: T) -> None:
        tree = _Tree(key)
        if self._top is None or key < self._top.key:
            self._top = tree
        self._roots = _union(self._roots, [tree])
        self._size += 1

    def pop(self) -> T:
        if self._top is None:
            raise IndexError("empty heap")
        top = self._top
        remaining = [tree for tree in self._roots if tree is not top]
        self._roots = _union(remaining, top.children)
        self._top = min(self._roots, key=lambda tree: tree.key, default=None)
        self._size -= 1
        return top.key

    def merge(self, other: BinomialHeap[T]) -> None:
        """Move every item of ``other`` into this heap, leaving ``other`` empty."""
        if other is self or other._top is None:
            return
        if self._top is None or other._top.key < self._top.key:
            self._top = other._top
        self._roots = _union(self._roots, other._roots)
        self._size += other._size
        other.clear()
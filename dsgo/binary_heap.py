"""Array-backed binary min-heaps: one for plain values, one for nodes with a custom order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """A min-heap of comparable items.

    Building from a sequence is O(N); ``top`` is O(1); ``push`` and ``pop``
    are O(log N).
    """

    def __init__(self) -> None:
        self._vec: list[T] = []

    def __len__(self) -> int:
        return len(self._vec)

    def is_empty(self) -> bool:
        return not self._vec

    def clear(self) -> None:
        self._vec.clear()

    def top(self) -> T:
        if not self._vec:
            raise IndexError("empty heap")
        return self._vec[0]

    def build_in_place(self, values: list[T]) -> None:
        """Adopt ``values`` as the heap's storage and heapify it."""
        self._vec = values
        for idx in range(len(values) // 2 - 1, -1, -1):
            self._down(idx)

    def build(self, values: Iterable[T]) -> None:
        """Replace the heap's content with a copy of ``values``."""
        self.build_in_place(list(values))

    def push(self, item: T) -> None:
        self._vec.append(item)
        self._up(len(self._vec) - 1)

    def pop(self) -> T:
        if not self._vec:
            raise IndexError("empty heap")
        item = self._vec[0]
        last = self._vec.pop()
        if self._vec:
            self._vec[0] = last
            self._down(0)
        return item

    def _down(self, pos: int) -> None:
        vec = self._vec
        target = vec[pos]
        kid, last = pos * 2 + 1, len(vec) - 1
        while kid < last:
            if vec[kid + 1] < vec[kid]:
                kid += 1
            if not vec[kid] < target:
                break
            vec[pos] = vec[kid]
            pos, kid = kid, kid * 2 + 1
        if kid == last and vec[kid] < target:
            vec[pos], pos = vec[kid], kid
        vec[pos] = target

    def _up(self, pos: int) -> None:
        vec = self._vec
        target = vec[pos]
        while pos > 0:
            parent = (pos - 1) // 2
            if not target < vec[parent]:
                break
            vec[pos], pos = vec[parent], parent
        vec[pos] = target


@dataclass(eq=False)
class HeapNode(Generic[T]):
    """A value held by a :class:`NodeHeap`; the node tracks its own slot."""

    val: Any
    pos: int = field(default=-1, repr=False)


class NodeHeap(Generic[T]):
    """A binary min-heap of :class:`HeapNode` ordered by ``less(a.val, b.val)``.

    A node whose value has decreased can be moved up with :meth:`float_up`.
    """

    def __init__(self, less: Callable[[Any, Any], bool]) -> None:
        self._less = less
        self._vec: list[HeapNode] = []

    def __len__(self) -> int:
        return len(self._vec)

    def is_empty(self) -> bool:
        return not self._vec

    def clear(self) -> None:
        for node in self._vec:
            node.pos = -1
        self._vec.clear()

    def push(self, node: HeapNode | None) -> None:
        if node is None:
            return
        self._vec.append(node)
        self._sift_up(len(self._vec) - 1)

    def top(self) -> HeapNode | None:
        return self._vec[0] if self._vec else None

    def pop(self) -> HeapNode | None:
        if not self._vec:
            return None
        node = self._vec[0]
        last = self._vec.pop()
        if self._vec:
            self._vec[0] = last
            self._sift_down(0)
        node.pos = -1
        return node

    def float_up(self, node: HeapNode | None) -> None:
        """Restore heap order after ``node``'s value has decreased."""
        if node is None or not 0 <= node.pos < len(self._vec):
            return
        if self._vec[node.pos] is not node:
            return
        self._sift_up(node.pos)

    def _sift_up(self, pos: int) -> None:
        vec, less = self._vec, self._less
        node = vec[pos]
        while pos > 0:
            parent = (pos - 1) // 2
            if not less(node.val, vec[parent].val):
                break
            vec[pos] = vec[parent]
            vec[pos].pos = pos
            pos = parent
        vec[pos] = node
        node.pos = pos

    def _sift_down(self, pos: int) -> None:
        vec, less = self._vec, self._less
        node = vec[pos]
        kid, last = pos * 2 + 1, len(vec) - 1
        while kid < last:
            if less(vec[kid + 1].val, vec[kid].val):
                kid += 1
            if not less(vec[kid].val, node.val):
                break
            vec[pos] = vec[kid]
            vec[pos].pos = pos
            pos, kid = kid, kid * 2 + 1
        if kid == last and less(vec[kid].val, node.val):
            vec[pos] = vec[kid]
            vec[pos].pos = pos
            pos = kid
        vec[pos] = node
        node.pos = pos
"""Pairing min-heaps: one keyed by comparable values, one ordered by a predicate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class PairingNode(Generic[T]):
    """A key held by a :class:`PairingHeap`; kept so it can be removed or decreased."""

    key: Any
    child: Optional[PairingNode] = field(default=None, repr=False)
    prev: Optional[PairingNode] = field(default=None, repr=False)  # parent or elder sibling
    next: Optional[PairingNode] = field(default=None, repr=False)  # younger sibling


@dataclass(eq=False)
class HeapNode(Generic[T]):
    """A value held by a :class:`NodeHeap`."""

    val: Any
    child: Optional[HeapNode] = field(default=None, repr=False)
    prev: Optional[HeapNode] = field(default=None, repr=False)
    next: Optional[HeapNode] = field(default=None, repr=False)


def _hook(node: Any, peer: Any) -> Any:
    if peer is not None:
        peer.prev = node
    return peer


def _merge(master: Any, slave: Any, less: Callable[[Any, Any], bool]) -> Any:
    """Make the larger of two trees the first child of the smaller; return the root."""
    if less(slave, master):
        master, slave = slave, master
    slave.next = _hook(slave, master.child)
    master.child = slave
    slave.prev = master
    return master


def _collect(head: Any, less: Callable[[Any, Any], bool]) -> Any:
    """Combine a sibling list into one tree: pair from the left, fold from the right."""
    if head is None:
        return None
    pairs = []
    rest = head
    while rest is not None and rest.next is not None:
        master, slave = rest, rest.next
        rest = slave.next
        pairs.append(_merge(master, slave, less))
    acc = rest if rest is not None else pairs.pop()
    for tree in reversed(pairs):
        acc = _merge(acc, tree, less)
    acc.prev = None
    acc.next = None
    return acc


def _detach(node: Any, parent_or_sibling: Any) -> None:
    """Cut ``node`` (with its subtree) out of the sibling list it hangs in."""
    node.prev = None
    if parent_or_sibling.next is node:
        parent_or_sibling.next = _hook(parent_or_sibling, node.next)
    else:
        parent_or_sibling.child = _hook(parent_or_sibling, node.next)
    node.next = None


def _key_less(a: PairingNode, b: PairingNode) -> bool:
    return a.key < b.key


class PairingHeap(Generic[T]):
    """A mergeable min-heap supporting removal and decrease-key through its nodes."""

    def __init__(self) -> None:
        self._root: Optional[PairingNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def top(self) -> T:
        if self._root is None:
            raise IndexError("empty heap")
        return self._root.key

    def merge(self, other: PairingHeap[T]) -> None:
        """Move every item of ``other`` into this heap, leaving ``other`` empty."""
        if other is self or other._root is None:
            return
        if self._root is None:
            self._root, self._size = other._root, other._size
        else:
            self._root = _merge(self._root, other._root, _key_less)
            self._size += other._size
        other.clear()

    def push_node(self, node: Optional[PairingNode]) -> None:
        if node is None:
            return
        node.prev = node.next = node.child = None
        self._root = node if self._root is None else _merge(self._root, node, _key_less)
        self._size += 1

    def push(self, key: T) -> PairingNode:
        node = PairingNode(key)
        self.push_node(node)
        return node

    def pop_node(self) -> Optional[PairingNode]:
        node = self._root
        if node is not None:
            self._root = _collect(node.child, _key_less)
            self._size -= 1
            node.child = None
        return node

    def pop(self) -> T:
        node = self.pop_node()
        if node is None:
            raise IndexError("empty heap")
        return node.key

    def remove(self, node: Optional[PairingNode]) -> None:
        """Take ``node`` out of the heap."""
        if node is None:
            return
        self._size -= 1
        parent_or_sibling = node.prev
        if parent_or_sibling is None:
            self._root = _collect(node.child, _key_less)
        else:
            if parent_or_sibling.child is node:
                parent_or_sibling.child = _hook(parent_or_sibling, node.next)
            else:
                parent_or_sibling.next = _hook(parent_or_sibling, node.next)
            subtree = _collect(node.child, _key_less)
            if subtree is not None:
                self._root = _merge(self._root, subtree, _key_less)
        node.child = node.prev = node.next = None

    def float_up(self, node: Optional[PairingNode], value: T) -> None:
        """Lower ``node``'s key to ``value``; larger values are ignored."""
        if node is None or not value < node.key:
            return
        node.key = value
        parent_or_sibling = node.prev
        if parent_or_sibling is not None and value < parent_or_sibling.key:
            _detach(node, parent_or_sibling)
            self._root = _merge(self._root, node, _key_less)


class NodeHeap(Generic[T]):
    """A pairing min-heap of :class:`HeapNode` ordered by ``less(a.val, b.val)``."""

    def __init__(self, less: Callable[[Any, Any], bool]) -> None:
        self._less = less
        self._root: Optional[HeapNode] = None
        self._size = 0

    def _node_less(self, a: HeapNode, b: HeapNode) -> bool:
        return self._less(a.val, b.val)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def push(self, node: Optional[HeapNode]) -> None:
        if node is None:
            return
        node.prev = node.next = node.child = None
        if self._root is None:
            self._root = node
        else:
            self._root = _merge(self._root, node, self._node_less)
        self._size += 1

    def top(self) -> Optional[HeapNode]:
        return self._root

    def pop(self) -> Optional[HeapNode]:
        node = self._root
        if node is not None:
            self._root = _collect(node.child, self._node_less)
            self._size -= 1
            node.child = None
        return node

    def float_up(self, node: Optional[HeapNode]) -> None:
        """Restore heap order after ``node``'s value has decreased."""
        if node is None:
            return
        parent_or_sibling = node.prev
        if parent_or_sibling is not None and self._less(node.val, parent_or_sibling.val):
            _detach(node, parent_or_sibling)
            self._root = _merge(self._root, node, self._node_less)
"""Fixed-capacity cyclic queue and a simple LIFO stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_MIN_CAPACITY = 7


class CyclicQueue(Generic[T]):
    """A FIFO queue backed by a ring buffer of fixed capacity.

    The capacity is at least seven items; pushing onto a full queue raises.
    """

    def __init__(self, size: int) -> None:
        capacity = max(size, _MIN_CAPACITY)
        # One slot stays unused to tell a full queue from an empty one.
        self._space: list[T | None] = [None] * (capacity + 1)
        self._read = 0
        self._write = 0

    def __len__(self) -> int:
        return (self._write - self._read) % len(self._space)

    def clear(self) -> None:
        self._space = [None] * len(self._space)
        self._read = self._write = 0

    def is_empty(self) -> bool:
        return self._read == self._write

    def is_full(self) -> bool:
        return (self._write + 1) % len(self._space) == self._read

    def push(self, item: T) -> None:
        following = (self._write + 1) % len(self._space)
        if following == self._read:
            raise IndexError("full queue")
        self._space[self._write] = item
        self._write = following

    def pop(self) -> T:
        if self.is_empty():
            raise IndexError("empty queue")
        item = self._space[self._read]
        self._space[self._read] = None
        self._read = (self._read + 1) % len(self._space)
        return item  # type: ignore[return-value]

    def front(self) -> T:
        if self.is_empty():
            raise IndexError("empty queue")
        return self._space[self._read]  # type: ignore[return-value]

    def back(self) -> T:
        if self.is_empty():
            raise IndexError("empty queue")
        # Index -1 wraps around to the last slot when the write cursor is 0.
        return self._space[self._write - 1]  # type: ignore[return-value]


class Stack(Generic[T]):
    """A LIFO stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("empty stack")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise IndexError("empty stack")
        return self._items[-1]
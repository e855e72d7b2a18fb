"""Graph edge types, strongly connected components and topological sorting.

Graphs are given as adjacency lists: ``roads[i]`` lists the vertices reachable
from vertex ``i`` in one step.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, NamedTuple, Optional, Sequence

Roads = Sequence[Optional[Sequence[int]]]


class Path(NamedTuple):
    """A weighted outgoing arc in an adjacency list."""

    next: int
    weight: int


class SimpleEdge(NamedTuple):
    """An unweighted edge between two vertices."""

    a: int
    b: int


class Edge(NamedTuple):
    """A weighted edge between two vertices."""

    a: int
    b: int
    weight: int


class GraphError(Exception):
    """Raised when a graph does not have the shape an algorithm requires."""


def _postorder(roads: Roads, start: int, visited: list[bool]) -> Iterator[int]:
    """Yield vertices reachable from ``start`` in depth-first post-order."""
    visited[start] = True
    stack = [(start, iter(roads[start] or ()))]
    while stack:
        node, nexts = stack[-1]
        for peer in nexts:
            if not visited[peer]:
                visited[peer] = True
                stack.append((peer, iter(roads[peer] or ())))
                break
        else:
            stack.pop()
            yield node


def split_directed_graph(roads: Roads) -> list[list[int]]:
    """Return the strongly connected components of a directed graph."""
    size = len(roads)
    if size < 1:
        return []
    if size == 1:
        return [[0]]

    visited = [False] * size
    finished: list[int] = []
    for start in range(size):
        if not visited[start]:
            finished.extend(_postorder(roads, start, visited))

    shadow: list[list[int]] = [[] for _ in range(size)]
    for vertex, nexts in enumerate(roads):
        for peer in nexts or ():
            shadow[peer].append(vertex)

    visited = [False] * size
    parts: list[list[int]] = []
    for start in reversed(finished):
        if not visited[start]:
            parts.append(list(_postorder(shadow, start, visited)))
    return parts


def topological_sort(roads: Roads) -> list[int]:
    """Return the vertices in topological order; raise GraphError on a cycle."""
    size = len(roads)
    upstream = [0] * size
    for nexts in roads:
        for peer in nexts or ():
            upstream[peer] += 1

    free = deque(vertex for vertex in range(size) if upstream[vertex] == 0)
    order: list[int] = []
    while free:
        curr = free.popleft()
        for peer in roads[curr] or ():
            upstream[peer] -= 1
            if upstream[peer] == 0:
                free.append(peer)
        order.append(curr)

    if len(order) != size:
        raise GraphError("loops exist")
    return order
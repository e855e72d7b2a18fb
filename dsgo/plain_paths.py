"""Shortest paths on distance matrices and with negative weights.

Matrix-based Dijkstra treats a zero entry as "no edge"; Floyd-Warshall and
SPFA use ``math.inf`` for unreachable distances.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

from dsgo.graph import GraphError

UNREACHABLE = math.inf


def floyd_warshall(matrix: Sequence[MutableSequence[float]]) -> None:
    """Turn a distance matrix into all-pairs shortest distances, in place.

    Handles directed graphs and negative edges, but not negative cycles.
    O(V^3).
    """
    size = len(matrix)
    for k in range(size):
        row_k = matrix[k]
        for row_i in matrix:
            d_ik = row_i[k]
            if d_ik == UNREACHABLE:
                continue
            for j in range(size):
                d_kj = row_k[j]
                if d_kj != UNREACHABLE and d_ik + d_kj < row_i[j]:
                    row_i[j] = d_ik + d_kj


@dataclass
class _Vertex:
    idx: int
    dist: float = UNREACHABLE
    link: int = 0


def _check_vertex(size: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < size:
            raise ValueError("illegal input")


def _relax_round(matrix: Sequence[Sequence[int]], memo: list[_Vertex], last: int) -> None:
    """Relax the unsettled vertices memo[:last] from memo[last], then move the nearest to last-1."""
    curr = memo[last]
    row = matrix[curr.idx]
    best = 0
    for i, vertex in enumerate(memo[:last]):
        step = row[vertex.idx]
        dist = curr.dist + step
        if step != 0 and dist < vertex.dist:
            vertex.dist, vertex.link = dist, curr.idx
        else:
            dist = vertex.dist
        if dist < memo[best].dist:
            best = i
    memo[best], memo[last - 1] = memo[last - 1], memo[best]


def _initial_memo(size: int, start: int) -> list[_Vertex]:
    memo = [_Vertex(i) for i in range(size)]
    memo[start].idx = size - 1
    memo[size - 1].idx, memo[size - 1].dist = start, 0
    return memo


def plain_dijkstra(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return shortest distances from ``start`` to every vertex (-1 if unreachable).

    ``matrix[i][j]`` is the length of the edge i->j, 0 meaning no edge. O(V^2).
    """
    size = len(matrix)
    _check_vertex(size, start)
    memo = _initial_memo(size, start)

    last = size - 1
    while last > 0 and memo[last].dist != UNREACHABLE:
        _relax_round(matrix, memo, last)
        last -= 1

    result = [-1] * size
    for vertex in memo:
        if vertex.dist != UNREACHABLE:
            result[vertex.idx] = int(vertex.dist)
    return result


def plain_dijkstra_path(
    matrix: Sequence[Sequence[int]], start: int, end: int
) -> Optional[list[int]]:
    """Return the vertices of a shortest path from ``start`` to ``end``, or None."""
    size = len(matrix)
    _check_vertex(size, start, end)
    if start == end:
        return [start]

    memo = _initial_memo(size, start)

    last = size - 1
    while last >= 0 and memo[last].dist != UNREACHABLE:
        if memo[last].idx == end:
            return _trace(memo[last:], end)
        _relax_round(matrix, memo, last)
        last -= 1
    return None


def _trace(settled: list[_Vertex], end: int) -> list[int]:
    """Follow links from the end vertex back through the settled vertices."""
    path: list[int] = []
    idx = 0
    while idx < len(settled) - 1:
        following = settled[idx].link
        while settled[idx].idx != following:
            idx += 1
        path.append(following)
    path.reverse()
    path.append(end)
    return path


def spfa(roads: Sequence[Optional[Sequence[tuple[int, int]]]], start: int) -> list[float]:
    """Return shortest distances from ``start``; ``math.inf`` marks unreachable.

    ``roads[i]`` lists ``(next, weight)`` arcs; weights may be negative.
    Raises GraphError if a negative cycle is reachable. O(VE).
    """
    size = len(roads)
    _check_vertex(size, start)

    dist: list[float] = [UNREACHABLE] * size
    # |age| counts how often a vertex was queued; negative means queued now.
    age = [0] * size
    queue = deque([start])
    dist[start], age[start] = 0, -1
    while queue:
        curr = queue.popleft()
        age[curr] = -age[curr]
        for peer, weight in roads[curr] or ():
            distance = dist[curr] + weight
            if distance < dist[peer]:
                dist[peer] = distance
                if age[peer] >= 0:
                    queue.append(peer)
                    age[peer] += 1
                    if age[peer] > size:
                        raise GraphError("bad loops exist")
                    age[peer] = -age[peer]
    return dist
"""Maximum flow with Dinic's algorithm on adjacency lists and matrices."""

from __future__ import annotations

import math
from collections import deque
from typing import Optional, Sequence

Roads = Sequence[Optional[Sequence[tuple[int, int]]]]


def _is_valid_pair(size: int, start: int, end: int) -> bool:
    return 0 <= start < size and 0 <= end < size and start != end


def _add_capacity(residual: list[dict[int, int]], curr: int, nxt: int, weight: int) -> None:
    if weight < 0:
        raise ValueError("capacity must not be negative")
    if weight:
        residual[curr][nxt] = residual[curr].get(nxt, 0) + weight


class _Dinic:
    """Dinic's blocking-flow search over a residual graph of capacity maps."""

    def __init__(self, residual: list[dict[int, int]], start: int, end: int) -> None:
        self._residual = residual
        self._shadow: list[list[list[int]]] = [[] for _ in residual]  # level graph
        self._start = start
        self._end = end

    def run(self) -> int:
        total = 0
        while self._separate():
            total += self._augment()
            self._flush_back()
        return total

    def _mark_levels(self) -> Optional[list[Optional[int]]]:
        """Label vertices by BFS distance up to the sink; None if it is unreachable."""
        level: list[Optional[int]] = [None] * len(self._residual)
        level[self._start] = 0
        queue = deque([self._start])
        while queue:
            curr = queue.popleft()
            for nxt in sorted(self._residual[curr]):
                if level[nxt] is not None:
                    continue
                level[nxt] = level[curr] + 1  # type: ignore[operator]
                if nxt == self._end:
                    end_level = level[nxt]
                    # Other vertices as far away as the sink cannot lead to it.
                    for other in queue:
                        if level[other] == end_level:
                            level[other] = None
                    return level
                queue.append(nxt)
        return None

    def _separate(self) -> bool:
        """Move arcs that advance one level from the residual graph into the level graph."""
        level = self._mark_levels()
        if level is None:
            return False
        for curr, curr_level in enumerate(level):
            if curr_level is None:
                continue
            arcs = self._residual[curr]
            for nxt in sorted(arcs):
                if level[nxt] == curr_level + 1:
                    self._shadow[curr].append([nxt, arcs.pop(nxt)])
        return True

    def _restore(self, curr: int, nxt: int, weight: int) -> None:
        arcs = self._residual[curr]
        arcs[nxt] = arcs.get(nxt, 0) + weight

    def _augment(self) -> int:
        """Push augmenting paths through the level graph until it is blocked."""
        flow = 0
        while True:
            stream: float = math.inf
            stack: list[tuple[int, float]] = []
            curr = self._start
            while curr != self._end:
                arcs = self._shadow[curr]
                if arcs:
                    stack.append((curr, stream))
                    nxt, weight = arcs[-1]
                    curr, stream = nxt, min(stream, weight)
                else:
                    if not stack:
                        return flow
                    curr, stream = stack.pop()
                    nxt, weight = self._shadow[curr].pop()
                    self._restore(curr, nxt, weight)

            pushed = int(stream)
            for curr, _ in stack:
                arc = self._shadow[curr][-1]
                arc[1] -= pushed
                self._restore(arc[0], curr, pushed)  # reverse capacity
                if arc[1] == 0:
                    self._shadow[curr].pop()
            flow += pushed

    def _flush_back(self) -> None:
        for curr, arcs in enumerate(self._shadow):
            for nxt, weight in arcs:
                self._restore(curr, nxt, weight)
            arcs.clear()
            self._residual[curr] = {
                nxt: weight for nxt, weight in self._residual[curr].items() if weight
            }


def dinic_list(roads: Roads, start: int, end: int) -> int:
    """Return the maximum flow from ``start`` to ``end``.

    ``roads[i]`` lists ``(next, capacity)`` arcs. An out-of-range vertex or
    ``start == end`` gives 0. The input is left unchanged. O(V^2 E).
    """
    size = len(roads)
    if not _is_valid_pair(size, start, end):
        return 0
    residual: list[dict[int, int]] = [{} for _ in range(size)]
    for curr, arcs in enumerate(roads):
        for nxt, weight in arcs or ():
            _add_capacity(residual, curr, nxt, weight)
    return _Dinic(residual, start, end).run()


def dinic_matrix(matrix: Sequence[Sequence[int]], start: int, end: int) -> int:
    """Return the maximum flow from ``start`` to ``end`` of a capacity matrix.

    ``matrix[i][j]`` is the capacity of the arc i->j, 0 meaning no arc. An
    out-of-range vertex or ``start == end`` gives 0. The input is left unchanged.
    """
    size = len(matrix)
    if not _is_valid_pair(size, start, end):
        return 0
    residual: list[dict[int, int]] = [{} for _ in range(size)]
    for curr, row in enumerate(matrix):
        for nxt, weight in enumerate(row):
            _add_capacity(residual, curr, nxt, weight)
    return _Dinic(residual, start, end).run()
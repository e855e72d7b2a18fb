"""Dijkstra's single-source shortest paths on weighted adjacency lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from dsgo import binary_heap, pairing_heap

Roads = Sequence[Optional[Sequence[tuple[int, int]]]]

_FAKE = -1


@dataclass
class _Vertex:
    idx: int
    link: int = _FAKE
    dist: float = math.inf


def _nearer(a: _Vertex, b: _Vertex) -> bool:
    return a.dist < b.dist


def _check_vertex(size: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < size:
            raise ValueError("illegal input")


def _relax(roads: Roads, nodes: list, curr, heap) -> None:
    idx = curr.val.idx
    curr.val.idx = _FAKE  # settled
    for peer_idx, weight in roads[idx] or ():
        peer = nodes[peer_idx]
        if peer.val.link == _FAKE:
            peer.val.link = idx
            peer.val.dist = curr.val.dist + weight
            heap.push(peer)
        elif peer.val.idx != _FAKE:
            dist = curr.val.dist + weight
            if dist < peer.val.dist:
                peer.val.link = idx
                peer.val.dist = dist
                heap.float_up(peer)


def dijkstra(roads: Roads, start: int) -> list[int]:
    """Return shortest distances from ``start`` to every vertex (-1 if unreachable).

    ``roads[i]`` lists ``(next, weight)`` arcs with non-negative weights.
    O(E + V log V).
    """
    size = len(roads)
    _check_vertex(size, start)
    if size == 1:
        return [0]

    nodes = [pairing_heap.HeapNode(_Vertex(i)) for i in range(size)]
    nodes[start].val = _Vertex(start, start, 0)
    heap = pairing_heap.NodeHeap(_nearer)
    heap.push(nodes[start])

    while not heap.is_empty():
        _relax(roads, nodes, heap.pop(), heap)

    return [-1 if node.val.dist == math.inf else int(node.val.dist) for node in nodes]


def dijkstra_path(roads: Roads, start: int, end: int) -> Optional[list[int]]:
    """Return the vertices of a shortest path from ``start`` to ``end``, or None."""
    size = len(roads)
    _check_vertex(size, start, end)
    if start == end:
        return [start]

    nodes = [binary_heap.HeapNode(_Vertex(i)) for i in range(size)]
    nodes[start].val = _Vertex(start, start, 0)
    heap = binary_heap.NodeHeap(_nearer)
    heap.push(nodes[start])

    while not heap.is_empty():
        curr = heap.top()
        if curr.val.idx == end:
            path = []
            idx = end
            while idx != start:
                path.append(idx)
                idx = nodes[idx].val.link
            path.append(start)
            path.reverse()
            return path
        heap.pop()
        _relax(roads, nodes, curr, heap)
    return None
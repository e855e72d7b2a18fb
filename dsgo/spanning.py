"""Minimum spanning trees: Kruskal on edge lists, Prim on matrices and adjacency lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from dsgo import binary_heap, pairing_heap
from dsgo.graph import GraphError, SimpleEdge

Roads = Sequence[Optional[Sequence[tuple[int, int]]]]

_FAKE = -1


def _sorted_edges(edges: Iterable[tuple[int, int, int]], size: int) -> list[tuple[int, int, int]]:
    edges = list(edges)
    if size < 2 or len(edges) < size - 1:
        raise ValueError("illegal input")
    return sorted(edges, key=lambda edge: edge[2])


def kruskal(edges: Iterable[tuple[int, int, int]], size: int) -> int:
    """Return the weight of a minimum spanning tree over ``size`` vertices.

    ``edges`` holds ``(a, b, weight)`` triples. Raises GraphError if the graph
    is not connected. O(E log E).
    """
    ordered = _sorted_edges(edges, size)
    # Non-negative: parent index; negative: minus the size of the set (leaders only).
    nodes = [-1] * size

    def trace(vertex: int) -> int:
        leader = vertex
        while nodes[leader] >= 0:
            leader = nodes[leader]
        if leader != vertex:
            nodes[vertex] = leader
        return leader

    total = 0
    for a, b, weight in ordered:
        active, another = trace(a), trace(b)
        if active == another:
            continue
        total += weight
        if -nodes[active] < -nodes[another]:
            active, another = another, active
        nodes[active] += nodes[another]
        nodes[another] = active
        if -nodes[active] == size:
            return total
    raise GraphError("isolated part exist")


def kruskal_v2(edges: Iterable[tuple[int, int, int]], size: int) -> int:
    """Kruskal's algorithm with sets that relabel their members on union."""
    ordered = _sorted_edges(edges, size)
    leader_of = list(range(size))
    members = [[vertex] for vertex in range(size)]

    total = 0
    for a, b, weight in ordered:
        active, another = leader_of[a], leader_of[b]
        if active == another:
            continue
        total += weight
        if len(members[active]) < len(members[another]):
            active, another = another, active
        for vertex in members[another]:
            leader_of[vertex] = active
        members[active].extend(members[another])
        members[another] = []
        if len(members[active]) == size:
            return total
    raise GraphError("isolated part exist")


@dataclass
class _Vertex:
    idx: int
    link: int = 0
    dist: float = math.inf


def _prim_round(matrix: Sequence[Sequence[int]], memo: list[_Vertex], last: int) -> _Vertex:
    """Relax memo[:last] from memo[last], move the nearest to last-1 and return it."""
    curr = memo[last]
    row = matrix[curr.idx]
    best = 0
    for i, vertex in enumerate(memo[:last]):
        dist = row[vertex.idx]
        if dist != 0 and dist < vertex.dist:
            vertex.dist, vertex.link = dist, curr.idx
        else:
            dist = vertex.dist
        if dist < memo[best].dist:
            best = i
    if memo[best].dist == math.inf:
        raise GraphError("isolated part exist")
    memo[best], memo[last - 1] = memo[last - 1], memo[best]
    return memo[last - 1]


def plain_prim(matrix: Sequence[Sequence[int]]) -> int:
    """Return the weight of a minimum spanning tree of an adjacency matrix.

    A zero entry means no edge. Raises GraphError if the graph is not
    connected. O(V^2).
    """
    size = len(matrix)
    if size < 2:
        raise ValueError("illegal input")
    memo = [_Vertex(i) for i in range(size)]
    memo[size - 1].dist = 0
    return sum(int(_prim_round(matrix, memo, last).dist) for last in range(size - 1, 0, -1))


def plain_prim_tree(matrix: Sequence[Sequence[int]]) -> list[SimpleEdge]:
    """Return the edges of a minimum spanning tree rooted at vertex 0."""
    size = len(matrix)
    if size < 2:
        raise ValueError("illegal input")
    memo = [_Vertex(i + 1) for i in range(size - 1)]
    memo.append(_Vertex(0, 0, 0))
    edges = []
    for last in range(size - 1, 0, -1):
        chosen = _prim_round(matrix, memo, last)
        edges.append(SimpleEdge(chosen.link, chosen.idx))
    return edges


def _nearer(a: _Vertex, b: _Vertex) -> bool:
    return a.dist < b.dist


def _grow(roads: Roads, nodes: list, curr, heap) -> None:
    idx = curr.val.idx
    curr.val.idx = _FAKE  # inside the tree
    for peer_idx, weight in roads[idx] or ():
        peer = nodes[peer_idx]
        if peer.val.link == _FAKE:
            peer.val.link = idx
            peer.val.dist = weight
            heap.push(peer)
        elif peer.val.idx != _FAKE and weight < peer.val.dist:
            peer.val.link = idx
            peer.val.dist = weight
            heap.float_up(peer)


def _start_nodes(node_type, size: int) -> list:
    nodes = [node_type(_Vertex(i, _FAKE, 0)) for i in range(size)]
    nodes[0].val = _Vertex(0, 0, 0)
    return nodes


def prim(roads: Roads) -> int:
    """Return the weight of a minimum spanning tree of an undirected adjacency list.

    ``roads[i]`` lists ``(next, weight)`` arcs. Raises GraphError if the graph
    is not connected. O(E + V log V).
    """
    size = len(roads)
    if size < 2:
        raise ValueError("illegal input")
    nodes = _start_nodes(pairing_heap.HeapNode, size)
    heap = pairing_heap.NodeHeap(_nearer)
    heap.push(nodes[0])

    total = 0
    count = 0
    while not heap.is_empty():
        curr = heap.pop()
        total += curr.val.dist
        _grow(roads, nodes, curr, heap)
        count += 1
    if count != size:
        raise GraphError("isolated part exist")
    return total


def prim_tree(roads: Roads) -> list[SimpleEdge]:
    """Return the edges of a minimum spanning tree rooted at vertex 0."""
    size = len(roads)
    if size < 2:
        raise ValueError("illegal input")
    nodes = _start_nodes(binary_heap.HeapNode, size)
    heap = binary_heap.NodeHeap(_nearer)
    heap.push(nodes[0])

    edges = []
    while True:
        _grow(roads, nodes, heap.pop(), heap)
        if heap.is_empty():
            break
        nearest = heap.top()
        edges.append(SimpleEdge(nearest.val.link, nearest.val.idx))
    if len(edges) != size - 1:
        raise GraphError("isolated part exist")
    return edges
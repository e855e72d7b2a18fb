# dsgo

Classic data structures and algorithms in pure Python. The package has no
runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

`dsgo.containers` has two containers:

- `CyclicQueue(size)` is a FIFO ring buffer that holds at least seven items.
  It has `push`, `pop`, `front`, `back`, `is_full`, `is_empty`, `clear` and
  `len()`. Pushing onto a full queue raises `IndexError`.
- `Stack()` has `push`, `pop`, `top`, `is_empty`, `clear` and `len()`.

Popping or peeking an empty `CyclicQueue` or `Stack` raises `IndexError`.

## Searching and list helpers

`dsgo.search` works on sorted sequences:

- `search(values, key)` returns an index that holds `key`, or -1.
- `search_successor` returns the first index whose item is greater than `key`.
- `search_first_ge` returns the first index whose item is greater than or equal to `key`.
- `search_last_le` returns the last index whose item is less than or equal to `key`, or -1.
- `search_range(values, key)` returns the inclusive `(first, last)` range that holds `key`, or `None`.
- `insert(values, key)` inserts `key` after any equal items and returns its index.
- `pick(values, k)` returns the k-th smallest item, counting from 1. It
  reorders `values` in place and raises `IndexError` if `k` is out of range.

`dsgo.shuffle` has `random_shuffle`, `random_partition(values, n)`, which
moves a random choice of `n` items to the front, `random_ints(n, m)`, which
returns `m` distinct integers from `range(n)`, `reverse`, `insert_to` and
`erase_from(values, pos, keep_order)`. `insert_to` and `erase_from` raise
`IndexError` for a bad position.

## Sorting

Every sort works in place on a mutable sequence.

- `dsgo.basic_sort`: `bubble_sort`, `select_sort`, `insert_sort`,
  `simple_sort`, `simple_sort_v2`, `heap_sort`, and `is_sorted` to check a result.
- `dsgo.merge_sort`: `merge_sort` and `sym_merge_sort`. Both are stable;
  `sym_merge_sort` merges in place by rotations.
- `dsgo.quick_sort`: `quick_sort`, `quick_sort_v2` (explicit stack),
  `block_quick_sort`, `quick_sort_y` and `quick_sort_y_v2` (dual pivot),
  `intro_sort`, `block_intro_sort` and `intro_sort_y`.
- `dsgo.radix_sort`: `radix_sort(values, bits=64, signed=False)` sorts
  fixed-width integers one byte per pass. `bits` must be a positive multiple
  of 8, and a value that does not fit raises `ValueError`.
- `dsgo.general_sort`: `sort_with(values, less)` is an introsort ordered by a
  `less(a, b)` predicate.

```python
from dsgo.basic_sort import is_sorted
from dsgo.quick_sort import intro_sort

data = [5, 3, 9, 1, 7]
intro_sort(data)
assert is_sorted(data)
```

## Heaps

All heaps are min-heaps.

- `dsgo.binary_heap.BinaryHeap` holds comparable items. It has `push`,
  `pop`, `top`, `build`, `build_in_place`, `clear`, `is_empty` and `len()`.
- `dsgo.binary_heap.NodeHeap(less)` holds `HeapNode` objects and orders them
  by `less(a.val, b.val)`. `float_up(node)` restores order after a node's
  value has decreased.
- `dsgo.binomial_heap.BinomialHeap` has `push`, `pop`, `top`, and
  `merge(other)`, which moves every item of `other` into the heap.
- `dsgo.pairing_heap.PairingHeap` has `push`, which returns a `PairingNode`,
  along with `push_node`, `pop`, `pop_node`, `top`, `merge`, `remove(node)`
  and `float_up(node, value)`, which lowers a node's key.
  `dsgo.pairing_heap` also has its own `HeapNode` and `NodeHeap(less)`.

`pop` and `top` on an empty `BinaryHeap`, `BinomialHeap` or `PairingHeap`
raise `IndexError`. On an empty `NodeHeap` they return `None`.

```python
from dsgo.pairing_heap import PairingHeap

heap = PairingHeap()
node = heap.push(10)
heap.push(4)
heap.float_up(node, 1)
assert heap.pop() == 1
```

## Hashing and hash-based sets

The functions in `dsgo.hashing` take a `str`, which is hashed as UTF-8, or
bytes:

- `hash32(seed, data)` is 32-bit Murmur3.
- `hash160`, `hash128` and `hash64` are SpookyHash short-hash variants.

The following are built on those hashes:

- `dsgo.chained_set.ChainedSet` is a string set with separate chaining. It
  rehashes a row at a time as it is used.
- `dsgo.cuckoo_set.CuckooSet` is a string set over four cuckoo tables. It
  raises `RuntimeError` if a key cannot be placed even after the tables grow.
- `dsgo.bloom_filter.BloomFilter(capacity)` is a Bloom filter with `insert`,
  `search`, `in`, `capacity()` and `len()`. `len()` counts the insertions
  that set a new bit. The seed comes from the clock.
- `dsgo.perfect_hash.PerfectHasher(keys)` gives each key of a fixed set its
  own slot, using the BDZ construction. It raises `PerfectHashError` if no
  hash can be built after eight random seeds.

`ChainedSet` and `CuckooSet` have `insert` and `remove`, which return
whether the set changed, as well as `search`, `in`, `is_empty`, `clear` and
`len()`.

```python
from dsgo.perfect_hash import PerfectHasher

keys = ["alpha", "beta", "gamma"]
hasher = PerfectHasher(keys)
assert len({hasher.hash(k) for k in keys}) == len(keys)
```

## Graphs

Adjacency lists are sequences where `roads[i]` lists the arcs leaving vertex
`i`. For weighted graphs the arcs are `(next, weight)` pairs, such as
`dsgo.graph.Path`.

- `dsgo.graph`: the `Path`, `SimpleEdge` and `Edge` tuples, and
  `split_directed_graph(roads)` for strongly connected components.
  `topological_sort(roads)` raises `GraphError` on a cycle.
- `dsgo.dijkstra`: `dijkstra(roads, start)` returns distances, with -1 for an
  unreachable vertex. `dijkstra_path(roads, start, end)` returns a path, or
  `None`.
- `dsgo.plain_paths`: `plain_dijkstra` and `plain_dijkstra_path` work on
  adjacency matrices, where 0 means no edge. `floyd_warshall(matrix)` works
  in place, with `math.inf` for unreachable. `spfa(roads, start)` allows
  negative weights and raises `GraphError` on a negative cycle.
- `dsgo.spanning`: `kruskal(edges, size)` and `kruskal_v2` take
  `(a, b, weight)` triples. `prim` and `prim_tree` take adjacency lists.
  `plain_prim` and `plain_prim_tree` take matrices. All of them raise
  `GraphError` if the graph is not connected.
- `dsgo.flow`: `dinic_list(roads, start, end)` and
  `dinic_matrix(matrix, start, end)` compute the maximum flow. Both return 0
  for an invalid pair of vertices and leave their input unchanged.

Vertex numbers that are out of range raise `ValueError` in the path and
spanning-tree functions.

```python
from dsgo.dijkstra import dijkstra
from dsgo.graph import Path

roads = [
    [Path(1, 1), Path(3, 2)],
    [Path(4, 4)],
    [Path(0, 10), Path(3, 5)],
    [Path(0, 3), Path(1, 9), Path(4, 2)],
    [Path(1, 6), Path(2, 7)],
]
assert dijkstra(roads, 1) == [19, 0, 11, 16, 4]
```

## What the package does not do

This is a library only. It has no command-line tool.

The hash-based containers hold strings in memory and do not persist them.
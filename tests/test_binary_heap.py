import random

import pytest

from dsgo.binary_heap import BinaryHeap, HeapNode, NodeHeap


def _random_list(rng, size):
    values = [rng.randrange(-10**6, 10**6) for _ in range(size)]
    return values, min(values)


def test_heap_build_push_pop():
    rng = random.Random(2024)
    size = 200
    lst1, m1 = _random_list(rng, size)
    lst2, m2 = _random_list(rng, size)
    hp = BinaryHeap()

    hp.build_in_place(lst1)
    assert hp.top() == m1

    for item in lst2:
        hp.push(item)
    assert hp.top() == min(m1, m2)

    mark = min(m1, m2)
    for _ in range(size * 2):
        key = hp.pop()
        assert key >= mark
        mark = key

    assert hp.is_empty()
    hp.push(99)
    assert not hp.is_empty()
    hp.clear()
    assert hp.is_empty()


def test_heap_build_copies_input():
    source = [5, 3, 8, 1, 9, 2]
    hp = BinaryHeap()
    hp.build(source)
    assert source == [5, 3, 8, 1, 9, 2]
    assert len(hp) == 6
    assert [hp.pop() for _ in range(6)] == [1, 2, 3, 5, 8, 9]


def test_heap_empty_errors():
    hp = BinaryHeap()
    with pytest.raises(IndexError):
        hp.top()
    with pytest.raises(IndexError):
        hp.pop()


def test_heap_with_duplicates():
    hp = BinaryHeap()
    for v in [3, 1, 3, 1, 2, 2]:
        hp.push(v)
    assert [hp.pop() for _ in range(6)] == [1, 1, 2, 2, 3, 3]


def _less(a, b):
    return a < b


def test_node_heap_pop_order():
    rng = random.Random(11)
    values = [rng.randrange(1000) for _ in range(100)]
    hp = NodeHeap(_less)
    for v in values:
        hp.push(HeapNode(v))
    assert len(hp) == 100
    popped = [hp.pop().val for _ in range(100)]
    assert popped == sorted(values)
    assert hp.pop() is None
    assert hp.top() is None


def test_node_heap_float_up():
    hp = NodeHeap(_less)
    nodes = [HeapNode(v) for v in (50, 40, 30, 20, 10, 60, 70)]
    for node in nodes:
        hp.push(node)
    assert hp.top() is nodes[4]
    nodes[6].val = 1
    hp.float_up(nodes[6])
    assert hp.top() is nodes[6]
    assert [hp.pop().val for _ in range(7)] == [1, 10, 20, 30, 40, 50, 60]


def test_node_heap_ignores_none_and_foreign_nodes():
    hp = NodeHeap(_less)
    hp.push(None)
    assert hp.is_empty()
    hp.push(HeapNode(5))
    stranger = HeapNode(-1)
    hp.float_up(stranger)
    hp.float_up(None)
    assert hp.top().val == 5
    assert len(hp) == 1


def test_node_heap_custom_order_and_clear():
    hp = NodeHeap(lambda a, b: a > b)
    for v in (3, 9, 1, 7):
        hp.push(HeapNode(v))
    assert hp.top().val == 9
    hp.clear()
    assert hp.is_empty()
    assert len(hp) == 0
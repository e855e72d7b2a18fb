import random

import pytest

from dsgo.pairing_heap import HeapNode, NodeHeap, PairingHeap, PairingNode


def _random_list(size, seed):
    rng = random.Random(seed)
    return [rng.randrange(-10_000, 10_000) for _ in range(size)]


def test_push_pop_sorted():
    values = _random_list(200, 1)
    hp = PairingHeap()
    for v in values:
        hp.push(v)
    assert len(hp) == 200
    popped = [hp.pop() for _ in range(200)]
    assert popped == sorted(values)
    assert hp.is_empty()
    hp.push(99)
    assert not hp.is_empty()
    hp.clear()
    assert hp.is_empty()
    assert len(hp) == 0


def test_empty_heap_raises():
    hp = PairingHeap()
    with pytest.raises(IndexError):
        hp.pop()
    with pytest.raises(IndexError):
        hp.top()
    assert hp.pop_node() is None


def test_merge():
    hp1, hp2 = PairingHeap(), PairingHeap()
    hp1.merge(hp2)
    assert hp1.is_empty()
    hp1.merge(hp1)
    assert hp1.is_empty()

    hp2.push(999)
    assert len(hp2) == 1
    hp1.merge(hp2)
    assert len(hp1) == 1
    assert hp2.is_empty()

    hp1.push(100)
    hp2.push(101)
    hp1.merge(hp2)
    assert len(hp1) == 3
    assert hp1.top() == 100

    hp2.push(11)
    hp2.push(10)
    hp1.merge(hp2)
    assert len(hp1) == 5
    assert hp1.top() == 10

    assert hp1.pop() == 10
    assert len(hp1) == 4
    assert len(hp2) == 0
    assert [hp1.pop() for _ in range(4)] == [11, 100, 101, 999]


def test_float_up_and_remove():
    values = _random_list(200, 7)
    mark = min(values)
    hp = PairingHeap()
    nodes = [PairingNode(v) for v in values]
    for unit in nodes:
        hp.push_node(unit)
    node = max(nodes, key=lambda n: n.key)

    parent = node.prev
    assert parent is not None
    hp.float_up(node, parent.key)
    assert node.prev is parent
    assert node.key == parent.key

    hp.remove(node)
    assert len(hp) == 199
    hp.push_node(node)
    assert len(hp) == 200

    mark -= 1
    hp.float_up(node, mark)
    assert hp.top() == mark
    assert node.key == mark
    hp.remove(node)
    assert hp.top() == mark + 1
    hp.push_node(node)
    assert hp.top() == mark

    kid = node.child
    hp.remove(kid)
    kid = node.child
    hp.float_up(kid, mark - 1)
    assert hp.top() == mark - 1
    assert len(hp) == 199
    popped = [hp.pop() for _ in range(199)]
    assert popped == sorted(popped)
    assert hp.is_empty()


def test_float_up_ignores_larger_value():
    hp = PairingHeap()
    node = hp.push(5)
    hp.push(3)
    hp.float_up(node, 10)
    assert node.key == 5
    assert [hp.pop(), hp.pop()] == [3, 5]


def test_remove_all_nodes():
    hp = PairingHeap()
    nodes = [hp.push(v) for v in [5, 1, 4, 2, 3]]
    hp.remove(nodes[2])
    hp.remove(nodes[1])
    assert len(hp) == 3
    assert [hp.pop() for _ in range(3)] == [2, 3, 5]


def test_node_heap_orders_by_predicate():
    hp = NodeHeap(lambda a, b: a > b)
    for v in [3, 9, 1, 7]:
        hp.push(HeapNode(v))
    assert len(hp) == 4
    assert hp.top().val == 9
    assert [hp.pop().val for _ in range(4)] == [9, 7, 3, 1]
    assert hp.pop() is None
    assert hp.top() is None


def test_node_heap_float_up():
    hp = NodeHeap(lambda a, b: a[0] < b[0])
    nodes = [HeapNode([v]) for v in [10, 20, 30, 40, 50]]
    for node in nodes:
        hp.push(node)
    hp.pop()
    nodes[4].val[0] = 5
    hp.float_up(nodes[4])
    assert hp.top() is nodes[4]
    assert [hp.pop().val[0] for _ in range(4)] == [5, 20, 30, 40]
    assert hp.is_empty()
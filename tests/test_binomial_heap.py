import random

import pytest

from dsgo.binomial_heap import BinomialHeap


def test_push_pop_in_order():
    rng = random.Random(9)
    values = [rng.randrange(-1000, 1000) for _ in range(200)]
    hp = BinomialHeap()
    for value in values:
        hp.push(value)
    assert len(hp) == 200
    assert hp.top() == min(values)
    popped = [hp.pop() for _ in range(200)]
    assert popped == sorted(values)
    assert hp.is_empty()

    hp.push(99)
    assert not hp.is_empty()
    hp.clear()
    assert hp.is_empty()
    assert len(hp) == 0


def test_merge():
    hp1, hp2 = BinomialHeap(), BinomialHeap()
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


def test_merge_large_heaps_keeps_order():
    rng = random.Random(4)
    a = [rng.randrange(10**6) for _ in range(137)]
    b = [rng.randrange(10**6) for _ in range(89)]
    hp1, hp2 = BinomialHeap(), BinomialHeap()
    for v in a:
        hp1.push(v)
    for v in b:
        hp2.push(v)
    hp1.merge(hp2)
    assert len(hp1) == len(a) + len(b)
    assert [hp1.pop() for _ in range(len(a) + len(b))] == sorted(a + b)


def test_empty_heap_raises():
    hp = BinomialHeap()
    with pytest.raises(IndexError):
        hp.top()
    with pytest.raises(IndexError):
        hp.pop()
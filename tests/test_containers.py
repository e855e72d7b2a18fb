import pytest

from dsgo.containers import CyclicQueue, Stack


def test_cyclic_queue_wraps_around():
    q = CyclicQueue(5)
    for i in range(1, 8):
        q.push(i)
    assert q.is_full()

    for i in range(1, 5):
        assert q.pop() == i

    for i in range(8, 12):
        q.push(i)
    assert q.is_full()

    assert q.front() == 5
    assert q.back() == 11

    for i in range(5, 12):
        assert q.pop() == i
    assert q.is_empty()


def test_cyclic_queue_minimum_capacity_and_len():
    q = CyclicQueue(1)
    for i in range(7):
        q.push(i)
    assert len(q) == 7
    with pytest.raises(IndexError):
        q.push(99)


def test_cyclic_queue_len_after_wrap():
    q = CyclicQueue(10)
    for i in range(8):
        q.push(i)
    for _ in range(6):
        q.pop()
    for i in range(7):
        q.push(i)
    assert len(q) == 9
    assert q.front() == 6
    assert q.back() == 6


def test_cyclic_queue_empty_errors():
    q = CyclicQueue(3)
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.back()


def test_cyclic_queue_clear():
    q = CyclicQueue(8)
    q.push("a")
    q.push("b")
    q.clear()
    assert q.is_empty()
    assert len(q) == 0
    q.push("c")
    assert q.front() == "c"


def test_stack_order():
    s = Stack()
    for i in range(5):
        s.push(i)
    assert len(s) == 5
    assert s.top() == 4
    assert [s.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert s.is_empty()


def test_stack_errors_and_clear():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()
    s.push(1)
    s.clear()
    assert s.is_empty()
    assert len(s) == 0
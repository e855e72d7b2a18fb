import random

import pytest

from dsgo.basic_sort import (
    bubble_sort,
    heap_sort,
    insert_sort,
    is_sorted,
    select_sort,
    simple_sort,
    simple_sort_v2,
)

BIG = 2000
SMALL = 300


def _random_list(size, seed=7):
    rng = random.Random(seed + size)
    return [rng.randrange(2**32) for _ in range(size)]


def _check(sort, random_size, desc_size):
    values = _random_list(random_size)
    expected = sorted(values)
    sort(values)
    assert is_sorted(values)
    assert values == expected

    values = list(range(desc_size, 0, -1))
    sort(values)
    assert values == list(range(1, desc_size + 1))

    values = [99] * desc_size
    sort(values)
    assert values == [99] * desc_size

    for size in range(6):
        values = _random_list(size)
        expected = sorted(values)
        sort(values)
        assert values == expected


@pytest.mark.parametrize(
    "sort", [bubble_sort, select_sort, insert_sort, simple_sort, simple_sort_v2]
)
def test_quadratic_sorts(sort):
    _check(sort, SMALL, SMALL)


def test_heap_sort():
    _check(heap_sort, BIG, SMALL)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1])
    assert is_sorted([1, 1, 2, 3])
    assert not is_sorted([2, 1])
    assert not is_sorted([1, 3, 2])


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key


@pytest.mark.parametrize("sort", [bubble_sort, insert_sort, simple_sort])
def test_stable_sorts_keep_equal_order(sort):
    items = [_Keyed(k, i) for i, k in enumerate([3, 1, 3, 2, 1, 3, 2])]
    sort(items)
    assert [(x.key, x.tag) for x in items] == [
        (1, 1), (1, 4), (2, 3), (2, 6), (3, 0), (3, 2), (3, 5)
    ]
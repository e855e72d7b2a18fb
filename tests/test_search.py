import random

import pytest

from dsgo.search import (
    insert,
    pick,
    search,
    search_first_ge,
    search_last_le,
    search_range,
    search_successor,
)

SAMPLE = [2, 2, 4, 6, 6, 6, 8, 8]


@pytest.mark.parametrize(
    "key, expected", [(1, 0), (2, 0), (3, 2), (6, 3), (9, 8)]
)
def test_search_first_ge(key, expected):
    assert search_first_ge(SAMPLE, key) == expected


@pytest.mark.parametrize(
    "key, expected", [(1, -1), (5, 2), (6, 5), (8, 7), (9, 7)]
)
def test_search_last_le(key, expected):
    assert search_last_le(SAMPLE, key) == expected


def test_search_successor():
    assert search_successor(SAMPLE, 2) == 2
    assert search_successor(SAMPLE, 6) == 6
    assert search_successor(SAMPLE, 8) == 8
    assert search_successor(SAMPLE, 0) == 0


def test_search_finds_matching_index():
    for key in (2, 4, 6, 8):
        idx = search(SAMPLE, key)
        assert SAMPLE[idx] == key
    assert search(SAMPLE, 5) == -1
    assert search([], 1) == -1


def test_search_range():
    assert search_range(SAMPLE, 6) == (3, 5)
    assert search_range(SAMPLE, 2) == (0, 1)
    assert search_range(SAMPLE, 5) is None
    assert search_range(SAMPLE, 1) is None


def test_insert_keeps_order():
    values = [1, 3, 5]
    assert insert(values, 3) == 2
    assert values == [1, 3, 3, 5]
    assert insert(values, 0) == 0
    assert insert(values, 9) == 5
    assert values == [0, 1, 3, 3, 5, 9]


def test_pick_matches_sorted_order():
    rng = random.Random(7)
    values = [rng.randrange(1000) for _ in range(200)]
    ordered = sorted(values)
    for k in (1, 2, 50, 100, 199, 200):
        assert pick(list(values), k) == ordered[k - 1]


def test_pick_out_of_range():
    with pytest.raises(IndexError):
        pick([1, 2, 3], 0)
    with pytest.raises(IndexError):
        pick([1, 2, 3], 4)
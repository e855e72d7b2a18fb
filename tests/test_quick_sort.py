import random
from collections import Counter

import pytest

from dsgo.basic_sort import is_sorted
from dsgo.quick_sort import (
    block_intro_sort,
    block_quick_sort,
    intro_sort,
    intro_sort_y,
    quick_sort,
    quick_sort_v2,
    quick_sort_y,
    quick_sort_y_v2,
)

BIG = 2000
SMALL = 300

CASES = [
    (quick_sort, BIG, SMALL),
    (quick_sort_v2, BIG, SMALL),
    (quick_sort_y, BIG, SMALL),
    (quick_sort_y_v2, BIG, SMALL),
    (block_quick_sort, BIG, SMALL),
    (intro_sort, BIG, BIG),
    (intro_sort_y, BIG, BIG),
    (block_intro_sort, BIG, BIG),
]

ALL_SORTS = [case[0] for case in CASES]


def _random_list(rng, size, upper=2**32):
    return [rng.randrange(upper) for _ in range(size)]


@pytest.mark.parametrize("sort, size", [(c[0], c[1]) for c in CASES])
def test_random_input_is_sorted_and_preserved(sort, size):
    rng = random.Random(1234)
    data = _random_list(rng, size)
    work = list(data)
    sort(work)
    assert is_sorted(work)
    assert Counter(work) == Counter(data)


@pytest.mark.parametrize("sort, size", [(c[0], c[2]) for c in CASES])
def test_descending_input(sort, size):
    work = list(range(size, 0, -1))
    sort(work)
    assert is_sorted(work)
    assert work == list(range(1, size + 1))


@pytest.mark.parametrize("sort, size", [(c[0], c[2]) for c in CASES])
def test_constant_input(sort, size):
    work = [99] * size
    sort(work)
    assert is_sorted(work)
    assert work == [99] * size


@pytest.mark.parametrize("sort", ALL_SORTS)
@pytest.mark.parametrize("size", range(6))
def test_tiny_inputs(sort, size):
    rng = random.Random(size)
    data = _random_list(rng, size)
    work = list(data)
    sort(work)
    assert is_sorted(work)
    assert Counter(work) == Counter(data)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_many_duplicates(sort):
    rng = random.Random(42)
    data = _random_list(rng, BIG, upper=8)
    work = list(data)
    sort(work)
    assert is_sorted(work)
    assert Counter(work) == Counter(data)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_two_distinct_values(sort):
    rng = random.Random(7)
    data = [rng.choice((3, 5)) for _ in range(500)]
    work = list(data)
    sort(work)
    assert is_sorted(work)
    assert work == [3] * data.count(3) + [5] * data.count(5)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_strings(sort):
    rng = random.Random(99)
    words = ["".join(rng.choice("abcdef") for _ in range(4)) for _ in range(400)]
    work = list(words)
    sort(work)
    assert is_sorted(work)
    assert Counter(work) == Counter(words)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_already_sorted(sort):
    work = list(range(1000))
    sort(work)
    assert is_sorted(work)
    assert work == list(range(1000))
import random

import pytest

from dsgo.radix_sort import radix_sort

BIG = 2000
SMALL = 300


def _random_list(size, seed=13):
    rng = random.Random(seed + size)
    return [rng.randrange(2**64) for _ in range(size)]


def test_unsigned_cases():
    values = _random_list(BIG)
    expected = sorted(values)
    radix_sort(values)
    assert values == expected

    values = list(range(SMALL, 0, -1))
    radix_sort(values)
    assert values == list(range(1, SMALL + 1))

    values = [99] * SMALL
    radix_sort(values)
    assert values == [99] * SMALL

    for size in range(6):
        values = _random_list(size)
        expected = sorted(values)
        radix_sort(values)
        assert values == expected


def test_signed_values():
    values = [5, -3, 127, -128, 0, -1, 64]
    radix_sort(values, bits=8, signed=True)
    assert values == [-128, -3, -1, 0, 5, 64, 127]


def test_signed_random_32_bits():
    rng = random.Random(1)
    values = [rng.randrange(-(2**31), 2**31) for _ in range(1000)]
    expected = sorted(values)
    radix_sort(values, bits=32, signed=True)
    assert values == expected


def test_value_out_of_range():
    with pytest.raises(ValueError):
        radix_sort([256], bits=8)
    with pytest.raises(ValueError):
        radix_sort([-1], bits=16)
    with pytest.raises(ValueError):
        radix_sort([128], bits=8, signed=True)


def test_bad_width():
    with pytest.raises(ValueError):
        radix_sort([1, 2], bits=12)
    with pytest.raises(ValueError):
        radix_sort([1, 2], bits=0)
import random
from collections import Counter

import pytest

from algo_drills.selection import (
    find_median,
    is_wiggled,
    wiggle_sort_by_partition,
    wiggle_sort_by_swaps,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1], 1),
        ([2, 1], 2),
        ([6, -4, 8, -12, 7], 6),
        ([4, 8, 6, -4, 8, -12, 7, 16, -11], 6),
        ([2, 4, 8, 6, -4, 8, -12, 7, 16, -11], 6),
        ([2, 4, 8, 6, -4, 8, -12, 7, 16, -11, -14], 4),
        ([-20, -10, 2, 4, 8, 6, -4, 8, -12, 7, 16, -11, -14], 2),
    ],
)
@pytest.mark.parametrize("seed", [0, 1, 7])
def test_find_median(values, expected, seed):
    assert find_median(values, random.Random(seed)) == expected


def test_find_median_does_not_mutate():
    values = [6, -4, 8, -12, 7]
    find_median(values, random.Random(3))
    assert values == [6, -4, 8, -12, 7]


def test_find_median_empty():
    with pytest.raises(ValueError):
        find_median([])


@pytest.mark.parametrize(
    "values",
    [[3, 2, 1], [3, 2, 1, 4, 5, 6, 7, 8, 9], [3, 2, 1, 4, 5, 6, 7, 8, 9, 10]],
)
def test_unsorted_inputs_are_not_wiggled(values):
    assert not is_wiggled(values)


def test_is_wiggled_small():
    assert is_wiggled([1])
    assert is_wiggled([1, 2])
    assert not is_wiggled([2, 1])


CASES = [
    [1],
    [2, 1],
    [3, 2, 1],
    [3, 2, 1, 4, 5, 6, 7, 8, 9],
    [3, 2, 1, 4, 5, 6, 7, 8, 9, 10],
]


@pytest.mark.parametrize("sorter", [wiggle_sort_by_swaps, wiggle_sort_by_partition])
@pytest.mark.parametrize("values", CASES)
@pytest.mark.parametrize("seed", range(5))
def test_wiggle_sorts(sorter, values, seed):
    result = sorter(values, random.Random(seed))
    assert is_wiggled(result)
    assert Counter(result) == Counter(values)


@pytest.mark.parametrize("sorter", [wiggle_sort_by_swaps, wiggle_sort_by_partition])
def test_wiggle_sort_large_distinct(sorter):
    values = list(range(-50, 51))
    random.Random(11).shuffle(values)
    result = sorter(values, random.Random(5))
    assert is_wiggled(result)
    assert sorted(result) == list(range(-50, 51))


@pytest.mark.parametrize("sorter", [wiggle_sort_by_swaps, wiggle_sort_by_partition])
def test_wiggle_sort_empty(sorter):
    assert sorter([], random.Random(0)) == []
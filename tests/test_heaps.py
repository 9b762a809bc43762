import pytest

from algo_drills.heaps import (
    k_smallest,
    merge_sorted_lists,
    second_largest,
    third_largest,
)

SAMPLE = [-3, 2, 12, -1, 10, 5]


@pytest.mark.parametrize(
    "values, k, expected",
    [
        ([1], 1, [1]),
        ([2, 1], 1, [1]),
        ([2, 1], 2, [1, 2]),
        (SAMPLE, 1, [-3]),
        (SAMPLE, 2, [-3, -1]),
        (SAMPLE, 3, [-3, -1, 2]),
        (SAMPLE, 4, [-3, -1, 2, 5]),
        (SAMPLE, 5, [-3, -1, 2, 5, 10]),
        (SAMPLE, 6, [-3, -1, 2, 5, 10, 12]),
    ],
)
def test_k_smallest(values, k, expected):
    assert k_smallest(values, k) == expected


def test_k_smallest_does_not_mutate_input():
    values = list(SAMPLE)
    k_smallest(values, 3)
    assert values == SAMPLE


def test_k_smallest_too_many():
    with pytest.raises(ValueError, match="Empty queue"):
        k_smallest([1, 2], 3)


MERGED = [-10, -9, -8, -7, -6, 1, 2, 3, 10, 11, 12, 13,
          20, 21, 22, 23, 24, 30, 31, 32, 33, 34, 35]


@pytest.mark.parametrize(
    "lists, expected",
    [
        ([[1]], [1]),
        ([[2], [1]], [1, 2]),
        ([[2], [1], [-1]], [-1, 1, 2]),
        ([[1, 2], [3, 4], [5, 6]], [1, 2, 3, 4, 5, 6]),
        ([[1, 6], [2, 4], [3, 5]], [1, 2, 3, 4, 5, 6]),
        (
            [[1, 2, 3], [30, 31, 32, 33, 34, 35], [10, 11, 12, 13],
             [20, 21, 22, 23, 24], [-10, -9, -8, -7, -6]],
            MERGED,
        ),
        (
            [[1, 3, 10, 22], [-9, 30, 31, 33, 34], [2, 11, 13, 35],
             [-10, -7, 20, 21, 23, 24], [-8, -6, 12, 32]],
            MERGED,
        ),
    ],
)
def test_merge_sorted_lists(lists, expected):
    assert merge_sorted_lists(lists) == expected


def test_merge_sorted_lists_skips_empty_lists():
    assert merge_sorted_lists([[], [1, 2], []]) == [1, 2]
    assert merge_sorted_lists([]) == []


def test_merge_keeps_every_element():
    lists = [[1, 1, 4], [1, 2], [0, 4, 9]]
    merged = merge_sorted_lists(lists)
    assert len(merged) == 8
    assert all(a <= b for a, b in zip(merged, merged[1:]))


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 5], 2),
        ([6, 2, 5, -3], 5),
        ([-4, -43, -51, -8, 1, 15, 18, 2, 3, 37, 6, 7, 8, 99], 37),
        ([-4, -43, -51, -8, 1, 15, 18, 2, 3, -37, 6, 7, 8, 99], 18),
    ],
)
def test_second_largest(values, expected):
    assert second_largest(values) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 5, -3], -3),
        ([6, 2, 5, -3], 2),
        ([-4, -43, -51, -8, 1, 15, 18, 2, 3, 37, 6, 7, 8, 99], 18),
        ([-4, -43, -51, -8, 1, 15, 18, 2, 3, -37, 6, 7, 8, 99], 15),
    ],
)
def test_third_largest(values, expected):
    assert third_largest(values) == expected


def test_second_largest_shortage():
    with pytest.raises(ValueError, match="Elements shortage"):
        second_largest([1])


def test_third_largest_shortage():
    with pytest.raises(ValueError, match="Elements shortage"):
        third_largest([2, 5])
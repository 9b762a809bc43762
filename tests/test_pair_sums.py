import pytest

from algo_drills.pair_sums import (
    can_add_up,
    find_pairs_with_sum,
    has_pair_sum,
    has_pair_sum_sorted,
)


@pytest.mark.parametrize(
    "first, second, target, expected",
    [
        ({1}, {1}, 3, []),
        ({1}, {1}, 2, [(1, 1)]),
        ({4, 3}, {3, 2}, 6, [(3, 3), (4, 2)]),
        ({17, 4, 11, 1, 25, 21}, {15, 3, 18, 2, 8, 20}, 29, [(11, 18), (21, 8)]),
    ],
)
def test_find_pairs_with_sum(first, second, target, expected):
    assert find_pairs_with_sum(first, second, target) == expected


def test_find_pairs_each_adds_up():
    pairs = find_pairs_with_sum({17, 4, 11, 1, 25, 21}, {15, 3, 18, 2, 8, 20}, 29)
    assert all(a + b == 29 for a, b in pairs)


@pytest.mark.parametrize(
    "values, target, expected",
    [
        ({1.0, 2.0}, 3.0, True),
        ({1.0, 2.0}, 4.0, False),
        ({1.3, 1.1, 0.4, 0.5, 0.6}, 2.0, False),
        ({1.3, 1.1, 0.4, 0.5, 0.6}, 1.9, True),
        ({1.3, 1.1, 0.4, 0.5, 0.6}, 1.0, True),
        ({1.3, 1.1, 0.4, 0.5, 0.6}, 1.2, False),
    ],
)
def test_has_pair_sum(values, target, expected):
    assert has_pair_sum(values, target) is expected


@pytest.mark.parametrize(
    "target, expected",
    [(1.9, False), (2.3, True), (1.4, True), (1.5, False), (4.0, True), (3.0, False)],
)
def test_has_pair_sum_sorted(target, expected):
    values = sorted([1.5, 2.5, -0.2, -0.1, 1.3])
    assert has_pair_sum_sorted(values, target) is expected


def test_has_pair_sum_sorted_needs_two_values():
    assert has_pair_sum_sorted([], 0) is False
    assert has_pair_sum_sorted([2.0], 4.0) is False


SMALL_SET = {1, 2, 3, 10, 11, 12, 100, 101, 102}


@pytest.mark.parametrize(
    "values, k, target, expected",
    [
        ({1}, 1, 1, True),
        ({1}, 1, 2, False),
        ({1, 5}, 1, 1, True),
        ({1, 5}, 1, 5, True),
        ({1, 5}, 2, 6, True),
        ({1, 5}, 2, 7, False),
        (SMALL_SET, 2, 3, True),
        (SMALL_SET, 2, 203, True),
        (SMALL_SET, 2, 14, True),
        (SMALL_SET, 2, 26, False),
        (SMALL_SET, 3, 6, True),
        (SMALL_SET, 4, 6, False),
        (SMALL_SET, 3, 33, True),
        (SMALL_SET, 3, 34, False),
        (SMALL_SET, 4, 34, True),
        (SMALL_SET, 3, 24, True),
        (SMALL_SET, 4, 24, True),
        (SMALL_SET, 5, 24, False),
        (SMALL_SET, 3, 204, True),
        (SMALL_SET, 3, 214, True),
        (SMALL_SET, 3, 303, True),
        (SMALL_SET, 8, 341, True),
        (SMALL_SET, 8, 337, False),
        (SMALL_SET, 9, 342, True),
    ],
)
def test_can_add_up(values, k, target, expected):
    assert can_add_up(values, k, target) is expected


def test_can_add_up_more_terms_than_values():
    assert can_add_up({1, 5}, 3, 6) is False


def test_can_add_up_rejects_nonpositive_k():
    with pytest.raises(ValueError):
        can_add_up({1, 2}, 0, 0)
"""Finding values that add up to a target."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def find_pairs_with_sum(
    first: Iterable[int], second: Iterable[int], target: int
) -> list[tuple[int, int]]:
    """Return every pair (a, b), a from ``first`` and b from ``second``, with a + b == target.

    Pairs come in ascending order of ``a``.
    """
    ascending = sorted(set(first))
    descending = sorted(set(second), reverse=True)
    pairs: list[tuple[int, int]] = []
    i = j = 0
    while i < len(ascending) and j < len(descending):
        total = ascending[i] + descending[j]
        if total <= target:
            if total == target:
                pairs.append((ascending[i], descending[j]))
            i += 1
        else:
            j += 1
    return pairs


def has_pair_sum_sorted(sorted_values: Sequence[float], target: float) -> bool:
    """True when two distinct positions of an ascending sequence add up to ``target``."""
    lo, hi = 0, len(sorted_values) - 1
    while lo < hi:
        total = sorted_values[lo] + sorted_values[hi]
        if total == target:
            return True
        if total < target:
            lo += 1
        else:
            hi -= 1
    return False


def has_pair_sum(values: Iterable[float], target: float) -> bool:
    """True when two distinct members of the set ``values`` add up to ``target``."""
    return has_pair_sum_sorted(sorted(set(values)), target)


def _search_from(values: Sequence[int], lo: int, target: int) -> bool:
    index = bisect_left(values, target, lo=lo)
    return index < len(values) and values[index] == target


def _add_up_from(values: Sequence[int], k: int, lo: int, target: int) -> bool:
    if k == 1:
        return _search_from(values, lo, target)
    for i in range(lo, len(values) - k + 1):
        remaining = target - values[i]
        if remaining < values[i + 1]:
            break
        if _add_up_from(values, k - 1, i + 1, remaining):
            return True
    return False


def can_add_up(values: Iterable[int], k: int, target: int) -> bool:
    """True when exactly ``k`` distinct members of ``values`` sum to ``target``."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return _add_up_from(sorted(set(values)), k, 0, target)
"""Quickselect-based median finding and wiggle sorting."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import pairwise


def _select(items: list[int], k: int, positions: Sequence[int]) -> int:
    """Partition ``items`` so the k-th smallest sits at logical position ``k``.

    ``positions`` maps logical positions to actual list indices. Returns that value.
    """
    lo, hi = 0, len(items) - 1
    while lo < hi:
        pivot = items[positions[hi]]
        first_high = lo
        for i in range(lo, hi):
            if items[positions[i]] < pivot:
                a, b = positions[i], positions[first_high]
                items[a], items[b] = items[b], items[a]
                first_high += 1
        a, b = positions[hi], positions[first_high]
        items[a], items[b] = items[b], items[a]
        if k < first_high:
            hi = first_high - 1
        elif k > first_high:
            lo = first_high + 1
        else:
            break
    return items[positions[k]]


def _shuffled(values: Sequence[int], rng: random.Random | None) -> list[int]:
    items = list(values)
    (rng if rng is not None else random.Random()).shuffle(items)
    return items


def find_median(values: Sequence[int], rng: random.Random | None = None) -> int:
    """Return the element at position n // 2 of the sorted values."""
    if not values:
        raise ValueError("need at least one value")
    items = _shuffled(values, rng)
    return _select(items, len(items) // 2, range(len(items)))


def wiggle_sort_by_swaps(
    values: Sequence[int], rng: random.Random | None = None
) -> list[int]:
    """Return the values arranged so that a0 < a1 > a2 < a3 ...

    Values must be distinct. Partitions around the median, then swaps
    misplaced even and odd positions.
    """
    items = _shuffled(values, rng)
    n = len(items)
    if n < 2:
        return items
    median = _select(items, (n - 1) // 2, range(n))
    even, odd = 0, 1
    while True:
        while even < n and items[even] <= median:
            even += 2
        while odd < n and median < items[odd]:
            odd += 2
        if even >= n or odd >= n:
            break
        items[even], items[odd] = items[odd], items[even]
    return items


def wiggle_sort_by_partition(
    values: Sequence[int], rng: random.Random | None = None
) -> list[int]:
    """Return the values arranged so that a0 < a1 > a2 < a3 ...

    Values must be distinct. Partitions around the median on a view where
    all even indices come before all odd ones.
    """
    items = _shuffled(values, rng)
    n = len(items)
    if n < 2:
        return items
    positions = [*range(0, n, 2), *range(1, n, 2)]
    _select(items, (n - 1) // 2, positions)
    return items


def is_wiggled(values: Sequence[int]) -> bool:
    """True when even positions are below and odd positions above their neighbours."""
    return all(
        (a < b) if index % 2 == 0 else (a > b)
        for index, (a, b) in enumerate(pairwise(values))
    )
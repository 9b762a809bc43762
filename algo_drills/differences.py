"""Largest and smallest differences between elements of a sequence."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import pairwise


def max_difference(values: Sequence[int]) -> int:
    """Largest difference between two elements, in one pass."""
    if not values:
        raise ValueError("need at least one value")
    lo = hi = values[0]
    for value in values:
        lo = min(lo, value)
        hi = max(hi, value)
    return hi - lo


def max_difference_sorted(sorted_values: Sequence[int]) -> int:
    """Largest difference for a sequence sorted either way."""
    if not sorted_values:
        raise ValueError("need at least one value")
    return abs(sorted_values[-1] - sorted_values[0])


def min_difference_heap(values: Sequence[int]) -> int:
    """Smallest difference between two elements, found while heap-sorting."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    heap = list(values)
    heapq.heapify(heap)
    best: int | None = None
    while len(heap) > 1:
        smallest = heapq.heappop(heap)
        gap = heap[0] - smallest
        best = gap if best is None else min(best, gap)
    assert best is not None
    return best


def min_difference_sorted(sorted_values: Sequence[int]) -> int:
    """Smallest difference for an ascending sequence: the closest neighbours."""
    if len(sorted_values) < 2:
        raise ValueError("need at least two values")
    return min(b - a for a, b in pairwise(sorted_values))
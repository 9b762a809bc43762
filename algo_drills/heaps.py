"""Heap-based selection and merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def k_smallest(values: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` smallest values in ascending order.

    Builds a heap in linear time and extracts ``k`` minima.
    """
    heap = list(values)
    if k > len(heap):
        raise ValueError("Empty queue")
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(k)]


def merge_sorted_lists(lists: Sequence[Sequence[int]]) -> list[int]:
    """Merge ascending lists into one ascending list.

    Keeps a max-heap keyed on the last remaining element of each list and
    fills the result from its end.
    """
    heap = [(-lst[-1], index, len(lst) - 1) for index, lst in enumerate(lists) if lst]
    heapq.heapify(heap)
    merged: list[int] = []
    while heap:
        neg_value, index, position = heap[0]
        merged.append(-neg_value)
        if position > 0:
            heapq.heapreplace(heap, (-lists[index][position - 1], index, position - 1))
        else:
            heapq.heappop(heap)
    merged.reverse()
    return merged


def second_largest(values: Iterable[int]) -> int:
    """Return the second largest value, counting duplicates separately."""
    top = heapq.nlargest(2, values)
    if len(top) < 2:
        raise ValueError("Elements shortage")
    return top[1]


def third_largest(values: Iterable[int]) -> int:
    """Return the third largest value, counting duplicates separately."""
    top = heapq.nlargest(3, values)
    if len(top) < 3:
        raise ValueError("Elements shortage")
    return top[2]
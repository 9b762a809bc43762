"""Union of two collections of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import chain, groupby


def union_of_sets(first: Iterable[int], second: Iterable[int]) -> set[int]:
    """Union by sorting the combined values and dropping duplicates."""
    return {value for value, _ in groupby(sorted(chain(first, second)))}


def union_of_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending duplicate-free sequences into their sorted union."""
    result: list[int] = []
    for value in heapq.merge(first, second):
        if not result or result[-1] != value:
            result.append(value)
    return result
"""Sorting with list reversal as the only rearranging operation."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Iterable
from typing import TextIO


def _reverse(items: list[int], i: int, j: int) -> None:
    """Reverse the inclusive stretch items[i..j]."""
    items[i : j + 1] = items[i : j + 1][::-1]


def _partition(items: list[int], lo: int, hi: int, pivot: int) -> int:
    """Move values below ``pivot`` in items[lo..hi] to the front by reversals.

    Returns the index of the first value not below the pivot.
    """
    if lo == hi:
        return lo if pivot <= items[lo] else lo + 1
    mid = (lo + hi) // 2
    split_left = _partition(items, lo, mid, pivot)
    split_right = _partition(items, mid + 1, hi, pivot)
    if split_left > mid:
        return split_right
    if split_right == mid + 1:
        return split_left
    _reverse(items, split_left, split_right - 1)
    return split_left + (split_right - mid - 1)


def _sort(items: list[int], lo: int, hi: int) -> None:
    while lo < hi:
        first_high = _partition(items, lo, hi - 1, items[hi])
        _reverse(items, first_high, hi)
        if first_high - lo < hi - first_high:
            _sort(items, lo, first_high - 1)
            lo = first_high + 1
        else:
            _sort(items, first_high + 1, hi)
            hi = first_high - 1


def sort_by_reversals(
    values: Iterable[int], rng: random.Random | None = None
) -> list[int]:
    """Return the values sorted ascending, rearranging only by reversals.

    A quicksort whose partitioning step is built from reversals; the input is
    shuffled first to make the expected running time O(n log^2 n).
    """
    items = list(values)
    (rng if rng is not None else random.Random()).shuffle(items)
    _sort(items, 0, len(items) - 1)
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def measure_time(
    func: Callable[[], object], name: str, out: TextIO | None = None
) -> int:
    """Run ``func``, report its duration in microseconds to ``out`` and return it."""
    start = time.perf_counter_ns()
    func()
    micros = (time.perf_counter_ns() - start) // 1000
    print(f"Elapsed time for {name}:{micros}", file=out if out is not None else sys.stdout)
    return micros
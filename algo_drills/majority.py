"""Find values that occur in more than half and more than a quarter of a list."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class MajorityResult:
    """Values occurring more than n/2 and, besides it, more than n/4 times.

    ``more_than_quarter`` is only looked for when ``more_than_half`` exists.
    """

    more_than_half: int | None = None
    more_than_quarter: int | None = None


def _vote(values: Sequence[int]) -> int:
    """Boyer-Moore majority vote: the only possible majority of ``values``."""
    candidate = values[0]
    votes = 0
    for value in values:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    return candidate


def _select(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (0-based) by quickselect."""
    pool = list(values)
    rng = random.Random(len(pool))
    while True:
        pivot = pool[rng.randrange(len(pool))]
        lower = [v for v in pool if v < pivot]
        equal_count = sum(1 for v in pool if v == pivot)
        if k < len(lower):
            pool = lower
        elif k < len(lower) + equal_count:
            return pivot
        else:
            k -= len(lower) + equal_count
            pool = [v for v in pool if v > pivot]


def _resolve(values: Sequence[int], pick) -> MajorityResult:
    if not values:
        raise ValueError("need at least one value")
    n = len(values)
    half = pick(values)
    rest = [v for v in values if v != half]
    if (n - len(rest)) * 2 <= n:
        return MajorityResult()
    if len(rest) * 4 <= n:
        return MajorityResult(half)
    quarter = pick(rest)
    if rest.count(quarter) * 4 <= n:
        return MajorityResult(half)
    return MajorityResult(half, quarter)


def find_majorities_by_voting(values: Sequence[int]) -> MajorityResult:
    """Find the majorities using majority voting, in linear time."""
    return _resolve(values, _vote)


def find_majorities_by_selection(values: Sequence[int]) -> MajorityResult:
    """Find the majorities by selecting the median, in linear expected time."""
    return _resolve(values, lambda seq: _select(seq, len(seq) // 2))
"""Sweep-line problems on closed integer intervals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_START = 0
_END = 1


@dataclass(frozen=True)
class Interval:
    """Closed interval [left, right]."""

    left: int
    right: int


class NoCoverError(ValueError):
    """The intervals cannot cover the requested range."""


def _endpoints(intervals: Iterable[Interval]) -> list[tuple[int, int]]:
    """Endpoints by coordinate; at equal coordinates starts come first."""
    events = []
    for itv in intervals:
        events.append((itv.left, _START))
        events.append((itv.right, _END))
    events.sort()
    return events


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Merge intervals that overlap or touch into disjoint ones, in order."""
    merged: list[Interval] = []
    depth = 0
    start = 0
    for coord, kind in _endpoints(intervals):
        if depth == 0:
            start = coord
        depth += 1 if kind == _START else -1
        if depth == 0:
            merged.append(Interval(start, coord))
    return merged


def max_overlaps(intervals: Iterable[Interval]) -> list[Interval]:
    """Return every stretch covered by the largest number of intervals."""
    depth = 0
    best = 0
    traced: list[Interval] = []
    prev = None
    for coord, kind in _endpoints(intervals):
        if kind == _END and prev is not None:
            if depth > best:
                best = depth
                traced = [Interval(prev, coord)]
            elif depth == best:
                traced.append(Interval(prev, coord))
        depth += 1 if kind == _START else -1
        prev = coord
    return traced


def fewest_covers(intervals: Iterable[Interval], m: int) -> list[Interval]:
    """Pick the fewest intervals that together cover [0, m].

    Raises NoCoverError when no selection covers the range.
    """
    ordered = sorted(intervals, key=lambda itv: itv.left)
    if not ordered or ordered[0].left != 0:
        raise NoCoverError("range start is not covered")
    focus = ordered[0]
    covers = [focus]
    if m <= focus.right:
        return covers
    candidate: Interval | None = None
    for itv in ordered[1:]:
        if focus.right < itv.left:
            if candidate is None or candidate.right < itv.left:
                raise NoCoverError("gap between intervals")
            covers.append(candidate)
            focus = candidate
            candidate = None
        if candidate is None or candidate.right < itv.right:
            candidate = itv
            if m <= candidate.right:
                covers.append(candidate)
                return covers
    raise NoCoverError("range end is not covered")
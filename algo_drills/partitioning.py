"""Linear-time partitioning of sequences by a small number of keys."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class FlagColor(IntEnum):
    """Colours of the Dutch national flag, in flag order."""

    RED = 0
    WHITE = 1
    BLUE = 2


class Color(IntEnum):
    """Colours attached to integers, in sorting order."""

    RED = 0
    BLUE = 1
    YELLOW = 2


def dutch_flag_sort(colors: Iterable[FlagColor]) -> list[FlagColor]:
    """Arrange reds before whites before blues in one pass of swaps."""
    items = list(colors)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        color = items[mid]
        if color is FlagColor.RED:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif color is FlagColor.WHITE:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def negatives_first(values: Iterable[int]) -> list[int]:
    """Move negative values to the front by swapping, as in quicksort partitioning."""
    items = list(values)
    first_non_negative = 0
    for i, value in enumerate(items):
        if value < 0:
            items[i], items[first_non_negative] = items[first_non_negative], items[i]
            first_non_negative += 1
    return items


def sort_by_color(items: Iterable[tuple[int, Color]]) -> list[tuple[int, Color]]:
    """Stable sort of (value, colour) pairs: reds, then blues, then yellows."""
    buckets: dict[Color, list[int]] = {color: [] for color in Color}
    for value, color in items:
        buckets[color].append(value)
    return [(value, color) for color in Color for value in buckets[color]]
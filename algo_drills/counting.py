"""Problems solved by counting occurrences."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from itertools import groupby


def sort_by_counting(values: Iterable[int]) -> list[int]:
    """Sort values with few distinct keys by counting each one."""
    counts = Counter(values)
    return [value for value in sorted(counts) for _ in range(counts[value])]


def find_mode(values: Iterable[int]) -> int:
    """Return the most frequent value."""
    counts = Counter(values)
    if not counts:
        raise ValueError("need at least one value")
    return counts.most_common(1)[0][0]


def h_index(citations: Iterable[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    ranked = sorted(citations, reverse=True)
    for rank, count in enumerate(ranked, start=1):
        if count < rank:
            return rank - 1
    return len(ranked)


def _bucket_key(name: str) -> str:
    space = name.find(" ")
    if space < 0:
        return name[:2] * 2
    return name[: min(2, space)] + name[space + 1 : space + 3]


def distinct_names(names: Iterable[str]) -> list[str]:
    """Return each distinct "First Last" name once, bucketing by initial letters."""
    buckets: defaultdict[str, list[str]] = defaultdict(list)
    for name in names:
        buckets[_bucket_key(name)].append(name)
    return [name for bucket in buckets.values() for name, _ in groupby(sorted(bucket))]
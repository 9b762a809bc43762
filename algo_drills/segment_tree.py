"""Segment trees over integer arrays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class SegmentTree(ABC):
    """Range-query tree; subclasses define leaves, identity and combination."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("segment tree needs at least one value")
        self._n = len(values)
        self._tree: list[Any] = [None] * (4 * self._n)
        self._build(values, 1, 0, self._n - 1)

    @abstractmethod
    def make_elem(self, value: int) -> Any:
        """Turn an input value into a leaf."""

    @abstractmethod
    def make_base_elem(self) -> Any:
        """Return the identity of ``combine``."""

    @abstractmethod
    def combine(self, a: Any, b: Any) -> Any:
        """Merge two partial results."""

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[int], v: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[v] = self.make_elem(values[tl])
            return
        tm = (tl + tr) // 2
        self._build(values, 2 * v, tl, tm)
        self._build(values, 2 * v + 1, tm + 1, tr)
        self._tree[v] = self.combine(self._tree[2 * v], self._tree[2 * v + 1])

    def _query(self, v: int, tl: int, tr: int, left: int, right: int) -> Any:
        if left > right:
            return self.make_base_elem()
        if left == tl and right == tr:
            return self._tree[v]
        tm = (tl + tr) // 2
        return self.combine(
            self._query(2 * v, tl, tm, left, min(right, tm)),
            self._query(2 * v + 1, tm + 1, tr, max(left, tm + 1), right),
        )

    def query(self, left: int, right: int) -> Any:
        """Combine values in the inclusive range; an empty range gives the identity."""
        if left > right:
            return self.make_base_elem()
        if left < 0 or right >= self._n:
            raise IndexError("query range out of bounds")
        return self._query(1, 0, self._n - 1, left, right)


class ProductTree(SegmentTree):
    """Segment tree answering range products."""

    def make_elem(self, value: int) -> int:
        return value

    def make_base_elem(self) -> int:
        return 1

    def combine(self, a: int, b: int) -> int:
        return a * b

    def product(self, left: int, right: int) -> int:
        """Product of the values in the inclusive range."""
        return self.query(left, right)


def products_except_self(values: Sequence[int]) -> list[int]:
    """For each position, the product of all other values, without division."""
    tree = ProductTree(values)
    last = len(values) - 1
    return [tree.product(0, i - 1) * tree.product(i + 1, last) for i in range(len(values))]
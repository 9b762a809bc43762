"""A bounded stack reporting its minimum and maximum in constant time."""

from __future__ import annotations

CAPACITY = 256


class MinMaxStack:
    """Stack that encodes previous extremes in the stored values themselves."""

    def __init__(self) -> None:
        self._data: list[int] = []
        self._min = 0
        self._max = 0

    def __len__(self) -> int:
        return len(self._data)

    def push(self, item: int) -> None:
        """Push ``item``; the stack holds at most ``CAPACITY - 1`` items."""
        if len(self._data) + 1 >= CAPACITY:
            raise IndexError("Capacity is over")
        if not self._data:
            self._data.append(item)
            self._min = self._max = item
        elif item < self._min:
            self._data.append(item * 2 - self._min)
            self._min = item
        elif item > self._max:
            self._data.append(item * 2 - self._max)
            self._max = item
        else:
            self._data.append(item)

    def pop(self) -> int:
        """Remove and return the top item, restoring the previous extremes."""
        if not self._data:
            raise IndexError("No item")
        stored = self._data.pop()
        if stored < self._min:
            result = self._min
            self._min = self._min * 2 - stored
            return result
        if stored > self._max:
            result = self._max
            self._max = self._max * 2 - stored
            return result
        return stored

    def top(self) -> int:
        """Return the top item without removing it."""
        if not self._data:
            raise IndexError("No item")
        stored = self._data[-1]
        if stored < self._min:
            return self._min
        if stored > self._max:
            return self._max
        return stored

    def find_min(self) -> int:
        """Return the smallest item on the stack."""
        if not self._data:
            raise IndexError("No item")
        return self._min

    def find_max(self) -> int:
        """Return the largest item on the stack."""
        if not self._data:
            raise IndexError("No item")
        return self._max
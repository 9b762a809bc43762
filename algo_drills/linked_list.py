"""A singly linked list with reversal, constant-time deletion and middle lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of the list."""

    item: Any
    next: Node | None = None


class SinglyLinkedList:
    """Singly linked list that tracks its size."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in self._nodes())

    def insert(self, value: Any) -> None:
        """Put ``value`` at the head of the list."""
        self._head = Node(value, self._head)
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Node | None = None
        node = self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def search(self, value: Any) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.item == value), None)

    def delete_node(self, node: Node) -> None:
        """Remove ``node``; constant time unless it is the tail."""
        if node is self._head:
            self._head = node.next
            self._size -= 1
            return
        if node.next is None:
            for prev in self._nodes():
                if prev.next is node:
                    prev.next = None
                    self._size -= 1
                    return
            return
        successor = node.next
        node.item = successor.item
        node.next = successor.next
        self._size -= 1

    def head_value(self) -> Any:
        """Return the first item."""
        if self._head is None:
            raise IndexError("empty list")
        return self._head.item

    def tail_value(self) -> Any:
        """Return the last item."""
        last = None
        for last in self._nodes():
            pass
        if last is None:
            raise IndexError("empty list")
        return last.item

    def middle_by_size(self) -> Node:
        """Return the middle node using the tracked size."""
        middle = (self._size - 1) // 2
        for index, node in enumerate(self._nodes()):
            if index == middle:
                return node
        raise IndexError("size error")

    def middle_by_scan(self) -> Node:
        """Return the middle node by collecting all nodes first."""
        nodes = list(self._nodes())
        if not nodes:
            raise IndexError("empty list")
        return nodes[(len(nodes) - 1) // 2]
"""A doubly linked list of integers with positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search: the position of the first match, if any."""

    index: int | None
    found: bool


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: int) -> None:
        self.data = data
        self.next: _Node | None = None
        self.prev: _Node | None = None


class LinkedList:
    """A doubly linked list addressed by zero-based position."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _node_at(self, index: int) -> _Node:
        # Walk from whichever end is closer.
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def insert(self, data: int, index: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"invalid index {index} for list of length {self._size}")
        new_node = _Node(data)
        if self._head is None:
            self._head = self._tail = new_node
        elif index == self._size:
            new_node.prev = self._tail
            self._tail.next = new_node
            self._tail = new_node
        else:
            successor = self._node_at(index)
            new_node.next = successor
            new_node.prev = successor.prev
            if successor.prev is None:
                self._head = new_node
            else:
                successor.prev.next = new_node
            successor.prev = new_node
        self._size += 1

    def delete(self, index: int) -> None:
        """Remove the element at position ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"invalid index {index} for list of length {self._size}")
        target = self._node_at(index)
        if target.prev is None:
            self._head = target.next
        else:
            target.prev.next = target.next
        if target.next is None:
            self._tail = target.prev
        else:
            target.next.prev = target.prev
        target.next = target.prev = None
        self._size -= 1

    def search(self, value: int) -> SearchResult:
        """Find the first element equal to ``value``."""
        for index, data in enumerate(self):
            if data == value:
                return SearchResult(index=index, found=True)
        return SearchResult(index=None, found=False)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{data}\t" for data in self)
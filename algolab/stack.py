"""A bounded integer stack that grows on push and halves when underused."""

from __future__ import annotations


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """A stack with an explicit capacity that adapts to its contents."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, *args: int) -> int:
        """Push every argument in order; return the index of the new top."""
        needed = len(self._items) + len(args)
        if needed > self._capacity:
            self.grow(needed - self._capacity)
        self._items.extend(args)
        return len(self._items) - 1

    def pop(self) -> int:
        """Remove and return the top element, halving capacity when underused."""
        if not self._items:
            raise StackUnderflowError("pop from empty stack")
        element = self._items.pop()
        top = len(self._items) - 1
        if self._capacity % 2 == 0 and top < self._capacity // 2:
            self.shrink()
        return element

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("peek at empty stack")
        return self._items[-1]

    def grow(self, grow_by: int) -> None:
        """Change capacity by ``grow_by``."""
        capacity = self._capacity + grow_by
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} cannot hold {len(self._items)} elements"
            )
        self._capacity = capacity

    def shrink(self) -> None:
        """Halve the capacity."""
        capacity = self._capacity // 2
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} cannot hold {len(self._items)} elements"
            )
        self._capacity = capacity

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def capacity(self) -> int:
        """Return the current capacity."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)
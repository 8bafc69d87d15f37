"""Helpers for building, reading and displaying integer arrays."""

from __future__ import annotations

import secrets
from collections.abc import MutableSequence, Iterable
from typing import Any, TextIO

RANDOM_LIMIT = 10000


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j`` in place."""
    items[i], items[j] = items[j], items[i]


def format_array(items: Iterable[int]) -> str:
    """Render ``items`` as ``{a, b, c}``."""
    return "{" + ", ".join(str(item) for item in items) + "}"


def random_array(size: int) -> list[int]:
    """Return ``size`` random integers in the range ``[0, 10000)``."""
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    return [secrets.randbelow(RANDOM_LIMIT) for _ in range(size)]


def read_array_size(stream: TextIO) -> int:
    """Read a non-negative array size from the next line of ``stream``."""
    tokens = stream.readline().split()
    if not tokens:
        raise ValueError("expected an array size")
    try:
        size = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid array size: {tokens[0]!r}") from None
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    return size
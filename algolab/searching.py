"""Searching over unsorted sequences."""

from __future__ import annotations

from collections.abc import Iterable


def linear_search(items: Iterable[int], query: int) -> int | None:
    """Return the index of the first element equal to ``query``, or None."""
    return next((index for index, item in enumerate(items) if item == query), None)
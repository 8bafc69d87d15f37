"""Classic comparison sorts and their partition helpers.

The sorting functions work in place on a mutable sequence and return None.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

from algolab.arrays import swap


def bubble_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    size = len(items)
    for k in range(1, size):
        swapped = False
        for i in range(size - k):
            if items[i] > items[i + 1]:
                swap(items, i, i + 1)
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        value = items[i]
        hole = i
        while hole > 0 and items[hole - 1] > value:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = value


def selection_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    size = len(items)
    for i in range(size - 1):
        min_index = min(range(i, size), key=items.__getitem__)
        swap(items, i, min_index)


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into a new sorted list, preferring ``left`` on ties."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with a top-down merge sort."""
    if len(items) < 2:
        return
    middle = len(items) // 2
    left = list(items[:middle])
    right = list(items[middle:])
    merge_sort(left)
    merge_sort(right)
    items[:] = merge(left, right)


def find_pairs(items: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield every (odd, even) pair, in the order the elements appear."""
    for odd in items:
        if odd % 2 != 0:
            for even in items:
                if even % 2 == 0:
                    yield odd, even


def _check_range(items: Sequence[int], low: int, high: int) -> None:
    if not 0 <= low <= high < len(items):
        raise IndexError(f"invalid range [{low}, {high}] for length {len(items)}")


def lomuto_partition(items: MutableSequence[int], low: int, high: int) -> int:
    """Partition around ``items[high]`` and return the pivot's final index."""
    _check_range(items, low, high)
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            swap(items, i, j)
    swap(items, i + 1, high)
    return i + 1


def hoare_partition(items: MutableSequence[int], low: int, high: int) -> int:
    """Partition around ``items[low]``; return ``p`` so that ``items[low:p+1] <= items[p+1:high+1]``."""
    _check_range(items, low, high)
    pivot = items[low]
    i = low - 1
    j = high + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        swap(items, i, j)


def quick_sort(items: MutableSequence[int], low: int = 0, high: int | None = None) -> None:
    """Sort ``items[low:high+1]`` in place using Hoare partitioning."""
    if high is None:
        high = len(items) - 1
    while low < high:
        split = hoare_partition(items, low, high)
        # Recurse into the smaller side to keep the stack shallow.
        if split - low < high - split:
            quick_sort(items, low, split)
            low = split + 1
        else:
            quick_sort(items, split + 1, high)
            high = split
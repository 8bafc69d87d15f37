"""Command-line demos for the sorting and searching routines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, MutableSequence, Sequence
from typing import TextIO

from algolab.arrays import format_array, random_array, read_array_size
from algolab.searching import linear_search
from algolab.sorting import (
    bubble_sort,
    find_pairs,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SORTERS: dict[str, Callable[[MutableSequence[int]], None]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}

PAIRS_DEMO = (3, 2, 7, 5, 4)


def _prompt_array(stream: TextIO) -> list[int]:
    print("Enter size of array: ", end="", flush=True)
    items = random_array(read_array_size(stream))
    print(format_array(items))
    return items


def _read_query(stream: TextIO) -> int:
    tokens = stream.readline().split()
    if not tokens:
        raise ValueError("expected a query")
    try:
        query = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid query: {tokens[0]!r}") from None
    if query < 0:
        raise ValueError(f"query must not be negative, got {query}")
    return query


def _run_sort(sorter: Callable[[MutableSequence[int]], None], stream: TextIO) -> None:
    items = _prompt_array(stream)
    sorter(items)
    print(format_array(items))


def _run_search(stream: TextIO) -> None:
    items = _prompt_array(stream)
    print("Query: ")
    query = _read_query(stream)
    index = linear_search(items, query)
    if index is None:
        print("\nElement is not located in array")
    else:
        print(f"\n{query} is located at index {index}")


def _run_pairs() -> None:
    items = list(PAIRS_DEMO)
    merge_sort(items)
    print(format_array(items))
    for odd, even in find_pairs(items):
        print(f"({odd}, {even})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a demo: sort or search a random array read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algolab",
        description="Generate a random array and sort or search it.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="quick",
        choices=[*SORTERS, "search", "pairs"],
        help="algorithm to run (default: quick)",
    )
    args = parser.parse_args(argv)

    try:
        if args.command == "pairs":
            _run_pairs()
        elif args.command == "search":
            _run_search(sys.stdin)
        else:
            _run_sort(SORTERS[args.command], sys.stdin)
    except ValueError as exc:
        print(f"algolab: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
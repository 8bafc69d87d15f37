"""Sorting and searching algorithms with a linked list and a growable stack."""

__version__ = "0.1.0"

__all__ = ["arrays", "sorting", "searching", "cli", "linked_list", "stack"]
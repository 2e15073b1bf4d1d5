"""Simple comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, by selection sort.

    Each pass moves the first occurrence of the smallest remaining item to the front.
    """
    items = list(values)
    for start in range(len(items)):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items
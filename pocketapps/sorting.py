"""Classic comparison sorts that work in place on mutable sequences.

Every sort takes a predicate ``cmp(a, b)`` that returns True when ``a`` may
stay in front of ``b``. With :func:`ascending` the result is non-decreasing,
and with :func:`descending` it is non-increasing.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]

__all__ = [
    "Comparator",
    "ascending",
    "descending",
    "bubble_sort",
    "cocktail_sort",
    "insertion_sort",
    "quick_sort",
    "selection_sort",
]


def ascending(a: Any, b: Any) -> bool:
    """Return True when ``a`` may precede ``b`` in ascending order."""
    return a <= b


def descending(a: Any, b: Any) -> bool:
    """Return True when ``a`` may precede ``b`` in descending order."""
    return a >= b


def _swap(items: MutableSequence[T], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(items: MutableSequence[T], cmp: Comparator = ascending) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    for stop in range(len(items) - 1, 0, -1):
        for i in range(stop):
            if not cmp(items[i], items[i + 1]):
                _swap(items, i, i + 1)


def cocktail_sort(items: MutableSequence[T], cmp: Comparator = ascending) -> None:
    """Sort ``items`` in place with alternating forward and backward passes."""
    left, right = 0, len(items) - 1
    while left < right:
        for i in range(left, right):
            if not cmp(items[i], items[i + 1]):
                _swap(items, i, i + 1)
        right -= 1
        for i in range(right, left, -1):
            if not cmp(items[i - 1], items[i]):
                _swap(items, i, i - 1)
        left += 1


def _first_extreme(items: MutableSequence[T], start: int, cmp: Comparator) -> int:
    """Index of the first element in ``items[start:]`` that may precede all others."""
    best = start
    for cur in range(start + 1, len(items)):
        if not cmp(items[best], items[cur]):
            best = cur
    return best


def insertion_sort(items: MutableSequence[T], cmp: Comparator = ascending) -> None:
    """Sort ``items`` in place, moving each chosen element to the front while
    shifting the ones it jumps over one place to the right."""
    for left in range(len(items)):
        chosen = _first_extreme(items, left, cmp)
        if chosen != left:
            items[left:chosen + 1] = [items[chosen], *items[left:chosen]]


def selection_sort(items: MutableSequence[T], cmp: Comparator = ascending) -> None:
    """Sort ``items`` in place by swapping each chosen element into position."""
    for left in range(len(items)):
        chosen = _first_extreme(items, left, cmp)
        _swap(items, left, chosen)


def _partition(items: MutableSequence[T], start: int, end: int, cmp: Comparator) -> int:
    """Partition ``items[start:end]`` around its last element; return its final index."""
    pivot = end - 1
    left, right = start, end - 2
    while left < right:
        while cmp(items[left], items[pivot]) and left < right:
            left += 1
        while not cmp(items[right], items[pivot]) and left < right:
            right -= 1
        _swap(items, left, right)
    if not cmp(items[pivot], items[left]):
        left += 1
    _swap(items, left, pivot)
    return left


def quick_sort(items: MutableSequence[T], cmp: Comparator = ascending) -> None:
    """Sort ``items`` in place with quicksort, using the last element as pivot."""
    pending = [(0, len(items))]
    while pending:
        start, end = pending.pop()
        if end - start <= 1:
            continue
        split = _partition(items, start, end, cmp)
        pending.append((split + 1, end))
        if split != start:
            pending.append((start, split))
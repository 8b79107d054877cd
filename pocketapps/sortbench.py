"""Time the sorting algorithms on random data and verify their results."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any

from pocketapps.sorting import (
    Comparator,
    ascending,
    bubble_sort,
    cocktail_sort,
    descending,
    insertion_sort,
    quick_sort,
    selection_sort,
)

__all__ = ["Stopwatch", "SortReport", "sorted_assert", "sort_test", "main"]

SortFunc = Callable[[MutableSequence[Any], Comparator], None]

DEFAULT_SIZE = 20000
VALUE_RANGE = 1000

ALGORITHMS: tuple[tuple[str, SortFunc], ...] = (
    ("selection_sort", selection_sort),
    ("bubble_sort", bubble_sort),
    ("cocktail_sort", cocktail_sort),
    ("insertion_sort", insertion_sort),
    ("quick_sort", quick_sort),
)


@dataclass
class Stopwatch:
    """Measures time elapsed since it was created."""

    started_ns: int = field(default_factory=time.monotonic_ns)

    def elapsed_us(self) -> int:
        """Whole microseconds since the stopwatch was started."""
        return (time.monotonic_ns() - self.started_ns) // 1000


@dataclass(frozen=True)
class SortReport:
    """Outcome of timing one sorting algorithm."""

    name: str
    elapsed_us: int
    success: bool

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_us / 1000.0


def _remaining_matches(raw: Sequence[Any], result: Iterable[Any]) -> bool:
    """True when every item of ``result`` can be paired with a distinct item of ``raw``."""
    try:
        available = Counter(raw)
    except TypeError:
        remaining = list(raw)
        for item in result:
            try:
                remaining.remove(item)
            except ValueError:
                return False
        return True
    for item in result:
        if available[item] <= 0:
            return False
        available[item] -= 1
    return True


def sorted_assert(raw: Sequence[Any], result: Sequence[Any], cmp: Comparator) -> bool:
    """Check that ``result`` holds only items taken from ``raw`` and is ordered by ``cmp``.

    Every item of ``result`` must match a distinct item of ``raw`` (nothing
    appended, nothing duplicated), and each adjacent pair must satisfy ``cmp``.
    """
    if not _remaining_matches(raw, result):
        return False
    return all(cmp(a, b) for a, b in zip(result, result[1:]))


def sort_test(
    data: Sequence[Any], sort_func: SortFunc, name: str, cmp: Comparator
) -> SortReport:
    """Sort a copy of ``data`` with ``sort_func``, print timing and verdict, and report."""
    work = list(data)
    watch = Stopwatch()
    sort_func(work, cmp)
    elapsed = watch.elapsed_us()
    print(f"Time elapse[{name}]: {elapsed / 1000.0:.2f} ms")

    success = sorted_assert(data, work, cmp)
    print("Successfully.\n" if success else "Unsuccessfully.\n")
    return SortReport(name=name, elapsed_us=elapsed, success=success)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time the sorting algorithms on random integers.",
    )
    parser.add_argument(
        "-n", "--size", type=_positive_int, default=DEFAULT_SIZE,
        help=f"number of values to sort (default {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--descending", action="store_true",
        help="sort into non-increasing order",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run every algorithm over the same random data."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    raw = [rng.randrange(VALUE_RANGE) for _ in range(args.size)]
    cmp = descending if args.descending else ascending

    for name, func in ALGORITHMS:
        sort_test(raw, func, name, cmp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
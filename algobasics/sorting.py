"""Elementary in-place comparison sorts and a small demonstration command."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=MutableSequence[Any])


def bubble_sort(items: T) -> T:
    """Sort ``items`` in place by repeatedly bubbling the largest value to the end.

    Returns the same sequence for convenience.
    """
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insert_sort(items: T) -> T:
    """Sort ``items`` in place by sliding each value left into its sorted prefix.

    Returns the same sequence for convenience.
    """
    for i in range(1, len(items)):
        j = i - 1
        while j >= 0 and items[j] > items[j + 1]:
            items[j], items[j + 1] = items[j + 1], items[j]
            j -= 1
    return items


def selection_sort(items: T) -> T:
    """Sort ``items`` in place by selecting the minimum of the unsorted suffix.

    Returns the same sequence for convenience.
    """
    size = len(items)
    for i in range(size - 1):
        # min() keeps the first of equal candidates, matching a strict "<" scan.
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def format_items(items: Iterable[Any]) -> str:
    """Render values as ``a,b,c,`` with a comma after every value."""
    return "".join(f"{item}," for item in items)


_ALGORITHMS: dict[str, tuple[Callable[[list[int]], list[int]], Sequence[int], str]] = {
    "bubble": (bubble_sort, (1, 5, 9, 3, 8, 4, 6), "after sorting"),
    "insert": (insert_sort, (1, 5, 9, 3, 8, 4, 6), "after sorting"),
    "select": (selection_sort, (5, 3, 1, 2, 4), "after sorting:"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Show a sample array before and after sorting with the chosen algorithm."""
    parser = argparse.ArgumentParser(description="Demonstrate an elementary sort.")
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="bubble",
        choices=sorted(_ALGORITHMS),
        help="sorting algorithm to demonstrate (default: bubble)",
    )
    args = parser.parse_args(argv)

    sort, sample, caption = _ALGORITHMS[args.algorithm]
    values = list(sample)
    print(format_items(values))
    print(caption)
    sort(values)
    print(format_items(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Binary-search routines over sorted sequences and peak finding."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``items``.

    When absent, return ``-(insertion_point + 1)`` so that a miss is always negative.
    """
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if target < items[mid]:
            hi = mid - 1
        elif items[mid] < target:
            lo = mid + 1
        else:
            return mid
    return -(lo + 1)


def find_left(items: Sequence[Any], target: Any) -> int:
    """Return the leftmost index whose value is ``>= target``, or -1 if none."""
    lo, hi, found = 0, len(items) - 1, -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if items[mid] >= target:
            found = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return found


def find_right(items: Sequence[Any], target: Any) -> int:
    """Return the rightmost index whose value is ``<= target``, or -1 if none."""
    lo, hi, found = 0, len(items) - 1, -1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] <= target:
            found = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return found


def find_peak_element(items: Sequence[Any]) -> int:
    """Return the index of one element greater than its neighbours.

    Positions outside the sequence count as lower than any value.
    Raises ValueError for an empty sequence.
    """
    size = len(items)
    if size == 0:
        raise ValueError("cannot find a peak in an empty sequence")
    if size == 1 or items[0] > items[1]:
        return 0
    if items[size - 2] < items[size - 1]:
        return size - 1
    lo, hi = 1, size - 2
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid - 1] > items[mid]:
            hi = mid - 1
        elif items[mid] < items[mid + 1]:
            lo = mid + 1
        else:
            return mid
    return -1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the results of the search routines on fixed sample data."""
    parser = argparse.ArgumentParser(
        description="Run the search routines on fixed sample data."
    )
    parser.parse_args(argv)
    values = [1, 2, 6, 8, 9, 13, 15, 17, 19, 21, 23]
    print(binary_search(values, 6))
    print(find_left(values, 7))
    print(find_right(values, 8))
    print(find_peak_element([2, 3, 4, 6, 7, 2, 9, 3, 1]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
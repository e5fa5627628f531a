"""Randomised cross-check of the elementary sorts against each other."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from algobasics.sorting import bubble_sort, insert_sort, selection_sort


def random_array(size: int, max_value: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` integers drawn uniformly from ``1..max_value``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if max_value < 1:
        raise ValueError(f"max_value must be at least 1, got {max_value}")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(1, max_value) for _ in range(size)]


def validate(
    test_times: int = 5000,
    max_size: int = 100,
    max_value: int = 1000,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """Sort random arrays with every algorithm and collect inputs where they disagree.

    Each array has a random length in ``1..max_size``. Returns the failing inputs.
    """
    if test_times < 0:
        raise ValueError(f"test_times must not be negative, got {test_times}")
    if max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")
    rng = rng if rng is not None else random.Random()
    failures: list[list[int]] = []
    for _ in range(test_times):
        original = random_array(rng.randint(1, max_size), max_value, rng)
        by_selection = selection_sort(list(original))
        by_bubble = bubble_sort(list(original))
        by_insertion = insert_sort(list(original))
        if by_selection != by_bubble or by_selection != by_insertion:
            failures.append(original)
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    """Run the randomised check and report each disagreement."""
    parser = argparse.ArgumentParser(description="Cross-check the elementary sorts.")
    parser.add_argument("--times", type=int, default=5000, help="number of trials")
    parser.add_argument("--max-size", type=int, default=100, help="longest array")
    parser.add_argument("--max-value", type=int, default=1000, help="largest value")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    print("Testing begins")
    failures = validate(args.times, args.max_size, args.max_value, random.Random(args.seed))
    for _ in failures:
        print("Error!!!")
    print("end of test")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
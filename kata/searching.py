"""Linear and binary search returning the index of a match or None."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

_DEMO_LIST = [25, 24, 32, 72, 100]
_DEMO_TARGET = 32


def linear_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of the first element equal to ``item``, or None."""
    return next((i for i, value in enumerate(items) if value == item), None)


def binary_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return an index of ``item`` in the sorted ``items``, or None."""
    low, high = 0, len(items)
    while low < high:
        mid = low + (high - low) // 2
        value = items[mid]
        if item == value:
            return mid
        if item < value:
            high = mid
        else:
            low = mid + 1
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search a list of integers.")
    parser.add_argument("target", nargs="?", type=int, default=_DEMO_TARGET)
    parser.add_argument("values", nargs="*", type=int)
    parser.add_argument(
        "--linear", action="store_true", help="use linear instead of binary search"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Search a list for a target and print the index found, or None."""
    args = _build_parser().parse_args(argv)
    values = args.values or _DEMO_LIST
    search = linear_search if args.linear else binary_search
    print(search(args.target, values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
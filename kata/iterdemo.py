"""Small iterator helpers: zip, map, filter, fold, collect and enumerate."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import reduce
from typing import TypeVar

T = TypeVar("T")


def iter_zip(first: Iterable[int], second: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Pair up elements of two iterables, stopping at the shorter one."""
    return zip(first, second)


def iter_map(values: Iterable[int]) -> Iterator[int]:
    """Yield each value doubled."""
    return (2 * x for x in values)


def iter_filter(values: Iterable[int]) -> Iterator[int]:
    """Yield only the positive values."""
    return (x for x in values if x > 0)


def iter_fold(values: Iterable[int]) -> int:
    """Fold the values into their sum, starting from 0."""
    return reduce(lambda acc, x: acc + x, values, 0)


def iter_collect(values: Iterable[int]) -> list[int]:
    """Return a list of the values doubled."""
    return [x * 2 for x in values]


def iter_enumerate(values: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Yield (index, value) pairs starting at 0."""
    return enumerate(values)
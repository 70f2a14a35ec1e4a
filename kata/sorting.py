"""Classic sorting algorithms.

Functions documented as in-place rearrange the given list and return None,
like ``list.sort``; the others return a new list.
"""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_DEMO_LIST = [2, 7, 3, 5, 1, 24, 31, 100, 11]


def bubble_sort(items: MutableSequence[Any], reverse: bool = False) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    if not items:
        return
    done = False
    n = len(items)
    while not done:
        done = True
        for i in range(n - 1):
            if (items[i] > items[i + 1]) ^ reverse:
                items[i], items[i + 1] = items[i + 1], items[i]
                done = False
        n -= 1


def insertion_sort(items: MutableSequence[Any], reverse: bool = False) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        current = items[i]
        target = i
        while target > 0 and (current < items[target - 1]) ^ reverse:
            items[target] = items[target - 1]
            target -= 1
        items[target] = current


def selection_sort(items: MutableSequence[Any], reverse: bool = False) -> None:
    """Sort ``items`` in place by selecting the extreme of the unsorted tail."""
    length = len(items)
    for left in range(length):
        chosen = left
        for right in range(left + 1, length):
            if (items[right] < items[chosen]) ^ reverse:
                chosen = right
        items[chosen], items[left] = items[left], items[chosen]


def bucket_sort(items: Sequence[int]) -> list[int]:
    """Return a sorted copy of non-negative integers using buckets.

    Raises ValueError for negative values or when the largest value is zero.
    """
    if not items:
        return []
    if any(x < 0 for x in items):
        raise ValueError("bucket sort needs non-negative integers")
    largest = max(items)
    if largest == 0:
        raise ValueError("bucket sort needs a positive maximum value")
    length = len(items)
    buckets: list[list[int]] = [[] for _ in range(length + 1)]
    for x in items:
        buckets[length * x // largest].append(x)
    result: list[int] = []
    for bucket in buckets:
        insertion_sort(bucket)
        result.extend(bucket)
    return result


def counting_sort(items: MutableSequence[int], maxval: int) -> None:
    """Sort integers in ``0..maxval`` in place by counting occurrences."""
    counter = [0] * (maxval + 1)
    for value in items:
        if not 0 <= value <= maxval:
            raise ValueError(f"value {value} outside range 0..{maxval}")
        counter[value] += 1
    items[:] = [value for value, count in enumerate(counter) for _ in range(count)]


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by recursive halving and merging."""
    _merge_sort(items, 0, len(items))


def _merge_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo > 1:
        mid = lo + (hi - lo) // 2
        _merge_sort(items, lo, mid)
        _merge_sort(items, mid, hi)
        _merge(items, lo, mid, hi)


def _merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    left = list(items[lo:mid])
    right = list(items[mid:hi])
    li = ri = 0
    for pos in range(lo, hi):
        if ri == len(right) or (li < len(left) and left[li] < right[ri]):
            items[pos] = left[li]
            li += 1
        else:
            items[pos] = right[ri]
            ri += 1


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with gap insertion sorts, halving the gap."""
    gap = len(items) // 2
    while gap > 0:
        for start in range(gap):
            _gap_insertion(items, start, gap)
        gap //= 2


def _gap_insertion(items: MutableSequence[Any], start: int, gap: int) -> None:
    for i in range(start + gap, len(items), gap):
        current = items[i]
        pos = i
        while pos >= gap and items[pos - gap] > current:
            items[pos] = items[pos - gap]
            pos -= gap
        items[pos] = current


def heap_sort(items: Sequence[T], reverse: bool = False) -> list[T]:
    """Return a sorted copy of ``items`` built by draining a heap."""
    heap = list(items)
    heapq.heapify(heap)
    result = [heapq.heappop(heap) for _ in range(len(heap))]
    if reverse:
        result.reverse()
    return result


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, recursing on the smaller side."""
    if len(items) > 1:
        _qsort(items, 0, len(items) - 1)


def _qsort(items: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        pivot = _partition(items, low, high)
        if pivot - low < high - pivot:
            if pivot > 0:
                _qsort(items, low, pivot - 1)
            low = pivot + 1
        else:
            _qsort(items, pivot + 1, high)
            high = pivot - 1


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = high
    i = low
    j = high - 1
    while True:
        while items[i] < items[pivot]:
            i += 1
        while j > 0 and items[j] > items[pivot]:
            j -= 1
        if j == 0 or i >= j:
            break
        if items[i] == items[j]:
            i += 1
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
    items[i], items[pivot] = items[pivot], items[i]
    return i


def main(argv: list[str] | None = None) -> int:
    """Quick-sort a sample list and print it."""
    items = list(_DEMO_LIST)
    quick_sort(items)
    print("".join(f"{value} " for value in items))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
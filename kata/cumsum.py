"""Prefix sums for constant-time range sums, with a timing comparison."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence
from itertools import accumulate


def create_cumulative_sum(values: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``values``, starting with 0."""
    return list(accumulate(values, initial=0))


def range_cumulative_sum(cum_sum: Sequence[int], left: int, right: int) -> int:
    """Return the sum of elements ``left``..``right`` (1-based, inclusive)."""
    if right >= len(cum_sum) or right < 0:
        raise IndexError(f"index out of bounds: right={right}, len={len(cum_sum)}")
    if left < 1:
        raise IndexError(f"index out of bounds: left={left} must be at least 1")
    return cum_sum[right] - cum_sum[left - 1]


def simple_range_sum(values: Sequence[int], left: int, right: int) -> int:
    """Sum elements ``left``..``right`` (1-based, inclusive) directly."""
    if left < 1 or right > len(values) or left - 1 > right:
        raise IndexError(f"range {left}..{right} out of bounds for length {len(values)}")
    return sum(values[left - 1 : right])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare direct and prefix-sum range sums.")
    parser.add_argument("--size", type=int, default=1_000_000)
    parser.add_argument("--queries", type=int, default=2000)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Time direct range sums against prefix-sum lookups and print the totals."""
    args = _build_parser().parse_args(argv)
    if args.size < 20:
        raise SystemExit("size must be at least 20")
    rng = random.Random(args.seed)
    values = [1] * args.size

    start = time.perf_counter()
    cum_sum = create_cumulative_sum(values)
    precompute_time = time.perf_counter() - start

    left_limit = args.size * 9 // 10
    span_limit = args.size // 10
    simple_time = 0.0
    cum_time = 0.0

    for i in range(args.queries):
        left = rng.randrange(1, left_limit)
        right = left + rng.randrange(1, span_limit)

        start = time.perf_counter()
        simple = simple_range_sum(values, left, right)
        simple_time += time.perf_counter() - start

        start = time.perf_counter()
        fast = range_cumulative_sum(cum_sum, left, right)
        cum_time += time.perf_counter() - start

        if i < 3:
            print(f"試行回数 {i + 1}: 範囲 [{left}, {right}]")
            print(f"単純計算: {simple} / 累積和: {fast}\n")

    print(f"累積和リストの作成時間: {precompute_time:.6f}s")
    print(f"単純計算の総計算時間: {simple_time:.6f}s")
    print(f"累積和利用計算の総計算時間: {cum_time:.6f}s")
    print(f"累積和リストの総実行時間: {precompute_time + cum_time:.6f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
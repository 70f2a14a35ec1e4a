"""A tiny chain of awaited additions."""

from __future__ import annotations

import argparse
import asyncio


async def async_add(n1: int, n2: int) -> int:
    """Return ``n1 + n2``."""
    return n1 + n2


async def sum_of_sums() -> int:
    """Await three additions in turn and return the total of their results."""
    ans1 = await async_add(2, 3)
    ans2 = await async_add(3, 4)
    ans3 = await async_add(4, 5)
    return ans1 + ans2 + ans3


def main(argv: list[str] | None = None) -> int:
    """Run the additions to completion and print the total."""
    parser = argparse.ArgumentParser(description="Run a chain of awaited additions.")
    parser.parse_args(argv)
    total = asyncio.run(sum_of_sums())
    print(total)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
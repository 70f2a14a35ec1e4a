"""Small number utilities: FizzBuzz, prime factors, maximum and checked multiply."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Sequence
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_DEMO_LISTS: tuple[list[Any], ...] = (
    [34, 50, 25, 100, 7],
    [100.2, 34.5, 6000.9, 89.1, 413.2],
)


def fizzbuzz(num: int) -> str:
    """Return Fizz, Buzz, FizzBuzz or the number itself; 0 stays "0"."""
    if num == 0:
        return str(num)
    match (num % 3, num % 5):
        case (0, 0):
            return "FizzBuzz"
        case (0, _):
            return "Fizz"
        case (_, 0):
            return "Buzz"
        case _:
            return str(num)


def prime_factorize(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order.

    Values below 2 are returned unchanged as a single-element list.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    factors: list[int] = []
    while True:
        divisor = next((i for i in range(2, math.isqrt(n) + 1) if n % i == 0), None)
        if divisor is None:
            factors.append(n)
            return factors
        factors.append(divisor)
        n //= divisor


def largest(values: Sequence[Any]) -> Any:
    """Return the largest element; the first one wins on ties."""
    if not values:
        raise ValueError("largest() needs at least one value")
    return max(values)


def _parse_i32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I32_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I32_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def multiply(first: str, second: str) -> int:
    """Parse two 32-bit integers from text and return their product."""
    product = _parse_i32(first) * _parse_i32(second)
    if not _I32_MIN <= product <= _I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return product


def _parse_factor_input(text: str) -> int:
    stripped = text.strip()
    return int(stripped) if _UNSIGNED.fullmatch(stripped) else 1


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _run_fizzbuzz() -> None:
    for num in range(101):
        print(fizzbuzz(num))


def _run_factor(value: str) -> None:
    n = _parse_factor_input(value)
    if n > 1:
        print(prime_factorize(n))
    else:
        print("2以上の正の整数を入力してください")


def _run_largest(values: Sequence[str]) -> None:
    lists = [[_parse_number(v) for v in values]] if values else _DEMO_LISTS
    for numbers in lists:
        print(f"The largets number is {largest(numbers)}")


def _run_multiply() -> None:
    for first, second in (("10", "2"), ("t", "2")):
        try:
            print(f"n: {multiply(first, second)}")
        except (ValueError, OverflowError) as exc:
            print(f"Error: {exc}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Number utilities.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("fizzbuzz", help="print FizzBuzz for 0..100")
    factor = commands.add_parser("factor", help="print the prime factors of a number")
    factor.add_argument("value")
    largest_cmd = commands.add_parser("largest", help="print the largest number")
    largest_cmd.add_argument("values", nargs="*")
    commands.add_parser("multiply", help="multiply sample numeric strings")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one of the number demos; FizzBuzz when no command is given."""
    args = _build_parser().parse_args(argv)
    match args.command:
        case "factor":
            _run_factor(args.value)
        case "largest":
            _run_largest(args.values)
        case "multiply":
            _run_multiply()
        case _:
            _run_fizzbuzz()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
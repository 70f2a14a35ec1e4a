"""Reverse Polish notation calculator for 32-bit integers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

VERSION = "1.0.0"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class RpnError(ValueError):
    """Raised when a formula cannot be evaluated."""


def _parse_operand(token: str) -> int | None:
    if _INTEGER.fullmatch(token):
        value = int(token)
        if _I32_MIN <= value <= _I32_MAX:
            return value
    return None


def _truncating_div(x: int, y: int) -> int:
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def _apply(op: str, x: int, y: int, pos: int) -> int:
    if op in ("/", "%") and y == 0:
        raise RpnError(f"division by zero at {pos}")
    match op:
        case "+":
            result = x + y
        case "-":
            result = x - y
        case "*":
            result = x * y
        case "/":
            result = _truncating_div(x, y)
        case "%":
            result = x - _truncating_div(x, y) * y
        case _:
            raise RpnError(f"invalid token at {pos}")
    if not _I32_MIN <= result <= _I32_MAX:
        raise RpnError(f"overflow at {pos}")
    return result


def _debug_line(remaining: Sequence[str], stack: Sequence[int]) -> str:
    tokens = ", ".join(f'"{token}"' for token in reversed(remaining))
    values = ", ".join(str(value) for value in stack)
    return f"[{tokens}] [{values}]"


class RpnCalculator:
    """Evaluates whitespace-separated RPN formulas with + - * / %."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def evaluate(self, formula: str) -> int:
        """Return the value of ``formula``; raise RpnError when it is malformed."""
        tokens = formula.split()
        stack: list[int] = []
        for pos, token in enumerate(tokens, start=1):
            operand = _parse_operand(token)
            if operand is not None:
                stack.append(operand)
            else:
                if len(stack) < 2:
                    raise RpnError(f"invalid syntax at {pos}")
                y = stack.pop()
                x = stack.pop()
                stack.append(_apply(token, x, y, pos))
            if self.verbose:
                print(_debug_line(tokens[pos:], stack))
        if len(stack) != 1:
            raise RpnError("invalid syntax")
        return stack[0]


def run(lines: Iterable[str], verbose: bool = False) -> list[int | None]:
    """Evaluate each line, printing answers to stdout and errors to stderr.

    Returns the answers in order, with None for lines that failed.
    """
    calc = RpnCalculator(verbose)
    answers: list[int | None] = []
    for line in lines:
        try:
            answer = calc.evaluate(line)
        except RpnError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            answers.append(None)
        else:
            print(answer)
            answers.append(answer)
    return answers


def main(argv: list[str] | None = None) -> int:
    """Evaluate formulas from a file, or from standard input when none is given."""
    parser = argparse.ArgumentParser(
        prog="rpn", description="Super awesome sample RPN calculator"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("formula_file", nargs="?", metavar="FILE")
    args = parser.parse_args(argv)
    if args.formula_file is None:
        run(sys.stdin, args.verbose)
        return 0
    try:
        with open(args.formula_file, encoding="utf-8") as handle:
            run(handle, args.verbose)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
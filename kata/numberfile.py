"""Read an integer from a file and double it."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

DEFAULT_PATH = "number.txt"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class NumberFileError(Exception):
    """Raised when the number file cannot be read or parsed."""


def get_int_from_file(path: str | Path = DEFAULT_PATH) -> int:
    """Return twice the 32-bit integer stored in ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NumberFileError(f"failed to read string from {path}") from exc
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped) or not _I32_MIN <= int(stripped) <= _I32_MAX:
        raise NumberFileError("failed to parse string")
    doubled = int(stripped) * 2
    if not _I32_MIN <= doubled <= _I32_MAX:
        raise NumberFileError("attempt to multiply with overflow")
    return doubled


def main(argv: list[str] | None = None) -> int:
    """Print twice the number in the given file, or report why it failed."""
    parser = argparse.ArgumentParser(description="Double the number stored in a file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        value = get_int_from_file(args.path)
    except NumberFileError as exc:
        cause = f": {exc.__cause__}" if exc.__cause__ is not None else ""
        print(f"Error: {exc}{cause}")
        return 1
    print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
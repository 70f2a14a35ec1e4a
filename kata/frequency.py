"""Character frequency analysis of a text file."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path


def get_text(path: str | Path) -> str:
    """Read ``path`` and join its lines with surrounding whitespace removed."""
    content = Path(path).read_text(encoding="utf-8")
    return "".join(line.strip() for line in content.split("\n"))


def frequency_analysis(text: str) -> dict[str, int]:
    """Count how often each character occurs in ``text``."""
    return dict(Counter(text))


def sort_counts(counts: Mapping[str, int]) -> list[tuple[str, int]]:
    """Return (character, count) pairs ordered by descending count."""
    return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


def count_all_chars(pairs: Iterable[tuple[str, int]]) -> int:
    """Return the total of all counts."""
    return sum(count for _, count in pairs)


def calc_rate(count: float, total: float) -> float:
    """Return ``count`` as a percentage of ``total``."""
    return count * 100 / total


def _format_rate(rate: float) -> str:
    text = repr(rate)
    return text[:-2] if text.endswith(".0") else text


def _label(char: str) -> str:
    if char == " ":
        return "半角空白"
    if char == "\u3000":
        return "全角空白"
    return char


def format_result(pairs: list[tuple[str, int]]) -> str:
    """Render one line per character with its count and percentage."""
    total = count_all_chars(pairs)
    return "\n".join(
        f"{_label(char)}: {count}回  {_format_rate(calc_rate(count, total))}%"
        for char, count in pairs
    )


def main(argv: list[str] | None = None) -> int:
    """Print the character frequencies of the file named on the command line."""
    parser = argparse.ArgumentParser(description="Character frequency analysis.")
    parser.add_argument("path")
    args = parser.parse_args(argv)
    try:
        text = get_text(args.path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    result = format_result(sort_counts(frequency_analysis(text)))
    if result:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
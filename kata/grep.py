"""Print the lines of a file that contain a query string."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


def _lines(contents: str) -> list[str]:
    parts = contents.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Config:
    """The query to look for and the file to search."""

    query: str
    filename: str

    @classmethod
    def from_args(cls, args: Iterable[str]) -> Config:
        """Build a config from the command-line arguments after the program name."""
        it = iter(args)
        query = next(it, None)
        if query is None:
            raise ValueError("Didn't get a query string")
        filename = next(it, None)
        if filename is None:
            raise ValueError("Didn't get a file name")
        return cls(query, filename)


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``."""
    return [line for line in _lines(contents) if query in line]


def run(config: Config) -> list[str]:
    """Print and return the matching lines of the configured file."""
    contents = Path(config.filename).read_text(encoding="utf-8")
    matches = search(config.query, contents)
    for line in matches:
        print(line)
    return matches


def main(argv: list[str] | None = None) -> int:
    """Search the file given as the second argument for the first argument."""
    args = sys.argv[1:] if argv is None else argv
    try:
        config = Config.from_args(args)
    except ValueError as exc:
        print(f"Problem parsing arguments: {exc}")
        return 1
    try:
        run(config)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Application error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
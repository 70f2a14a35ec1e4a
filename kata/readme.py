"""Create a template readme.md in a directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

README_NAME = "readme.md"
TEMPLATE = "# README\n## Versions\n## Setting\n## Run\n## Reference\n"


def write_readme(directory: str | Path) -> Path:
    """Write the template to ``directory/readme.md``, replacing any existing file."""
    path = Path(directory) / README_NAME
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(TEMPLATE)
    return path


def main(argv: list[str] | None = None) -> int:
    """Create the template readme in the directory given on the command line."""
    parser = argparse.ArgumentParser(description="Create a template readme.md.")
    parser.add_argument("directory")
    args = parser.parse_args(argv)
    try:
        path = write_readme(args.directory)
    except OSError as exc:
        print(f"couldn't create {Path(args.directory) / README_NAME}: {exc}", file=sys.stderr)
        return 1
    print(f"successfully wrote to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Long listing of the root directory via ``ls``."""

from __future__ import annotations

import subprocess
import sys

COMMAND = ["ls", "-l", "-a"]
ROOT = "/"


def list_root() -> str:
    """Run ``ls -l -a`` in the root directory and return its output."""
    completed = subprocess.run(
        COMMAND, cwd=ROOT, capture_output=True, text=True, check=True
    )
    return completed.stdout


def main(argv: list[str] | None = None) -> int:
    """Print the long listing of the root directory."""
    try:
        output = list_root()
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"failed! {exc}", file=sys.stderr)
        return 1
    print(output, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
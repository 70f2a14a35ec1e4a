"""Draw a checkerboard (ichimatsu) pattern image."""

from __future__ import annotations

import argparse

from PIL import Image

GREEN = (79, 172, 135)
BLACK = (41, 37, 34)
DEFAULT_SIZE = 512
DEFAULT_FRAME = 64
DEFAULT_OUTPUT = "image.png"


def checker_color(x: int, y: int, frame: int = DEFAULT_FRAME) -> tuple[int, int, int]:
    """Return the colour of pixel (x, y) for squares of side ``frame``."""
    if frame <= 0:
        raise ValueError("frame must be positive")
    return GREEN if (x // frame + y // frame) % 2 == 0 else BLACK


def make_checkerboard(size: int = DEFAULT_SIZE, frame: int = DEFAULT_FRAME) -> Image.Image:
    """Return a square RGB image of side ``size`` with the checkerboard pattern."""
    if size <= 0:
        raise ValueError("size must be positive")
    if frame <= 0:
        raise ValueError("frame must be positive")
    image = Image.new("RGB", (size, size))
    image.putdata([checker_color(x, y, frame) for y in range(size) for x in range(size)])
    return image


def main(argv: list[str] | None = None) -> int:
    """Draw the checkerboard and save it to a file."""
    parser = argparse.ArgumentParser(description="Save a checkerboard image.")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--frame", type=int, default=DEFAULT_FRAME)
    args = parser.parse_args(argv)
    try:
        make_checkerboard(args.size, args.frame).save(args.output)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
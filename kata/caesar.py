"""Caesar cipher over ASCII letters, with a brute-force shift listing."""

from __future__ import annotations

import string

CIPHERTEXT = (
    "MHILY LZA ZBHL XBPZXBL MVYABUHL HWWPBZ JSHBKPBZ JHLJBZ KPJABT HYJHUBT LZA ULBAYVU"
)
_ALPHABET_SIZE = 26


def is_alphabet(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return c in string.ascii_letters


def encrypt(c: str, offset: int) -> str:
    """Shift an ASCII letter forward by ``offset`` (0..26), wrapping; others pass through."""
    if not 0 <= offset <= _ALPHABET_SIZE:
        raise ValueError(f"offset must be between 0 and {_ALPHABET_SIZE}, got {offset}")
    if not is_alphabet(c):
        return c
    base = ord("A") if c.isupper() else ord("a")
    return chr((ord(c) - base + offset) % _ALPHABET_SIZE + base)


def shift_text(text: str, offset: int) -> str:
    """Apply ``encrypt`` to every character of ``text``."""
    return "".join(encrypt(c, offset) for c in text)


def main(argv: list[str] | None = None) -> int:
    """Print the sample ciphertext shifted by every offset from 1 to 25."""
    for offset in range(1, _ALPHABET_SIZE):
        print(f"{offset}: {shift_text(CIPHERTEXT, offset)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
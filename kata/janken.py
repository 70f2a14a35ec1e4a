"""Rock-paper-scissors (janken) against a random computer opponent."""

from __future__ import annotations

import random
import re
from collections.abc import Callable
from enum import Enum
from typing import Protocol

HANDS = ("グー", "チョキ", "パー")
MIN_HAND = 0
MAX_HAND = 2

PROMPT = "じゃんけんの手を選択してください(0:グー / 1:チョキ / 2:パー):"
INVALID_HAND = "0, 1, 2 のいずれかの数値を入力してください"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class GameResult(Enum):
    """Outcome of a round from the player's point of view."""

    DRAW = "あいこです"
    PLAYER_WIN = "あなたの勝ちです"
    PLAYER_LOSE = "あなたの負けです"

    @property
    def message(self) -> str:
        return self.value


def _check_hand(hand: int) -> None:
    if not MIN_HAND <= hand <= MAX_HAND:
        raise ValueError(f"hand must be between {MIN_HAND} and {MAX_HAND}, got {hand}")


def judge_winner(player_hand: int, cpu_hand: int) -> GameResult:
    """Decide the round: 0 is rock, 1 is scissors, 2 is paper."""
    _check_hand(player_hand)
    _check_hand(cpu_hand)
    match (player_hand - cpu_hand) % 3:
        case 0:
            return GameResult.DRAW
        case 1:
            return GameResult.PLAYER_LOSE
        case _:
            return GameResult.PLAYER_WIN


def parse_hand(text: str) -> int:
    """Parse a hand number from user input; raise ValueError if it is not 0, 1 or 2."""
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise ValueError(f"not a number: {text!r}")
    hand = int(stripped)
    _check_hand(hand)
    return hand


def _ask_player_hand(read: Callable[[str], str]) -> int:
    while True:
        try:
            return parse_hand(read(PROMPT))
        except ValueError:
            print(INVALID_HAND)


def play_round(
    read: Callable[[str], str] = input,
    rng: _RandomSource | None = None,
) -> GameResult:
    """Play one round: ask the player, draw the computer's hand, print and return the result."""
    source = rng if rng is not None else random.Random()
    player_hand = _ask_player_hand(read)
    cpu_hand = source.randint(MIN_HAND, MAX_HAND)
    print(f"あなたの手: {HANDS[player_hand]}")
    print(f"CPUの手: {HANDS[cpu_hand]}")
    result = judge_winner(player_hand, cpu_hand)
    print(result.message)
    return result


def main(argv: list[str] | None = None) -> int:
    """Play rounds until one of them is not a draw."""
    rng = random.Random()
    try:
        while play_round(input, rng) is GameResult.DRAW:
            pass
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
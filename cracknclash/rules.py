"""Rules of the code-breaking game: codes, guesses and feedback."""

from __future__ import annotations

import random
from enum import Enum
from typing import Sequence

DIGITS = 6
"""Each position of a code holds a digit from 0 up to DIGITS - 1."""

_VALID_CHARS = frozenset("012345")


class Difficulty(Enum):
    """Difficulty levels: time limit in seconds and code length."""

    EASY = (60, 3)
    MEDIUM = (45, 4)
    HARD = (30, 5)

    def __init__(self, time_limit: int, code_length: int) -> None:
        self.time_limit = time_limit
        self.code_length = code_length


class InvalidGuessError(ValueError):
    """Raised when a guess has the wrong length or digits outside 0-5."""

    def __init__(self, length: int) -> None:
        super().__init__(f"❌ Invalid input. Enter {length} digits (0-5).")
        self.length = length


def generate_secret_code(length: int, rng: random.Random | None = None) -> tuple[int, ...]:
    """Return a random code of ``length`` digits in the range 0-5."""
    source = rng if rng is not None else random
    return tuple(source.randrange(DIGITS) for _ in range(length))


def parse_guess(text: str, length: int) -> tuple[int, ...]:
    """Turn the text of a guess into digits, raising InvalidGuessError if malformed."""
    if len(text) != length or any(ch not in _VALID_CHARS for ch in text):
        raise InvalidGuessError(length)
    return tuple(int(ch) for ch in text)


def count_correct_pins(secret: Sequence[int], guess: Sequence[int]) -> int:
    """Count the positions where the guess matches the secret."""
    return sum(1 for expected, actual in zip(secret, guess) if expected == actual)


def ordinal(index: int) -> str:
    """Ordinal name of a zero-based position."""
    special = {0: "1st", 1: "2nd", 2: "3rd"}
    return special.get(index, f"{index + 1}th")


def correct_positions_feedback(secret: Sequence[int], guess: Sequence[int]) -> str:
    """Describe which positions of the guess are correct, one per line."""
    lines = [
        f"✅ The {ordinal(index)} number is correct"
        for index, (expected, actual) in enumerate(zip(secret, guess))
        if expected == actual
    ]
    if not lines:
        return "❌ No digits are correct at the right position."
    return "\n".join(lines)


def format_code(code: Sequence[int]) -> str:
    """Render a code as a string of digits."""
    return "".join(str(digit) for digit in code)
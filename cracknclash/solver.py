"""Computer opponent that narrows the code down by consistency with past feedback."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import product
from typing import Sequence

from cracknclash.rules import DIGITS, count_correct_pins, generate_secret_code

_OPENING = (0, 1, 2, 3, 4)


@dataclass(frozen=True)
class AIGuess:
    """A guess made by the computer and the number of correct pins it scored."""

    code: tuple[int, ...]
    correct_pins: int


def all_combinations(length: int) -> list[tuple[int, ...]]:
    """Every code of the given length, in lexicographic order."""
    return list(product(range(DIGITS), repeat=length))


class Solver:
    """Keeps the guesses made so far and the codes still consistent with them."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        self.length = length
        self._rng = rng
        self.history: list[AIGuess] = []
        self.candidates: list[tuple[int, ...]] = all_combinations(length)

    @property
    def guess_count(self) -> int:
        return len(self.history)

    def best_guess(self) -> tuple[int, ...]:
        """The next code to try."""
        if not self.candidates:
            return generate_secret_code(self.length, self._rng)
        if not self.history and self.length >= 3:
            return _OPENING[: self.length]
        return self.candidates[0]

    def is_consistent(self, candidate: Sequence[int]) -> bool:
        """Whether the candidate would have produced every recorded result."""
        return all(
            count_correct_pins(previous.code, candidate) == previous.correct_pins
            for previous in self.history
        )

    def record(self, code: Sequence[int], correct_pins: int) -> AIGuess:
        """Remember a guess and its result, and drop candidates it rules out."""
        guess = AIGuess(tuple(code), correct_pins)
        self.history.append(guess)
        self.candidates = [c for c in self.candidates if self.is_consistent(c)]
        return guess

    def remaining(self) -> int:
        """Number of codes still possible."""
        return len(self.candidates)
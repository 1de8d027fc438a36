"""A single game: the player and the computer race to crack the same code."""

from __future__ import annotations

import random
from enum import Enum
from typing import Sequence

from cracknclash.rules import (
    DIGITS,
    Difficulty,
    correct_positions_feedback,
    count_correct_pins,
    format_code,
    generate_secret_code,
    parse_guess,
)
from cracknclash.solver import AIGuess, Solver


class Outcome(Enum):
    """How a game ended."""

    PLAYER_WON = "player"
    AI_WON = "ai"
    TIME_UP = "time"


class GameSession:
    """State of one game; every step leaves messages to be shown to the player."""

    def __init__(
        self,
        difficulty: Difficulty,
        rng: random.Random | None = None,
        secret: Sequence[int] | None = None,
    ) -> None:
        self.difficulty = difficulty
        self.code_length = difficulty.code_length
        self.time_limit = difficulty.time_limit
        self.time_left = difficulty.time_limit
        if secret is None:
            self.secret = generate_secret_code(self.code_length, rng)
        else:
            self.secret = tuple(secret)
            if len(self.secret) != self.code_length or any(
                not 0 <= d < DIGITS for d in self.secret
            ):
                raise ValueError(
                    f"secret must be {self.code_length} digits in the range 0-5"
                )
        self.solver = Solver(self.code_length, rng)
        self.outcome: Outcome | None = None
        self._messages = [
            f"🎮 Game Started! Guess the {self.code_length}-digit code (0-5)."
        ]

    def finished(self) -> bool:
        """Whether the game has ended."""
        return self.outcome is not None

    def drain_messages(self) -> list[str]:
        """Return the messages produced since the last call and forget them."""
        messages, self._messages = self._messages, []
        return messages

    def submit(self, text: str) -> int:
        """Play the player's guess; return its number of correct pins."""
        self._ensure_running()
        guess = parse_guess(text, self.code_length)
        correct = count_correct_pins(self.secret, guess)
        self._messages.append(
            f"🧑 You guessed: {text} → {correct}/{self.code_length}"
        )
        self._messages.append(correct_positions_feedback(self.secret, guess))
        if correct == self.code_length:
            self._end(Outcome.PLAYER_WON, "🎉 You cracked the code first!")
        return correct

    def tick(self) -> int:
        """Let one second pass; return the seconds left."""
        self._ensure_running()
        self.time_left -= 1
        if self.time_left <= 0:
            self._end(
                Outcome.TIME_UP,
                f"⏰ Time's up! The code was {format_code(self.secret)}",
            )
        return self.time_left

    def ai_turn(self) -> AIGuess:
        """Let the computer make one guess."""
        self._ensure_running()
        code = self.solver.best_guess()
        text = format_code(code)
        correct = count_correct_pins(self.secret, code)
        result = self.solver.record(code, correct)
        self._messages.append(
            f"🤖 AI guessed: {text} → {correct}/{self.code_length}"
        )
        self._messages.append(correct_positions_feedback(self.secret, code))
        if correct == self.code_length:
            self._end(Outcome.AI_WON, "💻 AI cracked the code before you!")
        else:
            self._messages.append(
                f"🔍 AI narrowed down to {self.solver.remaining()} possibilities"
            )
        return result

    def _ensure_running(self) -> None:
        if self.finished():
            raise RuntimeError("the game is already over")

    def _end(self, outcome: Outcome, text: str) -> None:
        self.outcome = outcome
        self._messages.append("\n" + text)
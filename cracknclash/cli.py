"""Terminal front end: the player types guesses while the clock and the computer run."""

from __future__ import annotations

import argparse
import random
import time

from cracknclash.rules import Difficulty, InvalidGuessError
from cracknclash.session import GameSession

_AI_INTERVAL = 1.5
_TICK_INTERVAL = 1.0

_ALIASES = {
    "easy": Difficulty.EASY,
    "e": Difficulty.EASY,
    "1": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "m": Difficulty.MEDIUM,
    "2": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "h": Difficulty.HARD,
    "3": Difficulty.HARD,
}


def choose_difficulty(answer: str) -> Difficulty:
    """Map a typed answer to a difficulty, raising ValueError if unknown."""
    try:
        return _ALIASES[answer.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown difficulty: {answer!r}") from None


def _ask_difficulty() -> Difficulty:
    while True:
        answer = input("Choose difficulty [easy/medium/hard]: ")
        try:
            return choose_difficulty(answer)
        except ValueError as exc:
            print(exc)


def _flush(session: GameSession) -> None:
    for message in session.drain_messages():
        print(message)


def _catch_up(
    session: GameSession, elapsed: float, ticks: int, ai_turns: int
) -> tuple[int, int]:
    """Run the clock ticks and computer turns that fell due, in time order."""
    while not session.finished():
        next_tick = (ticks + 1) * _TICK_INTERVAL
        next_ai = (ai_turns + 1) * _AI_INTERVAL
        if min(next_tick, next_ai) > elapsed:
            break
        if next_tick <= next_ai:
            session.tick()
            ticks += 1
        else:
            session.ai_turn()
            ai_turns += 1
    return ticks, ai_turns


def _play(session: GameSession) -> None:
    _flush(session)
    start = time.monotonic()
    ticks = ai_turns = 0
    while not session.finished():
        try:
            text = input("Your guess: ")
        except EOFError:
            print()
            return
        elapsed = time.monotonic() - start
        ticks, ai_turns = _catch_up(session, elapsed, ticks, ai_turns)
        if not session.finished():
            try:
                session.submit(text)
            except InvalidGuessError as exc:
                print(exc)
        _flush(session)
        if not session.finished():
            print(f"⏳ {session.time_limit - ticks}s left")


def main(argv: list[str] | None = None) -> int:
    """Run one game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="cracknclash",
        description="Race the computer to crack a secret code of digits 0-5.",
    )
    parser.add_argument(
        "--difficulty", choices=[d.name.lower() for d in Difficulty]
    )
    parser.add_argument("--seed", type=int, help="seed for the secret code")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        if args.difficulty is None:
            difficulty = _ask_difficulty()
        else:
            difficulty = choose_difficulty(args.difficulty)
    except EOFError:
        print()
        return 1

    try:
        _play(GameSession(difficulty, rng))
    except KeyboardInterrupt:
        print()
        return 130
    return 0
import random

import pytest

from cracknclash.rules import DIGITS, count_correct_pins, generate_secret_code
from cracknclash.solver import AIGuess, Solver, all_combinations


def test_all_combinations_order_and_uniqueness():
    combos = all_combinations(3)
    assert combos[0] == (0, 0, 0)
    assert combos[1] == (0, 0, 1)
    assert combos[-1] == (5, 5, 5)
    assert len(set(combos)) == len(combos)
    assert combos == sorted(combos)


def test_all_combinations_cover_every_digit_range():
    combos = all_combinations(2)
    assert all(len(c) == 2 and all(0 <= d < DIGITS for d in c) for c in combos)
    assert (3, 4) in combos


@pytest.mark.parametrize(
    "length, opening", [(3, (0, 1, 2)), (4, (0, 1, 2, 3)), (5, (0, 1, 2, 3, 4))]
)
def test_opening_guess(length, opening):
    assert Solver(length, random.Random(1)).best_guess() == opening


def test_short_code_starts_with_first_candidate():
    assert Solver(2, random.Random(1)).best_guess() == (0, 0)


def test_record_keeps_secret_and_only_consistent_candidates():
    secret = (3, 1, 4)
    solver = Solver(3, random.Random(1))
    before = solver.remaining()
    guess = solver.best_guess()
    result = solver.record(guess, count_correct_pins(secret, guess))
    assert result == AIGuess(guess, count_correct_pins(secret, guess))
    assert secret in solver.candidates
    assert solver.remaining() < before
    assert all(solver.is_consistent(c) for c in solver.candidates)
    assert solver.guess_count == 1


def test_is_consistent():
    solver = Solver(3, random.Random(1))
    solver.record((0, 1, 2), 2)
    assert solver.is_consistent((0, 1, 5))
    assert not solver.is_consistent((0, 1, 2))
    assert not solver.is_consistent((5, 5, 5))


@pytest.mark.parametrize("seed", range(5))
def test_solver_eventually_finds_secret(seed):
    rng = random.Random(seed)
    secret = generate_secret_code(4, rng)
    solver = Solver(4, rng)
    for _ in range(60):
        guess = solver.best_guess()
        correct = count_correct_pins(secret, guess)
        solver.record(guess, correct)
        if correct == 4:
            break
    assert solver.history[-1].code == secret
    assert solver.candidates == [secret]


def test_random_fallback_when_no_candidates():
    solver = Solver(3, random.Random(9))
    solver.record((0, 0, 0), 3)
    solver.record((0, 0, 0), 0)
    assert solver.remaining() == 0
    guess = solver.best_guess()
    assert len(guess) == 3
    assert all(0 <= d < DIGITS for d in guess)
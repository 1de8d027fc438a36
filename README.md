# cracknclash

A code-breaking race in your terminal. A secret code of digits 0–5 is drawn.
You try to crack it before the clock runs out and before the computer does.
The computer opponent keeps a list of every code that is still possible. It
throws out each one that disagrees with the feedback it has seen so far.

## Installing

```
pip install .
```

## Playing

```
cracknclash
```

You are asked to choose a difficulty. You can answer `easy`, `medium` or
`hard`, or the short forms `e`/`m`/`h` or `1`/`2`/`3`. You can also give it on
the command line:

```
cracknclash --difficulty hard
cracknclash --difficulty easy --seed 42
```

`--seed` seeds the random generator, so the same seed draws the same secret
code.

| Difficulty | Code length | Time |
|------------|-------------|------|
| Easy       | 3 digits    | 60 s |
| Medium     | 4 digits    | 45 s |
| Hard       | 5 digits    | 30 s |

Type a guess of the right length, using only the digits 0–5, and press Enter.

- After each guess you are told how many digits are in the right position, and which ones.
- A guess of the wrong length, or one with other characters, is rejected with a message.
- The clock runs in real time.
- The computer gets one guess every 1.5 seconds of play.

The clock ticks and computer turns that fell due are played out, in time
order, each time you enter a guess, before your guess is scored. Their
messages are printed together at that point. After that, the time left is
shown.

The first to get every digit right wins. If time runs out first, the code is
revealed. End of input stops the game, and so does Ctrl-C, which exits with
status 130.

### The computer opponent

On its first turn, the computer guesses `0, 1, 2, …` cut to the code length.
After that, it always plays the first code that is still consistent with every
result it has seen so far.

## Using it as a library

### `cracknclash.rules`

Holds the game rules:

- `Difficulty`: `EASY`, `MEDIUM` and `HARD`, each with `time_limit` and `code_length`.
- `generate_secret_code(length, rng)`
- `parse_guess(text, length)`: raises `InvalidGuessError`, a `ValueError`, for malformed input.
- `count_correct_pins(secret, guess)`
- `correct_positions_feedback(secret, guess)`
- `ordinal(index)`
- `format_code(code)`

### `cracknclash.solver`

Holds the computer opponent:

- `all_combinations(length)`
- `AIGuess`
- `Solver`, with these members:
  - `best_guess()`
  - `record(code, correct_pins)`
  - `is_consistent(candidate)`
  - `remaining()`

### `cracknclash.session`

`GameSession` runs a whole game without any terminal I/O. You drive it by calling:

- `submit(text)`
- `tick()`
- `ai_turn()`

You read what happened through:

- `drain_messages()`
- `finished()`
- `outcome`, an `Outcome`: `PLAYER_WON`, `AI_WON` or `TIME_UP`.

Calling a step after the game is over raises `RuntimeError`.

```python
import random
from cracknclash.rules import Difficulty
from cracknclash.session import GameSession

game = GameSession(Difficulty.EASY, random.Random(1), None)
game.submit("012")
game.ai_turn()
for line in game.drain_messages():
    print(line)
```

`GameSession` also takes a fixed secret, for example
`GameSession(Difficulty.EASY, None, (1, 2, 3))`. A secret of the wrong length,
or with digits outside 0–5, raises `ValueError`.

## What it does not do

- There is no graphical window. The game is played in a plain terminal, one line at a time.
- The terminal game does not interrupt your typing. The clock and the computer's turns only show up when you enter a guess.

## Running the tests

```
pip install ".[test]"
pytest
```
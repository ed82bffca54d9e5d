"""Number guessing game: find a secret number between 1 and 100."""

from __future__ import annotations

import argparse
import random as _random
import sys
from enum import Enum
from typing import TextIO

LOWEST = 1
HIGHEST = 100


class Verdict(Enum):
    """How a guess compares with the secret number."""

    TOO_HIGH = "too high"
    TOO_LOW = "too low"
    CORRECT = "correct"


_MESSAGES = {
    Verdict.TOO_HIGH: "To high! Try again \n",
    Verdict.TOO_LOW: "To low! Try again \n",
}


class GuessingGame:
    """One round of the game: a secret number and the guesses made so far."""

    def __init__(self, secret: int) -> None:
        self.secret = secret
        self.attempts = 0

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> GuessingGame:
        """Start a round with a secret drawn uniformly from 1 to 100."""
        if rng is None:
            rng = _random.Random()
        return cls(rng.randint(LOWEST, HIGHEST))

    def guess(self, value: int) -> Verdict:
        """Count one attempt and compare *value* with the secret."""
        self.attempts += 1
        if value > self.secret:
            return Verdict.TOO_HIGH
        if value < self.secret:
            return Verdict.TOO_LOW
        return Verdict.CORRECT


def _next_token(stream: TextIO) -> str | None:
    """Return the next whitespace-separated word, skipping blank lines."""
    while line := stream.readline():
        words = line.split()
        if words:
            return words[0]
    return None


def play_round(game: GuessingGame, stdin: TextIO, stdout: TextIO) -> int:
    """Prompt for guesses until the secret is found; return the attempts used."""
    while True:
        stdout.write("Enter your guess: ")
        stdout.flush()
        token = _next_token(stdin)
        if token is None:
            raise EOFError("input ended before the number was guessed")
        try:
            value = int(token)
        except ValueError:
            stdout.write("Please enter a whole number.\n")
            continue
        verdict = game.guess(value)
        if verdict is Verdict.CORRECT:
            stdout.write(
                "Congratulations! You guessed the correct number in "
                f"{game.attempts} attempts.\n"
            )
            return game.attempts
        stdout.write(_MESSAGES[verdict])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="guessing", description="Guess a number between 1 and 100."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret numbers")
    args = parser.parse_args(argv)

    rng = _random.Random(args.seed)
    stdin, stdout = sys.stdin, sys.stdout
    stdout.write("Welcome to Number Guesssing Game!\n")
    try:
        while True:
            play_round(GuessingGame.random(rng), stdin, stdout)
            stdout.write("\nDo you want to play the game again? (YES/NO) : ")
            stdout.flush()
            if _next_token(stdin) not in ("YES", "yes"):
                break
    except EOFError:
        stdout.write("\n")
        return 1
    stdout.write("Thanks for playing game.\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
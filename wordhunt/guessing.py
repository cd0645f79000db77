"""Find the single hidden word in a grid of random letters."""

from __future__ import annotations

import argparse
import random
import string
import sys
import time
from dataclasses import dataclass

GRID_SIZE = 10
WORDS = (
    "Efficient", "Learning", "World", "Hello", "Name",
    "Jani", "Share", "Complete", "Global", "Comment",
)

# Vertical, horizontal, diagonal.
_DIRECTIONS = ((1, 0), (0, 1), (1, 1))


def place_word(grid, word, rng) -> tuple[int, int, tuple[int, int]]:
    """Overwrite cells of ``grid`` with ``word`` at a random spot.

    Returns the start row, start column and (row step, column step).
    """
    size = len(grid)
    if len(word) >= size:
        raise ValueError(f"{word!r} does not fit a {size}x{size} grid")
    dr, dc = _DIRECTIONS[rng.randrange(len(_DIRECTIONS))]
    row = rng.randrange(size - len(word)) if dr else rng.randrange(size)
    col = rng.randrange(size - len(word)) if dc else rng.randrange(size)
    for step, letter in enumerate(word):
        grid[row + dr * step][col + dc * step] = letter
    return row, col, (dr, dc)


@dataclass
class Round:
    """A grid and the word hidden in it."""

    word: str
    grid: list[list[str]]

    def render(self) -> str:
        return "\n".join("".join(f" {cell}" for cell in row) for row in self.grid)

    def hint(self) -> str:
        return f"Hint: The guessed word has {len(self.word)} letters"

    def check(self, guess) -> bool:
        """Exact, case-sensitive comparison with the hidden word."""
        return guess == self.word


def new_round(rng=None) -> Round:
    """Fill a grid with lowercase letters and hide one word from WORDS in it."""
    rng = rng or random.Random()
    grid = [
        [rng.choice(string.ascii_lowercase) for _ in range(GRID_SIZE)]
        for _ in range(GRID_SIZE)
    ]
    word = WORDS[rng.randrange(len(WORDS))]
    place_word(grid, word, rng)
    return Round(word, grid)


def _show_slowly(round_: Round, delay: float) -> None:
    for row in round_.grid:
        for cell in row:
            sys.stdout.write(f" {cell}")
            sys.stdout.flush()
            if delay:
                time.sleep(delay)
        sys.stdout.write("\n")
    sys.stdout.flush()


def _read_token(prompt: str) -> str:
    while True:
        parts = input(prompt).split()
        if parts:
            return parts[0]


def _read_choice() -> int:
    while True:
        parts = input("Enter choice: ").split()
        if parts and parts[0] in ("1", "2"):
            return int(parts[0])


def _play_round(rng: random.Random, delay: float) -> int:
    round_ = new_round(rng)
    _show_slowly(round_, delay)
    print("Press 1 to guess the word\nPress 2 for a hint")
    if _read_choice() == 2:
        print(round_.hint())
    guess = _read_token("Enter your guessed word: ")
    if round_.check(guess):
        print("Congratulations! You guessed the correct word.")
        return 1
    print("Sorry, incorrect guess. Try again.")
    return 0


def _wants_again() -> bool:
    while True:
        answer = input("Do you want to play again (y/n)? ").strip().lower()
        if answer[:1] in ("y", "n") and answer:
            return answer[0] == "y"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordhunt-guess", description="Find the hidden word in the grid."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--delay", type=float, default=0.05, help="seconds between grid letters"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("\t" + "*" * 47 + " Word Guessing Game " + "*" * 57 + "\n")
    try:
        name = input("Enter name  : ").rstrip("\n")
        score = 0
        while True:
            print("\033[2J\033[H", end="")
            print(
                "\nWelcome to the Word Guessing Game!\n"
                "Try to find the hidden word in the puzzle.\n"
            )
            score += _play_round(rng, args.delay)
            if not _wants_again():
                break
    except EOFError:
        return 1

    print(f"{name}, your final score is: {score}")
    print("\n\t" + "*" * 111 + "\n")
    return 0
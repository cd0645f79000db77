"""Word search with difficulty levels and a running score."""

from __future__ import annotations

import argparse
import random
import string
from enum import Enum

EMPTY = " "
CORRECT_POINTS = 10

_ATTEMPTS_PER_WORD = 10_000
_LAYOUT_ATTEMPTS = 100


class Direction(Enum):
    """Ways a word can run through the grid, as (row step, column step)."""

    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DIAGONAL = (1, 1)
    REVERSE = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class Difficulty(Enum):
    """Grid size, word list and wrong-guess penalty of each level."""

    EASY = (
        6,
        ("CODE", "C", "BUG", "DATA", "DEV"),
        0,
        "[EASY MODE] - 6x6 Grid, simple words, no penalty.",
    )
    MEDIUM = (
        8,
        ("PROGRAM", "VARIABLE", "FUNCTION", "LOOP", "ARRAY", "STACK", "QUEUE"),
        5,
        "[MEDIUM MODE] - 8x8 Grid, words in multiple directions, "
        "-5 points for wrong guesses.",
    )
    HARD = (
        11,
        (
            "RECURSION", "ALGORITHM", "COMPLEXITY", "MULTITHREAD", "MEMORY",
            "ENCRYPT", "NETWORK", "DATABASE", "SECURITY", "OPTIMIZE",
        ),
        10,
        "[HARD MODE] - 11x11 Grid, includes reversed placement, "
        "-10 points for wrong guesses!",
    )

    def __init__(self, size: int, words: tuple[str, ...], penalty: int, banner: str):
        self.size = size
        self.words = words
        self.penalty = penalty
        self.banner = banner

    @classmethod
    def from_choice(cls, choice: int | None) -> "Difficulty":
        """Map a menu choice to a level; anything but 1 or 2 means hard."""
        if choice == 1:
            return cls.EASY
        if choice == 2:
            return cls.MEDIUM
        return cls.HARD


def _cells(row: int, col: int, length: int, direction: Direction):
    dr, dc = direction.delta
    for step in range(length):
        yield row + dr * step, col + dc * step


def space_available(grid, row, col, length, direction) -> bool:
    """Tell whether a word of ``length`` fits on free cells from (row, col)."""
    size = len(grid)
    for r, c in _cells(row, col, length, direction):
        if not (0 <= r < size and 0 <= c < size):
            return False
        if grid[r][c] != EMPTY:
            return False
    return True


def place_words(grid, words, rng) -> dict[str, tuple[int, int, Direction]]:
    """Write every word onto free cells of ``grid`` at random spots.

    Returns where each word went. Raises ValueError when a word finds no room.
    """
    size = len(grid)
    directions = list(Direction)
    placements: dict[str, tuple[int, int, Direction]] = {}
    for word in words:
        for _ in range(_ATTEMPTS_PER_WORD):
            row = rng.randrange(size)
            col = rng.randrange(size)
            direction = rng.choice(directions)
            if space_available(grid, row, col, len(word), direction):
                for (r, c), letter in zip(_cells(row, col, len(word), direction), word):
                    grid[r][c] = letter
                placements[word] = (row, col, direction)
                break
        else:
            raise ValueError(f"no room left for {word!r}")
    return placements


def make_grid(size, words, rng=None) -> list[list[str]]:
    """Build a square grid holding ``words`` with random letters elsewhere."""
    rng = rng or random.Random()
    too_long = [word for word in words if len(word) > size]
    if too_long:
        raise ValueError(f"words longer than the grid: {', '.join(too_long)}")
    for _ in range(_LAYOUT_ATTEMPTS):
        grid = [[EMPTY] * size for _ in range(size)]
        try:
            place_words(grid, words, rng)
        except ValueError:
            continue
        for row in grid:
            for c, cell in enumerate(row):
                if cell == EMPTY:
                    row[c] = rng.choice(string.ascii_uppercase)
        return grid
    raise ValueError("could not lay out all words in the grid")


def render_grid(grid) -> str:
    """Text of the grid as the game shows it."""
    lines = ["\nWord Search Grid:\n"]
    lines.extend("".join(f"{cell} " for cell in row) + "\n" for row in grid)
    return "".join(lines)


def check_word(word, words) -> bool:
    """Exact, case-sensitive membership test."""
    return word in words


class ClassicGame:
    """One game: a grid and as many guesses as there are hidden words."""

    def __init__(self, difficulty, rng=None):
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.grid = make_grid(difficulty.size, difficulty.words, self.rng)
        self.score = 0
        self.turns_left = len(difficulty.words)

    @property
    def finished(self) -> bool:
        return self.turns_left == 0

    def guess(self, word) -> bool:
        """Score one guess; every guess uses up a turn."""
        if self.finished:
            raise RuntimeError("no guesses left")
        self.turns_left -= 1
        if check_word(word, self.difficulty.words):
            self.score += CORRECT_POINTS
            return True
        self.score -= self.difficulty.penalty
        return False

    def render(self) -> str:
        return render_grid(self.grid)


def _read_token(prompt: str) -> str:
    while True:
        parts = input(prompt).split()
        if parts:
            return parts[0]


def _parse_int(text: str) -> int | None:
    parts = text.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordhunt-classic", description="Word search with difficulty levels."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        print("\nSelect difficulty level:\n1 - Easy\n2 - Medium\n3 - Hard")
        difficulty = Difficulty.from_choice(_parse_int(input("Enter choice: ")))
        print(f"\n{difficulty.banner}")
        game = ClassicGame(difficulty, rng)
        print(game.render(), end="")

        while not game.finished:
            word = _read_token("\nEnter a word you found: ")
            if game.guess(word):
                print(f"✅ Great! '{word}' is correct.")
            else:
                print(
                    f"❌ Oops! '{word}' is not in the word search. "
                    f"You lose {difficulty.penalty} points."
                )
            print(f"🔢 Current Score: {game.score}")
    except EOFError:
        return 1

    print(f"\n🎉 Game Over! Your final score: {game.score} points")
    return 0
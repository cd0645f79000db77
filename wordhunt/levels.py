"""Three-level word search with words and hints read from files."""

from __future__ import annotations

import argparse
import random
import string
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

EMPTY = " "
CORRECT_POINTS = 10
BONUS_POINTS = 20
MAX_HINTS = 2
HINT_COMMAND = "HINT"
BONUS_ANSWER = "HAPPY"
PLACE_ATTEMPTS = 100

# (row step, column step): right, down, down-right, left, up, up-left.
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (0, -1), (-1, 0), (-1, -1))

GREEN = "\033[32m"
RESET = "\033[0m"

_COLOURS = {
    "bright": "\033[97m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "reset": RESET,
}


@dataclass
class WordEntry:
    """A hidden word, its hint, and where it was put in the grid."""

    word: str
    hint: str
    found: bool = False
    row: int | None = None
    col: int | None = None
    direction: int | None = None

    @property
    def placed(self) -> bool:
        return self.direction is not None

    def cells(self) -> list[tuple[int, int]]:
        """Grid cells the word covers; empty when it was never placed."""
        if not self.placed:
            return []
        dr, dc = DIRECTIONS[self.direction]
        return [(self.row + dr * k, self.col + dc * k) for k in range(len(self.word))]


@dataclass(frozen=True)
class LevelConfig:
    """Settings of one level."""

    level: int
    word_count: int
    grid_size: int
    max_direction: int
    penalty: int
    filename: str


def level_config(level) -> LevelConfig:
    """Settings for a level: 1 is easy, 2 medium, anything else hard."""
    if level == 1:
        return LevelConfig(level, 2, 6, 1, 0, "Easyy.txt")
    if level == 2:
        return LevelConfig(level, 3, 8, 2, 5, "Mediumm.txt")
    return LevelConfig(level, 3, 11, 5, 10, "Hardd.txt")


def load_words(path, count) -> list[WordEntry]:
    """Read ``count`` entries from lines of the form ``WORD:hint``.

    Lines without a colon are skipped. Raises ValueError when the file
    holds fewer entries than asked for.
    """
    entries: list[WordEntry] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if len(entries) >= count:
                break
            word, sep, hint = line.partition(":")
            if not sep:
                continue
            entries.append(WordEntry(word, hint.partition("\n")[0]))
    if len(entries) < count:
        raise ValueError(f"{path}: expected {count} words, found {len(entries)}")
    return entries


def place_word(grid, entry, max_direction, rng) -> bool:
    """Try to write ``entry`` into ``grid``, crossing only matching letters.

    Uses directions 0..max_direction. Records the spot on ``entry`` and
    returns True on success; returns False after PLACE_ATTEMPTS misses.
    """
    if not 0 <= max_direction < len(DIRECTIONS):
        raise ValueError(f"max_direction must be in 0..{len(DIRECTIONS) - 1}")
    size = len(grid)
    word = entry.word
    for _ in range(PLACE_ATTEMPTS):
        row = rng.randrange(size)
        col = rng.randrange(size)
        direction = rng.randrange(max_direction + 1)
        dr, dc = DIRECTIONS[direction]
        cells = [(row + dr * k, col + dc * k) for k in range(len(word))]
        fits = all(
            0 <= r < size and 0 <= c < size and grid[r][c] in (EMPTY, letter)
            for (r, c), letter in zip(cells, word)
        )
        if fits:
            for (r, c), letter in zip(cells, word):
                grid[r][c] = letter
            entry.row, entry.col, entry.direction = row, col, direction
            return True
    return False


def fill_grid(grid, rng) -> None:
    """Replace every empty cell with a random uppercase letter."""
    for row in grid:
        for c, cell in enumerate(row):
            if cell == EMPTY:
                row[c] = rng.choice(string.ascii_uppercase)


def check_bonus(answer) -> bool:
    """Tell whether the bonus-round answer is right, ignoring case."""
    return answer.upper() == BONUS_ANSWER


@dataclass(frozen=True)
class GuessOutcome:
    """What one guess did."""

    correct: bool
    points: int
    hints: tuple[str, ...] = ()
    hints_refused: bool = False


@dataclass
class LevelGame:
    """The grid, words and score of one level."""

    config: LevelConfig
    entries: list[WordEntry]
    rng: random.Random | None = None
    grid: list[list[str]] = field(init=False)
    unplaced: list[str] = field(init=False)
    score: int = field(init=False, default=0)
    hints_used: int = field(init=False, default=0)

    def __init__(self, config, entries, rng=None):
        self.config = config
        self.entries = list(entries)
        self.rng = rng or random.Random()
        self.score = 0
        self.hints_used = 0
        size = config.grid_size
        self.grid = [[EMPTY] * size for _ in range(size)]
        self.unplaced = [
            entry.word
            for entry in self.entries
            if not place_word(self.grid, entry, config.max_direction, self.rng)
        ]
        fill_grid(self.grid, self.rng)

    @property
    def finished(self) -> bool:
        return all(entry.found for entry in self.entries)

    def hint_for(self, word) -> str | None:
        """Hint of the not yet found entry spelled exactly ``word``."""
        for entry in self.entries:
            if entry.word == word and not entry.found:
                return entry.hint
        return None

    def _use_hint(self, word, hints: list[str]) -> None:
        hint = self.hint_for(word)
        if hint is not None:
            hints.append(hint)
        self.hints_used += 1

    def guess(self, word) -> GuessOutcome:
        """Score one guess; it is compared in upper case."""
        if self.finished:
            raise RuntimeError("every word has already been found")
        guess = word.upper()
        hints: list[str] = []
        refused = False
        for entry in self.entries:
            if guess == HINT_COMMAND:
                if self.hints_used < MAX_HINTS:
                    self._use_hint(guess, hints)
                else:
                    refused = True
                    continue
            if entry.word == guess and not entry.found:
                entry.found = True
                self.score += CORRECT_POINTS
                return GuessOutcome(True, CORRECT_POINTS, tuple(hints), refused)
        self.score -= self.config.penalty
        if self.hints_used < MAX_HINTS:
            self._use_hint(guess, hints)
        return GuessOutcome(False, -self.config.penalty, tuple(hints), refused)

    def highlighted(self) -> set[tuple[int, int]]:
        """Cells covered by words already found."""
        return {cell for entry in self.entries if entry.found for cell in entry.cells()}

    def render(self) -> str:
        """Grid with row and column numbers; found words shown in green."""
        marked = self.highlighted()
        size = self.config.grid_size
        lines = ["\n   " + "".join(f"{j:2d}" for j in range(size)) + "\n"]
        for i, row in enumerate(self.grid):
            cells = []
            for j, cell in enumerate(row):
                text = f"{cell} "
                cells.append(f"{GREEN}{text}{RESET}" if (i, j) in marked else text)
            lines.append(f"{i:2d} " + "".join(cells) + "\n")
        return "".join(lines)


def _say(text: str, colour: str | None = None, end: str = "\n") -> None:
    if colour:
        text = f"{_COLOURS[colour]}{text}{RESET}"
    print(text, end=end)


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def _show(game: LevelGame, delay: float) -> None:
    for line in game.render().splitlines(keepends=True):
        sys.stdout.write(line)
        sys.stdout.flush()
        _pause(delay * game.config.grid_size)


def _read_token(prompt: str) -> str:
    while True:
        parts = input(prompt).split()
        if parts:
            return parts[0]


def _rules() -> None:
    print("-----------------------------------------")
    print("Just to set the rules straight, in the first grid")
    _say("(EASY) ;", "green", end="")
    _say(
        "2 words are 3 to 4 letters long and will be placed either horizontally "
        "or vertically and no penalty for wrong answers;",
        "cyan",
    )
    print("If u choose to go to the next grid")
    _say("(MEDIUM),", "yellow", end="")
    _say(
        "it contains 3 words of 4 to 5 letters long which will either be placed "
        "diagonally or horizontally or vertically and penalty for wrong answers(-5);",
        "cyan",
    )
    print("The next level ")
    _say("(HARD) ", "red", end="")
    _say(
        "also contains 3 words and is 6 to 9 letters long which will either be "
        "placed reversed or diagonally or horizontally or vertically and penalty "
        "for wrong answers(-10).\n",
        "cyan",
    )
    print("-----------------------------------------------------")


def _play_level(config: LevelConfig, folder: Path, rng, delay: float, base: int) -> int:
    path = folder / config.filename
    try:
        entries = load_words(path, config.word_count)
    except OSError:
        print(f"Error: Could not open file {path}")
        return 0
    except ValueError:
        return 0

    game = LevelGame(config, entries, rng)
    for word in game.unplaced:
        print(f"Failed to place word: {word}")
    _show(game, delay)
    while not game.finished:
        outcome = game.guess(_read_token("\n🔍 Enter a word: "))
        if outcome.hints_refused:
            print("❗ You’ve already used both your hints.")
        if outcome.correct:
            print("✅ Correct!")
        else:
            print(f"❌ Wrong! -{config.penalty} points")
        for hint in outcome.hints:
            print(f"💡 Hint: {hint}")
        print(f"🎯 Score: {base + game.score}")
        _show(game, delay)
    return game.score


def _bonus_round() -> int:
    print("\n🎁 BONUS ROUND!")
    print("Guess the word from emojis:")
    print(":) is What emotion ?")
    if check_bonus(_read_token("Type your answer: ")):
        print(f"🎉 Correct! Bonus {BONUS_POINTS} points!")
        return BONUS_POINTS
    print("❌ Sorry! No bonus.")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordhunt-levels", description="Three-level word search with hints."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--delay", type=float, default=0.05, help="seconds per grid cell when drawing"
    )
    parser.add_argument(
        "--words-dir", type=Path, default=Path("."), help="folder holding the word files"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("🧠 Welcome to the Word Search Game!(TOPIC: PROGRAMMING)")
    try:
        name = _read_token("Enter ur name:")
        _say(f"Giddy up {name}! Let's start the game!", "bright")
        _pause(args.delay * 20)
        _rules()
        _pause(args.delay * 100)

        score = 0
        level = 1
        while True:
            score += _play_level(level_config(level), args.words_dir, rng, args.delay, score)
            if level == 3:
                score += _bonus_round()
                break
            answer = _read_token("\nNext level? (y/n): ")
            if answer[0].lower() != "y":
                break
            level += 1
    except EOFError:
        return 1

    print(f"\n🏁 Final Score: {score}")
    print(f"Thanks for playing {name}!")
    return 0
# wordhunt

Three small word games that you play in the terminal.

## Installation

```
pip install .
```

Each command accepts `--seed N`, which makes the grids repeat from one run to the next.

## Games

### Classic word search

```
wordhunt-classic [--seed N]
```

Choose a difficulty first. Enter `1` for easy, `2` for medium, or anything else for hard.

| Level  | Grid  | Words | Wrong guess |
|--------|-------|-------|-------------|
| Easy   | 6×6   | 5     | no penalty  |
| Medium | 8×8   | 7     | −5 points   |
| Hard   | 11×11 | 10    | −10 points  |

Words never overlap. Each one runs horizontally, vertically, diagonally (down-right) or reversed (right to left). You get one guess for each hidden word. Every guess uses up a turn. A correct guess is worth 10 points. Guesses are case-sensitive, and all the words are in upper case.

### Guess the hidden word

```
wordhunt-guess [--seed N] [--delay SECONDS]
```

One word is hidden in a 10×10 grid of lowercase letters. It runs vertically, horizontally or diagonally. The grid is drawn one letter at a time. `--delay` sets the pause between letters (default 0.05 s, and `0` turns it off).

Before you guess, you can ask for a hint, which tells you how long the word is. The guess must match the word exactly, including its capital first letter. Each round you win scores one point. You can play as many rounds as you like.

### Levels

```
wordhunt-levels [--seed N] [--delay SECONDS] [--words-dir DIR]
```

The game has three levels. Each level reads its words from a file in `--words-dir` (the current directory by default):

| Level  | File          | Words | Grid  | Directions                            | Wrong guess |
|--------|---------------|-------|-------|---------------------------------------|-------------|
| 1      | `Easyy.txt`   | 2     | 6×6   | right, down                           | no penalty  |
| 2      | `Mediumm.txt` | 3     | 8×8   | right, down, down-right               | −5 points   |
| 3      | `Hardd.txt`   | 3     | 11×11 | also left, up, up-left                | −10 points  |

File format:

- Each line has the form `WORD:hint text`.
- Lines without a colon are skipped.
- Only the first entries the level needs are used.

If a level's file is missing or holds too few entries, that level scores nothing and the game moves on.

During play:

- Words may cross where their letters agree. Found words are shown in green.
- Guesses are compared in upper case. A correct guess is worth 10 points.
- After each level you are asked whether to go on.
- After level 3 comes a bonus round. The answer `happy`, in any case, earns 20 points.

Hints work as follows. Each level allows two hint lookups. Typing `HINT`, or making a wrong guess, uses one up. A hint is printed only when the text looked up is the spelling of a hidden word that has not yet been found. In practice the lookups rarely show anything.

## Library use

The game logic can also be used from Python:

```python
import random
from wordhunt.classic import ClassicGame, Difficulty

game = ClassicGame(Difficulty.EASY, random.Random(1))
print(game.render())
print(game.guess("CODE"))   # True, score is now 10
```

Other entry points:

- `wordhunt.guessing.new_round()` returns a `Round` with `render()`, `hint()` and `check(guess)`.
- `wordhunt.levels` provides `level_config(level)`, `load_words(path, count)` and `LevelGame`. A `LevelGame` has `guess(word)`, `hint_for(word)`, `highlighted()` and `render()`.

## What it does not do

- No word files for the levels game come with the package. You must supply `Easyy.txt`, `Mediumm.txt` and `Hardd.txt` yourself.
- Scores are not saved between runs.

## Running the tests

```
pip install .[test]
pytest
```
import random
import string

import pytest

from wordhunt.guessing import GRID_SIZE, WORDS, Round, main, new_round, place_word


def read_along(grid, row, col, length, delta):
    dr, dc = delta
    return "".join(grid[row + dr * k][col + dc * k] for k in range(length))


def contains(grid, word):
    size = len(grid)
    for delta in ((1, 0), (0, 1), (1, 1)):
        dr, dc = delta
        for r in range(size):
            for c in range(size):
                if r + dr * (len(word) - 1) < size and c + dc * (len(word) - 1) < size:
                    if read_along(grid, r, c, len(word), delta) == word:
                        return True
    return False


@pytest.mark.parametrize("word", WORDS)
def test_place_word_writes_word_in_bounds(word):
    grid = [["."] * GRID_SIZE for _ in range(GRID_SIZE)]
    row, col, delta = place_word(grid, word, random.Random(len(word)))
    assert delta in {(1, 0), (0, 1), (1, 1)}
    assert read_along(grid, row, col, len(word), delta) == word
    written = sum(cell != "." for line in grid for cell in line)
    assert written == len(word)


def test_place_word_rejects_word_as_long_as_grid():
    grid = [["."] * GRID_SIZE for _ in range(GRID_SIZE)]
    with pytest.raises(ValueError):
        place_word(grid, "x" * GRID_SIZE, random.Random(0))


@pytest.mark.parametrize("seed", range(20))
def test_new_round_hides_a_known_word(seed):
    round_ = new_round(random.Random(seed))
    assert round_.word in WORDS
    assert len(round_.grid) == GRID_SIZE
    assert all(len(row) == GRID_SIZE for row in round_.grid)
    assert contains(round_.grid, round_.word)


def test_new_round_background_is_lowercase():
    round_ = new_round(random.Random(1))
    allowed = set(string.ascii_lowercase) | set(round_.word)
    assert all(cell in allowed for row in round_.grid for cell in row)


def test_new_round_is_reproducible():
    first = new_round(random.Random(42))
    second = new_round(random.Random(42))
    assert first.word in WORDS
    assert contains(first.grid, first.word)
    assert second.word == first.word
    assert second.grid == first.grid


def test_check_is_case_sensitive():
    round_ = Round("Hello", [["a"]])
    assert round_.check("Hello") is True
    assert round_.check("hello") is False
    assert round_.check("World") is False


def test_hint_gives_length():
    assert Round("Hello", [["a"]]).hint() == "Hint: The guessed word has 5 letters"


def test_render_layout():
    assert Round("ab", [["a", "b"], ["c", "d"]]).render() == " a b\n c d"


def feed(monkeypatch, answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_correct_guess_scores(monkeypatch, capsys):
    word = new_round(random.Random(7)).word
    feed(monkeypatch, ["Tester", "2", word, "n"])
    assert main(["--seed", "7", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert f"has {len(word)} letters" in out
    assert "Congratulations!" in out
    assert "Tester, your final score is: 1" in out


def test_main_wrong_guesses_score_nothing(monkeypatch, capsys):
    feed(monkeypatch, ["Tester", "3", "1", "zzz", "maybe", "Y", "1", "zzz", "n"])
    assert main(["--seed", "8", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count("Sorry, incorrect guess.") == 2
    assert "Tester, your final score is: 0" in out


def test_main_end_of_input(monkeypatch):
    feed(monkeypatch, ["Tester"])
    assert main(["--seed", "1", "--delay", "0"]) == 1
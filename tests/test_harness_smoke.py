import csv
from pathlib import Path

import pytest

from packages.engine import Board, Direction, GameState, Hint, HintKind, insert_word
from packages.harness import (
    load_state, play_game, save_state, solve_batch, solve_state, state_from_dict, state_to_dict,
    write_csv,
)
from packages.harness.snapshot import hint_from_dict


def _state(board, index=0, remaining=10):
    return GameState(guesses_remaining=remaining, next_guess_index=index, language="en", board=board)


# --- snapshot codec ---

@pytest.mark.parametrize("kind,expected", [
    ("Green", (HintKind.EXACT, 0, 0)),
    ("HorizontalSimple", (HintKind.ROW, 1, 0)),
    ("HorizontalTriple", (HintKind.ROW, 3, 0)),
    ("VerticalDouble", (HintKind.COLUMN, 0, 2)),
    ("OrangeDoubleVerticalSimpleHorizontal", (HintKind.ROW_AND_COLUMN, 1, 2)),
    ("OrangeSimpleVerticalTripleHorizontal", (HintKind.ROW_AND_COLUMN, 3, 1)),
    ("White", (HintKind.MISPLACED, 0, 0)),
    ("Black", (HintKind.ABSENT, 0, 0)),
])
def test_hint_types_decode(kind, expected):
    h = hint_from_dict({"letter": "e", "type": kind})
    assert h.letter == "E"
    assert (h.kind, h.row_strength, h.column_strength) == expected


def test_unknown_hint_type_raises():
    with pytest.raises(ValueError):
        hint_from_dict({"letter": "e", "type": "Purple"})


def test_snapshot_keeps_hint_order_and_letters(tmp_path: Path):
    b = Board.empty()
    b.cell(0, 0).letter = "S"
    b.cell(0, 0).add_hint(Hint("T", HintKind.COLUMN, column_strength=2))
    b.cell(0, 0).add_hint(Hint("S", HintKind.EXACT))
    b.cell(2, 4).add_hint(Hint("Q", HintKind.ROW_AND_COLUMN, row_strength=1, column_strength=3))
    state = GameState(guesses_remaining=7, next_guess_index=2, language="pt-br", board=b)

    data = state_to_dict(state)
    assert data["boardState"][0][0]["hints"] == [
        {"letter": "T", "type": "VerticalDouble"},
        {"letter": "S", "type": "Green"},
    ]
    assert data["boardState"][4][2]["hints"] == [
        {"letter": "Q", "type": "OrangeTripleVerticalSimpleHorizontal"},
    ]

    path = save_state(state, tmp_path / "snap.json")
    assert load_state(path) == state


def test_snapshot_rejects_letter_in_blocked_cell():
    data = state_to_dict(_state(Board.empty()))
    data["boardState"][3][1]["letter"] = "A"
    with pytest.raises(ValueError):
        state_from_dict(data)


def test_snapshot_empty_letter_means_empty_cell():
    data = state_to_dict(_state(Board.empty()))
    data["boardState"][0][0]["letter"] = ""
    assert state_from_dict(data).board.cell(0, 0).letter is None


# --- solve ---

def test_solve_state_reports_guess(almost_solved, square_corpus):
    r = solve_state(_state(almost_solved), square_corpus)
    assert r["word"] == "ABCDE"
    assert r["direction"] == "horizontal"
    assert r["confidence"] == 1.0
    assert r["complete"] is False
    assert r["time_ms"] >= 0


def test_solve_batch_and_csv(tmp_path: Path, almost_solved, hinted_board, square_corpus):
    results = solve_batch([_state(almost_solved), _state(hinted_board)], ["ABCDE", "ABCDF"] + square_corpus)
    for i, r in enumerate(results):
        r["snapshot"] = f"s{i}.json"
    path = write_csv(results, str(tmp_path / "out" / "run.csv"))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["snapshot"] for row in rows] == ["s0.json", "s1.json"]
    assert rows[0]["word"] == "ABCDE" and rows[0]["direction"] == "horizontal"


# --- autoplay loop ---

class FakeGame:
    """Fills the line the solver would have picked, as if the guess were right."""

    def __init__(self, state: GameState, accept=True):
        self.state = state
        self.accept = accept
        self.typed = []

    def read(self) -> GameState:
        return self.state

    def submit(self, word: str) -> None:
        self.typed.append(word)
        s = self.state
        board = insert_word(s.board, Direction.HORIZONTAL, s.next_guess_index, word) if self.accept else s.board
        self.state = GameState(s.guesses_remaining - 1, s.next_guess_index, s.language, board)


def test_play_game_completes_board(almost_solved, square_corpus):
    game = FakeGame(_state(almost_solved))
    out = play_game(game.read, game.submit, corpus=square_corpus)
    assert out["success"] is True and out["reason"] == "complete"
    assert out["history"] == ["ABCDE"] == game.typed
    assert out["final_state"].guesses_remaining == 9


def test_play_game_out_of_guesses(almost_solved, square_corpus):
    game = FakeGame(_state(almost_solved, remaining=0))
    out = play_game(game.read, game.submit, corpus=square_corpus)
    assert (out["success"], out["reason"], out["moves"]) == (False, "out_of_guesses", 0)


def test_play_game_no_guess(hinted_board):
    game = FakeGame(_state(hinted_board))
    out = play_game(game.read, game.submit, corpus=["ABCDE", "ABCDF"])
    assert (out["success"], out["reason"]) == (False, "no_guess")
    assert game.typed == []


def test_play_game_move_limit(almost_solved, square_corpus):
    game = FakeGame(_state(almost_solved), accept=False)
    out = play_game(game.read, game.submit, corpus=square_corpus, max_moves=3)
    assert (out["success"], out["reason"], out["moves"]) == (False, "max_moves", 3)

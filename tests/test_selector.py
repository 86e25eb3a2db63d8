import pytest

from packages.engine import Board, Direction, GameState, Hint, HintKind, compute_next_guess, is_feasible
from packages.engine.selector import Guess, _select

H, V = Direction.HORIZONTAL, Direction.VERTICAL


def _state(board, index=0, remaining=10, language="en"):
    return GameState(guesses_remaining=remaining, next_guess_index=index, language=language, board=board)


# --- feasibility ---

def test_feasible_when_word_completes_board(almost_solved, square_corpus):
    assert is_feasible(_state(almost_solved), "ABCDE", H, square_corpus, select=_select) is True


def test_infeasible_when_crossing_line_has_no_word(hinted_board):
    corpus = ["ABCDE", "ABCDF"]
    # column 2 would have to start with 'C'; nothing in the corpus does
    assert is_feasible(_state(hinted_board), "ABCDE", H, corpus, select=_select) is False
    assert is_feasible(_state(hinted_board), "ABCDE", V, corpus, select=_select) is False


def test_infeasible_when_simulated_board_has_no_follow_up(hinted_board):
    calls = []

    def no_guess(state, corpus, budget):
        calls.append(budget)
        return None

    assert is_feasible(_state(hinted_board), "AAAAA", H, ["AAAAA"], select=no_guess) is False
    assert calls == [5]


def test_lookahead_budget_strictly_decreases(hinted_board):
    calls = []

    def same_word(state, corpus, budget):
        calls.append((state.next_guess_index, budget))
        return Guess("AAAAA", 1.0, H)

    # rows fill but the column-only cells never do: only the cap ends the search
    assert is_feasible(_state(hinted_board), "AAAAA", H, ["AAAAA"], select=same_word) is True
    assert calls == [(2, 5), (4, 4), (0, 3), (2, 2), (4, 1), (0, 0)]


def test_lookahead_stops_when_simulated_guesses_run_out(hinted_board):
    calls = []

    def same_word(state, corpus, budget):
        calls.append(budget)
        assert state.guesses_remaining == 1
        return Guess("AAAAA", 1.0, H)

    assert is_feasible(_state(hinted_board, remaining=2), "AAAAA", H, ["AAAAA"], select=same_word) is True
    assert calls == [5]


def test_feasibility_does_not_mutate_board(hinted_board):
    before = hinted_board.copy()
    is_feasible(_state(hinted_board), "ABCDE", H, ["ABCDE", "ABCDF"], select=_select)
    assert hinted_board == before


# --- selector ---

def test_virgin_board_english():
    g = compute_next_guess(_state(Board.empty(), remaining=9))
    assert g is not None
    assert len(g.word) == 5 and g.word.isalpha()
    assert g.confidence > 0
    assert g.direction is None


def test_complete_board_has_no_guess(solved_board, square_corpus):
    solved_board.cell(0, 0).add_hint(Hint("A", HintKind.EXACT))
    assert compute_next_guess(_state(solved_board), square_corpus) is None


def test_single_candidate_returned_without_lookahead(almost_solved, square_corpus):
    g = compute_next_guess(_state(almost_solved), square_corpus)
    assert g == Guess("ABCDE", 1.0, H)


def test_dead_end_when_a_direction_has_no_candidates(hinted_board):
    hinted_board.cell(0, 0).add_hint(Hint("A", HintKind.MISPLACED))
    # 'A' is now banned from row 0 and column 0; every word starts with it
    assert compute_next_guess(_state(hinted_board), ["ABCDE", "AXYZW"]) is None


def test_no_guess_when_every_candidate_is_infeasible(hinted_board):
    assert compute_next_guess(_state(hinted_board), ["ABCDE", "ABCDF"]) is None


def test_lookahead_skips_infeasible_top_word(solved_board, square_corpus):
    for x in range(5):
        solved_board.cell(x, 0).letter = None
    # keep the board open after row 0 so the crossing check actually runs
    solved_board.cell(1, 2).letter = None
    solved_board.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    # Ties with ABCDE and comes first, but leaves column 2 starting with 'X'.
    corpus = ["ABXDE"] + square_corpus
    state = _state(solved_board)

    g = compute_next_guess(state, corpus)
    assert g.word == "ABCDE"
    assert g.direction is H
    assert 0 < g.confidence < 1

    blind = compute_next_guess(state, corpus, lookahead=0)
    assert blind.word == "ABXDE"


def test_prefers_direction_with_more_missing_letters(solved_board, square_corpus):
    # column 0 is open apart from its crossings, row 0 is already full
    solved_board.cell(0, 1).letter = None
    solved_board.cell(0, 3).letter = None
    solved_board.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    g = compute_next_guess(_state(solved_board), square_corpus)
    assert g == Guess("APFQK", 1.0, V)


def test_falls_back_when_preferred_direction_is_infeasible(solved_board, square_corpus):
    # row 0 misses 2 letters, column 0 misses 3: vertical is preferred
    for x, y in [(1, 0), (3, 0), (0, 1), (0, 2), (0, 3)]:
        solved_board.cell(x, y).letter = None
    solved_board.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    # Both column words put X/Y in front of row 2 (?GHIJ), which no word fits.
    corpus = [w for w in square_corpus if w != "APFQK"] + ["APXQK", "APYQK"]
    state = _state(solved_board)

    assert compute_next_guess(state, corpus, lookahead=0) == Guess("APXQK", 0.9, V)
    assert compute_next_guess(state, corpus) == Guess("ABCDE", 1.0, H)


def test_tie_on_confidence_prefers_horizontal():
    b = Board.empty()
    b.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    for x in (1, 3):
        b.cell(x, 0).letter = "A"
        b.cell(0, x).letter = "A"
    g = compute_next_guess(_state(b), ["AAAAA"])
    assert g == Guess("AAAAA", 1.0, H)


def test_exact_and_misplaced_hints_shape_the_guess():
    b = Board.empty()
    # column 0 already spells SHAPE, so the row is the line with more gaps
    for y, ch in enumerate("SHAPE"):
        b.cell(0, y).letter = ch
    b.cell(2, 0).letter = "A"
    b.cell(2, 0).add_hint(Hint("A", HintKind.EXACT))
    b.cell(1, 0).add_hint(Hint("X", HintKind.MISPLACED))
    before = b.copy()

    g = compute_next_guess(_state(b), lookahead=2)
    assert g is not None and g.direction is H
    w = g.word.upper()
    assert w[0] == "S" and w[2] == "A" and "X" not in w
    assert b == before


def test_unsupported_language_raises(hinted_board):
    from packages.datasets import UnsupportedLanguageError
    with pytest.raises(UnsupportedLanguageError):
        compute_next_guess(_state(hinted_board, language="xx"))

import pytest

from packages.engine import Board, Hint, HintKind

# A consistent 5x5 cross: rows 0/2/4 and columns 0/2/4 agree at every crossing.
ROWS = {0: "ABCDE", 2: "FGHIJ", 4: "KLMNO"}
COLS = {0: "APFQK", 2: "CRHSM", 4: "ETJUO"}
SQUARE = list(ROWS.values()) + list(COLS.values())


def fill(board: Board, rows=ROWS, cols=COLS) -> Board:
    for y, word in rows.items():
        for x, ch in enumerate(word):
            board.cell(x, y).letter = ch
    for x, word in cols.items():
        for y, ch in enumerate(word):
            board.cell(x, y).letter = ch
    return board


@pytest.fixture
def square_corpus():
    return list(SQUARE)


@pytest.fixture
def solved_board():
    return fill(Board.empty())


@pytest.fixture
def hinted_board():
    """Empty board whose only feedback is a 'Z is nowhere' hint."""
    b = Board.empty()
    b.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    return b


@pytest.fixture
def almost_solved(solved_board):
    """Solved square with the two row-0-only cells cleared, plus one hint."""
    solved_board.cell(1, 0).letter = None
    solved_board.cell(3, 0).letter = None
    solved_board.cell(4, 4).add_hint(Hint("Z", HintKind.ABSENT))
    return solved_board

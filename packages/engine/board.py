"""
Board model for the 5x5 cross-shaped Squardle grid.

Layout (x = column, y = row; '#' = blocked):

      x: 0 1 2 3 4
    y=0  . . . . .
    y=1  . # . # .
    y=2  . . . . .
    y=3  . # . # .
    y=4  . . . . .

Rows 0/2/4 and columns 0/2/4 are the six guessable lines. The board is
stored row-major, so `rows[y][x]` is the cell at (x, y).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .hints import Hint, HintKind
from .validation import GUESS_SEQUENCE, check_guess_index

SIZE = 5
BLOCKED_CELLS = frozenset({(1, 1), (3, 1), (1, 3), (3, 3)})


class Direction(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flip(self) -> "Direction":
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL


@dataclass
class Cell:
    x: int
    y: int
    letter: Optional[str] = None
    # One entry per guess that touched this cell, oldest first. Append-only.
    hints: List[Hint] = field(default_factory=list)

    def __post_init__(self):
        if self.letter is not None:
            if len(self.letter) != 1 or not self.letter.isalpha():
                raise ValueError(f"Cell ({self.x},{self.y}) letter must be one alphabetic char; got {self.letter!r}")
            self.letter = self.letter.upper()

    @property
    def blocked(self) -> bool:
        return (self.x, self.y) in BLOCKED_CELLS

    def add_hint(self, hint: Hint) -> None:
        self.hints.append(hint)

    def copy(self) -> "Cell":
        return Cell(self.x, self.y, self.letter, list(self.hints))


@dataclass
class Board:
    rows: List[List[Cell]]

    def __post_init__(self):
        if len(self.rows) != SIZE or any(len(r) != SIZE for r in self.rows):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if (cell.x, cell.y) != (x, y):
                    raise ValueError(f"Cell at slot ({x},{y}) claims coordinates ({cell.x},{cell.y})")
                if cell.blocked and cell.letter is not None:
                    raise ValueError(f"Blocked cell ({x},{y}) cannot hold a letter")

    @classmethod
    def empty(cls) -> "Board":
        return cls([[Cell(x, y) for x in range(SIZE)] for y in range(SIZE)])

    def cell(self, x: int, y: int) -> Cell:
        return self.rows[y][x]

    def cells(self) -> List[Cell]:
        return [c for row in self.rows for c in row]

    def playable_cells(self) -> List[Cell]:
        return [c for c in self.cells() if not c.blocked]

    def line(self, direction: Direction, index: int) -> List[Cell]:
        """Cells of row `index` (left to right) or column `index` (top to bottom)."""
        check_guess_index(index)
        if Direction(direction) is Direction.HORIZONTAL:
            return list(self.rows[index])
        return [self.rows[y][index] for y in range(SIZE)]

    def line_letters(self, direction: Direction, index: int) -> str:
        """Line read back as a string, '.' for empty cells."""
        return "".join(c.letter or "." for c in self.line(direction, index))

    def missing_letters(self, direction: Direction, index: int) -> int:
        return sum(1 for c in self.line(direction, index) if c.letter is None)

    def has_hints(self) -> bool:
        return any(c.hints for c in self.cells())

    def absent_letters(self) -> Set[str]:
        """Letters marked absent anywhere on the board."""
        return {h.letter for c in self.cells() for h in c.hints if h.kind is HintKind.ABSENT}

    def copy(self) -> "Board":
        return Board([[c.copy() for c in row] for row in self.rows])


@dataclass
class GameState:
    guesses_remaining: int
    next_guess_index: int
    language: str
    board: Board

    def __post_init__(self):
        if self.guesses_remaining < 0:
            raise ValueError(f"guesses_remaining must be >= 0; got {self.guesses_remaining}")
        check_guess_index(self.next_guess_index)


def is_board_complete(board: Board) -> bool:
    """True iff every non-blocked cell (21 of 25) holds a letter."""
    return all(c.letter for c in board.playable_cells())


def next_guess_index(index: int) -> int:
    """Next line in the cyclic guess sequence 0 -> 2 -> 4 -> 0."""
    check_guess_index(index)
    return GUESS_SEQUENCE[(GUESS_SEQUENCE.index(index) + 1) % len(GUESS_SEQUENCE)]

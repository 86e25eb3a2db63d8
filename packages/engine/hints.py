"""
Squardle feedback semantics.

Every guess paints the cells it touched with a hint. Conventions:
  - EXACT          : letter is correct at this cell (green)
  - ROW            : letter belongs to this cell's row word, elsewhere;
                     strength 1..3 = how many horizontal words contain it
  - COLUMN         : symmetric, for the column word
  - ROW_AND_COLUMN : both at once; (row_strength, column_strength) pair
  - MISPLACED      : letter is in the solution, but not in this line (white)
  - ABSENT         : letter is nowhere on the board (black)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

STRENGTHS = (1, 2, 3)


class HintKind(str, Enum):
    EXACT = "exact"
    ROW = "row"
    COLUMN = "column"
    ROW_AND_COLUMN = "row_and_column"
    MISPLACED = "misplaced"
    ABSENT = "absent"


@dataclass(frozen=True)
class Hint:
    letter: str
    kind: HintKind
    row_strength: int = 0
    column_strength: int = 0

    def __post_init__(self):
        if not isinstance(self.letter, str) or len(self.letter) != 1 or not self.letter.isalpha():
            raise ValueError(f"Hint letter must be a single alphabetic character; got {self.letter!r}")
        # Canonical form is uppercase; frozen, so go through object.__setattr__
        object.__setattr__(self, "letter", self.letter.upper())
        object.__setattr__(self, "kind", HintKind(self.kind))

        wants_row = self.kind in (HintKind.ROW, HintKind.ROW_AND_COLUMN)
        wants_col = self.kind in (HintKind.COLUMN, HintKind.ROW_AND_COLUMN)
        if wants_row != (self.row_strength in STRENGTHS) or (not wants_row and self.row_strength):
            raise ValueError(f"{self.kind.value} hint has invalid row strength {self.row_strength}")
        if wants_col != (self.column_strength in STRENGTHS) or (not wants_col and self.column_strength):
            raise ValueError(f"{self.kind.value} hint has invalid column strength {self.column_strength}")

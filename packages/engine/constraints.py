"""
Candidate filtering given board feedback.

Given:
  - the board (letters confirmed so far + every hint ever painted)
  - the line being guessed (direction + index in {0, 2, 4})

Build a FilterSpec for that line, then keep only the words of a pool that
satisfy it. This is the step that turns hints into a shrinking candidate set;
the selector runs it for both directions and the lookahead runs it again on
every simulated board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple

from .board import Board, Direction
from .hints import HintKind

# (position in the line, uppercase letter)
LetterAt = Tuple[int, str]


@dataclass(frozen=True)
class FilterSpec:
    required: FrozenSet[str] = frozenset()          # must appear somewhere
    forbidden: FrozenSet[str] = frozenset()         # must not appear anywhere
    forbidden_at: FrozenSet[LetterAt] = frozenset() # must not sit at that position
    required_at: FrozenSet[LetterAt] = frozenset()  # confirmed letters

    def __post_init__(self):
        object.__setattr__(self, "required", frozenset(ch.upper() for ch in self.required))
        object.__setattr__(self, "forbidden", frozenset(ch.upper() for ch in self.forbidden))
        object.__setattr__(self, "forbidden_at", frozenset((i, ch.upper()) for i, ch in self.forbidden_at))
        object.__setattr__(self, "required_at", frozenset((i, ch.upper()) for i, ch in self.required_at))


def build_filter(board: Board, direction: Direction, index: int) -> FilterSpec:
    """
    Derive the FilterSpec for one line of `board`.

    Per hint on the cell at line position i:
      EXACT          -> nothing (the confirmed letter covers it)
      ROW            -> horizontal line: required + not at i
                        vertical line:   forbidden
      COLUMN         -> the same with the axes swapped
      ROW_AND_COLUMN -> required + not at i, whichever axis is filtered
      MISPLACED      -> forbidden in this line
      ABSENT         -> collected board-wide below
    """
    direction = Direction(direction)
    cells = board.line(direction, index)

    required = set()
    # Absent letters are forbidden in every line, wherever they were painted.
    forbidden = set(board.absent_letters())
    forbidden_at = set()

    own_axis = HintKind.ROW if direction is Direction.HORIZONTAL else HintKind.COLUMN
    other_axis = HintKind.COLUMN if direction is Direction.HORIZONTAL else HintKind.ROW

    for i, cell in enumerate(cells):
        for hint in cell.hints:
            if hint.kind is own_axis or hint.kind is HintKind.ROW_AND_COLUMN:
                required.add(hint.letter)
                forbidden_at.add((i, hint.letter))
            elif hint.kind is other_axis or hint.kind is HintKind.MISPLACED:
                forbidden.add(hint.letter)

    # Cell.letter can be reassigned after construction, so normalize here too.
    required_at = {(i, c.letter.upper()) for i, c in enumerate(cells) if c.letter is not None}

    return FilterSpec(
        required=frozenset(required),
        forbidden=frozenset(forbidden),
        forbidden_at=frozenset(forbidden_at),
        required_at=frozenset(required_at),
    )


def matches(word: str, spec: FilterSpec) -> bool:
    """True if `word` satisfies every clause of `spec` (case-insensitive)."""
    w = word.strip().upper()
    n = len(w)

    for i, ch in spec.required_at:
        if i >= n or w[i] != ch:
            return False
    for ch in spec.required:
        if ch not in w:
            return False
    for i, ch in spec.forbidden_at:
        if i < n and w[i] == ch:
            return False
    for ch in spec.forbidden:
        if ch in w:
            return False
    return True


def filter_candidates(words: Iterable[str], spec: FilterSpec) -> List[str]:
    """
    Keep only words consistent with `spec`.

    Returns:
      List[str] of survivors, order preserved as in `words`. An empty list
      (never an exception) when nothing survives.
    """
    return [w for w in words if matches(w, spec)]

"""
Lookahead feasibility check for a candidate word.

A word can pass its own line's filter and still leave one of the crossing
lines with no possible word. Strategy, per candidate:

  1) Write the word into a copy of the board.
  2) Full board -> feasible.
  3) For every index in (0, 2, 4), filter the corpus against the line on the
     opposite axis. Any empty line -> infeasible.
  4) Ask the selector for the best guess on the simulated board at the next
     index (one guess fewer remaining). No guess -> infeasible. Otherwise
     continue from 1) with that guess.

The loop is capped at `iterations` insertions and by the simulated guesses
remaining. Hitting a cap without disproof counts as feasible: step 3 already
rules out the immediate dead ends, what slips through is a board that only
jams further ahead than the cap.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .board import Direction, GameState, is_board_complete, next_guess_index
from .constraints import build_filter, matches
from .simulation import insert_word
from .validation import GUESS_SEQUENCE

logger = logging.getLogger(__name__)

# One full play-through of both axes.
MAX_LOOKAHEAD_ITERATIONS = 6

# select(state, corpus, budget) -> object with .word and .direction, or None
Selector = Callable[[GameState, Sequence[str], int], Optional[object]]


def opposite_lines_fillable(state: GameState, direction: Direction, corpus: Sequence[str]) -> bool:
    """True if each of the three lines crossing `direction` still has a candidate."""
    other = Direction(direction).flip()
    for index in GUESS_SEQUENCE:
        spec = build_filter(state.board, other, index)
        if not any(matches(w, spec) for w in corpus):
            logger.debug("%s line %d has no candidates left", other.value, index)
            return False
    return True


def is_feasible(
        state: GameState,
        word: str,
        direction: Direction,
        corpus: Sequence[str],
        *,
        iterations: int = MAX_LOOKAHEAD_ITERATIONS,
        select: Selector,
) -> bool:
    """
    Simulate playing `word` (then the selector's own follow-ups) and report
    whether the board can still be completed.

    `select` is the guess selector; it is handed a strictly smaller budget on
    every step so the mutual recursion always terminates.
    """
    board = state.board
    index = state.next_guess_index
    remaining = state.guesses_remaining
    current_word, current_dir = word, Direction(direction)

    for step in range(iterations):
        board = insert_word(board, current_dir, index, current_word)
        if is_board_complete(board):
            return True

        sim = GameState(
            guesses_remaining=max(remaining - 1, 0),
            next_guess_index=next_guess_index(index),
            language=state.language,
            board=board,
        )
        if not opposite_lines_fillable(sim, current_dir, corpus):
            logger.debug("reject %r: %s placement blocks a crossing line", word, Direction(direction).value)
            return False

        remaining -= 1
        if remaining <= 0:
            break

        nxt = select(sim, corpus, iterations - step - 1)
        if nxt is None:
            logger.debug("reject %r: simulated board has no follow-up guess", word)
            return False

        index = sim.next_guess_index
        current_word = nxt.word
        current_dir = Direction(nxt.direction)

    return True

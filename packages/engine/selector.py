"""
Guess selection for a Squardle board.

compute_next_guess(state) is the engine's public entry point:

  - virgin board   -> best-scoring word of the whole corpus, no direction
  - complete board -> None (nothing left to guess)
  - otherwise      -> filter the current row and column, drop words the
                      lookahead proves infeasible, and return the best
                      survivor tagged with its direction (None if none)

The lookahead itself calls back into _select on simulated boards with a
shrinking budget; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from packages.datasets.corpus import load_words

from .board import Direction, GameState, is_board_complete
from .constraints import build_filter, filter_candidates
from .feasibility import MAX_LOOKAHEAD_ITERATIONS, is_feasible
from .scoring import WordScore, score_words

logger = logging.getLogger(__name__)

# Which corpus list the selector draws from when none is supplied.
DEFAULT_CATEGORY = "answers"


@dataclass(frozen=True)
class Guess(WordScore):
    direction: Optional[Direction] = None


def _best_in_direction(
        state: GameState,
        words: List[str],
        direction: Direction,
        corpus: Sequence[str],
        budget: int,
) -> Optional[WordScore]:
    """Highest-ranked word of `words` that survives the lookahead."""
    ranked = score_words(words)
    if not ranked:
        return None
    # Every candidate is identical at every position: nothing to simulate.
    if ranked[0].confidence == 1.0 or budget <= 0:
        return ranked[0]

    for ws in ranked:
        if is_feasible(state, ws.word, direction, corpus, iterations=budget, select=_select):
            return ws
    logger.debug("no feasible %s word at index %d", direction.value, state.next_guess_index)
    return None


def _select(state: GameState, corpus: Sequence[str], budget: int) -> Optional[Guess]:
    board = state.board
    index = state.next_guess_index

    candidates = {
        d: filter_candidates(corpus, build_filter(board, d, index))
        for d in (Direction.HORIZONTAL, Direction.VERTICAL)
    }
    if not candidates[Direction.HORIZONTAL] or not candidates[Direction.VERTICAL]:
        logger.info(
            "dead end at index %d: %d horizontal / %d vertical candidates",
            index, len(candidates[Direction.HORIZONTAL]), len(candidates[Direction.VERTICAL]),
        )
        return None

    best: Dict[Direction, Optional[WordScore]] = {}

    def best_for(d: Direction) -> Optional[WordScore]:
        if d not in best:
            best[d] = _best_in_direction(state, candidates[d], d, corpus, budget)
        return best[d]

    # Prefer the line with more unknown letters: it narrows the board fastest.
    h_missing = board.missing_letters(Direction.HORIZONTAL, index)
    v_missing = board.missing_letters(Direction.VERTICAL, index)
    if h_missing != v_missing:
        preferred = Direction.HORIZONTAL if h_missing > v_missing else Direction.VERTICAL
        ws = best_for(preferred)
        if ws is not None:
            return Guess(ws.word, ws.confidence, preferred)

    h = best_for(Direction.HORIZONTAL)
    v = best_for(Direction.VERTICAL)
    if h is None and v is None:
        return None
    if v is None or (h is not None and h.confidence >= v.confidence):
        return Guess(h.word, h.confidence, Direction.HORIZONTAL)
    return Guess(v.word, v.confidence, Direction.VERTICAL)


def compute_next_guess(
        state: GameState,
        corpus: Optional[Sequence[str]] = None,
        *,
        lookahead: int = MAX_LOOKAHEAD_ITERATIONS,
        category: str = DEFAULT_CATEGORY,
) -> Optional[Guess]:
    """
    Propose the next word to type.

    Args:
      state     : current game snapshot (never mutated)
      corpus    : candidate words; defaults to the packaged list for
                  state.language / `category`
      lookahead : max simulated insertions per candidate (0 disables it)

    Returns:
      Guess(word, confidence, direction), or None when the board is complete
      or no word can keep it solvable.
    """
    if corpus is None:
        corpus = load_words(state.language, category)

    if not state.board.has_hints():
        ranked = score_words(corpus)
        if not ranked:
            return None
        return Guess(ranked[0].word, ranked[0].confidence, None)

    if is_board_complete(state.board):
        return None

    return _select(state, corpus, lookahead)

"""
Harness core primitives.

- solve_state: run the engine on one snapshot and time it.
- solve_batch: run many snapshots in sequence.
- play_game:   the autoplay loop (read board -> guess -> type) until the
               board is complete or the game can no longer progress.

The board reader and the word typer are plain callables supplied by the
caller, so this module never touches a browser or the network and can be
reused by a CLI, a notebook, or a service without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from packages.engine import GameState, compute_next_guess, is_board_complete
from packages.engine.feasibility import MAX_LOOKAHEAD_ITERATIONS
from packages.engine.selector import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

# Safety limit for the autoplay loop; a Squardle game never needs this many.
MAX_MOVES = 20


def solve_state(
        state: GameState,
        corpus: Optional[Sequence[str]] = None,
        *,
        lookahead: int = MAX_LOOKAHEAD_ITERATIONS,
        category: str = DEFAULT_CATEGORY,
) -> Dict:
    """
    Ask the engine for the next guess on `state`.

    Returns:
        dict with keys:
            word (str | None), confidence (float | None), direction (str | None),
            language, next_guess_index, guesses_remaining, complete (bool), time_ms
    """
    t0 = time.perf_counter_ns()
    guess = compute_next_guess(state, corpus, lookahead=lookahead, category=category)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "word": guess.word if guess else None,
        "confidence": guess.confidence if guess else None,
        "direction": guess.direction.value if guess and guess.direction else None,
        "language": state.language,
        "next_guess_index": state.next_guess_index,
        "guesses_remaining": state.guesses_remaining,
        "complete": is_board_complete(state.board),
        "time_ms": dt,
    }


def solve_batch(
        states: Iterable[GameState],
        corpus: Optional[Sequence[str]] = None,
        **kwargs,
) -> List[Dict]:
    return [solve_state(s, corpus, **kwargs) for s in states]


def play_game(
        read_state: Callable[[], GameState],
        submit_word: Callable[[str], None],
        *,
        corpus: Optional[Sequence[str]] = None,
        max_moves: int = MAX_MOVES,
        lookahead: int = MAX_LOOKAHEAD_ITERATIONS,
) -> Dict:
    """
    Keep guessing until the board is complete or the game is stuck.

    Stops when:
      - the board is complete            -> success
      - no guesses remain                -> failure
      - the engine has no valid guess    -> failure
      - `max_moves` words were submitted -> failure

    Returns:
        dict with keys: success (bool), reason (str), moves (int),
        history (list of submitted words), final_state (GameState)
    """
    history: List[str] = []
    state = read_state()

    while True:
        if is_board_complete(state.board):
            logger.info("board complete after %d move(s)", len(history))
            return _outcome(True, "complete", history, state)
        if state.guesses_remaining <= 0:
            return _outcome(False, "out_of_guesses", history, state)
        if len(history) >= max_moves:
            return _outcome(False, "max_moves", history, state)

        guess = compute_next_guess(state, corpus, lookahead=lookahead)
        if guess is None:
            logger.info("no valid next guess; stopping")
            return _outcome(False, "no_guess", history, state)

        logger.debug("move %d: %s (%.0f%%)", len(history) + 1, guess.word, guess.confidence * 100)
        submit_word(guess.word)
        history.append(guess.word)
        state = read_state()


def _outcome(success: bool, reason: str, history: List[str], state: GameState) -> Dict:
    return {
        "success": success,
        "reason": reason,
        "moves": len(history),
        "history": list(history),
        "final_state": state,
    }

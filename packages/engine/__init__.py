from .hints import Hint, HintKind
from .board import Board, Cell, Direction, GameState, is_board_complete, next_guess_index
from .constraints import FilterSpec, build_filter, filter_candidates
from .scoring import WordScore, score_words
from .simulation import BoardConflictError, insert_word
from .feasibility import is_feasible
from .selector import Guess, compute_next_guess

__all__ = [
    "Hint", "HintKind",
    "Board", "Cell", "Direction", "GameState", "is_board_complete", "next_guess_index",
    "FilterSpec", "build_filter", "filter_candidates",
    "WordScore", "score_words",
    "BoardConflictError", "insert_word",
    "is_feasible",
    "Guess", "compute_next_guess",
]

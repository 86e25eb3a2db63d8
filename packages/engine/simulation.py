"""
Board simulator: write a word into a line of a copied board.
"""

from __future__ import annotations

from .board import Board, Direction
from .validation import check_guess_index, check_word


class BoardConflictError(ValueError):
    """A simulated word disagrees with a letter already confirmed on the board."""


def insert_word(board: Board, direction: Direction, index: int, word: str) -> Board:
    """
    Return a new board with `word` written along line `index`.

    The input board is left untouched. Any slot that already holds a
    confirmed letter must receive that same letter; the candidate filter
    guarantees this for every word it lets through, so a mismatch means the
    caller skipped it and raises BoardConflictError.
    """
    check_guess_index(index)
    letters = check_word(word)

    out = board.copy()
    for i, cell in enumerate(out.line(direction, index)):
        if cell.letter is not None and cell.letter != letters[i]:
            raise BoardConflictError(
                f"Cannot place {word!r} {Direction(direction).value} at {index}: "
                f"cell ({cell.x},{cell.y}) already holds {cell.letter!r}, got {letters[i]!r}"
            )
        cell.letter = letters[i]
    return out

"""
Invariant checks shared by the engine.

A failure here is never a game outcome: it means the caller handed the engine
corrupted state (bad guess index, wrong-length word, mixed-length candidate
set). These raise ValueError and are not caught anywhere inside the engine.
"""

from __future__ import annotations

from typing import Iterable

# Squardle lines are always five letters long.
WORD_LENGTH = 5

# Rows / columns that can be guessed, in the order the game cycles through them.
GUESS_SEQUENCE = (0, 2, 4)


def check_guess_index(index: int) -> int:
    """Return `index` unchanged if it is one of the guessable lines."""
    if index not in GUESS_SEQUENCE:
        raise ValueError(f"Invalid guess index: {index!r} (expected one of {GUESS_SEQUENCE})")
    return index


def check_word(word: str, N: int = WORD_LENGTH) -> str:
    """
    Return `word` uppercased if it is an N-letter alphabetic token.

    Unlike a guess validator this does not consult a dictionary; it only
    guards the board against words that cannot physically fit a line.
    """
    if not isinstance(word, str):
        raise ValueError(f"Word must be a string; got {type(word).__name__}")
    w = word.strip()
    if len(w) != N or not w.isalpha():
        raise ValueError(f"Word must be {N} alphabetic letters; got {word!r}")
    return w.upper()


def common_length(words: Iterable[str]) -> int:
    """
    Length shared by every word in `words` (0 for an empty input).
    Mixed lengths are a caller bug and raise ValueError.
    """
    lengths = {len(w) for w in words}
    if len(lengths) > 1:
        raise ValueError(f"Words are not all the same length: {sorted(lengths)}")
    return lengths.pop() if lengths else 0

"""
Positional letter-frequency scoring of a candidate set.

Idea:
  Build per-position histograms over the candidates, then score every word as
  sum(counts[pos][word[pos]]). Normalizing by (len(candidates) * N) keeps the
  confidence in [0, 1]; it reaches 1.0 only when every candidate has the same
  letter at every position (in particular, when a single candidate remains).

"Centroid" words score highest, which favors guesses that agree with most of
the remaining solution space without computing a full entropy.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from .validation import common_length


@dataclass(frozen=True)
class WordScore:
    word: str
    confidence: float


def _build_pos_counts(words: Sequence[str], N: int) -> List[Counter]:
    counts = [Counter() for _ in range(N)]
    for w in words:
        for i, ch in enumerate(w.upper()):
            counts[i][ch] += 1
    return counts


def score_words(words: Sequence[str]) -> List[WordScore]:
    """
    Rank `words` by confidence, best first.

    Ties keep the input order (sorted() is stable). Raises ValueError when the
    words do not all share one length.
    """
    if not words:
        return []

    N = common_length(words)
    if N == 0:
        raise ValueError("Cannot score empty words")
    pos_counts = _build_pos_counts(words, N)
    total = len(words) * N

    scored = [
        WordScore(w, sum(pos_counts[i][ch] for i, ch in enumerate(w.upper())) / total)
        for w in words
    ]
    return sorted(scored, key=lambda s: s.confidence, reverse=True)

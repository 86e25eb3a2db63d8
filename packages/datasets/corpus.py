"""
Packaged word corpus, one list per (language, category).

Layout:
    packages/datasets/data/<language>/<category>_5.txt

  - "answers" : curated list of likely solutions
  - "all"     : full dictionary (superset of answers)

Files are UTF-8, one lowercase word per line. Lists are loaded once and
returned as tuples so callers cannot mutate the shared copy.

The packaged lists are samples (a few hundred words per language), far
smaller than the live game's dictionaries. Regenerate them from a word-list
page with:
    python -m script.fetch_wordlist --url <page> --language en --category answers
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

DATA_DIR = Path(__file__).resolve().parent / "data"
CATEGORIES = ("answers", "all")
WORD_LENGTH = 5


class UnsupportedLanguageError(ValueError):
    """No word list is packaged for the requested language."""


def supported_languages() -> List[str]:
    """Languages with a packaged corpus (sorted for stable CLI help)."""
    return sorted(p.name for p in DATA_DIR.iterdir() if p.is_dir())


def corpus_path(language: str, category: str = "answers") -> Path:
    """
    Path of the list for `language` / `category`.

    Raises UnsupportedLanguageError for an unknown language (an empty list
    would be indistinguishable from "no candidates") and ValueError for an
    unknown category.
    """
    if category not in CATEGORIES:
        raise ValueError(f"Unknown word category: {category!r}. Available: {list(CATEGORIES)}")
    lang = (language or "").strip().lower()
    if lang not in supported_languages():
        raise UnsupportedLanguageError(
            f"Language {language!r} not supported. Available: {supported_languages()}")
    return DATA_DIR / lang / f"{category}_{WORD_LENGTH}.txt"


@lru_cache(maxsize=None)
def load_words(language: str, category: str = "answers") -> Tuple[str, ...]:
    """
    Read a packaged list, normalized to lowercase, blanks dropped.
    """
    p = corpus_path(language, category)
    return tuple(w.strip().lower() for w in p.read_text(encoding="utf-8").splitlines() if w.strip())

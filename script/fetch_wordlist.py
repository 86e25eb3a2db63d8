"""
Scrape a page of words and write a clean 5-letter corpus list.

What it does:
- Downloads the page.
- Extracts every 5-letter alphabetic token from the visible text.
- Lowercases, strips accents (the game board has no diacritics),
  de-duplicates while preserving page order, and writes to the corpus layout.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words \
        --language en --category all
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --language pt-br --sort
"""

import argparse
import re
import unicodedata
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.corpus import CATEGORIES, DATA_DIR, WORD_LENGTH

WORD_RE = re.compile(r"\b\w+\b", re.UNICODE)


def strip_accents(word: str) -> str:
    return "".join(ch for ch in unicodedata.normalize("NFKD", word) if not unicodedata.combining(ch))


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, N: int = WORD_LENGTH) -> list[str]:
    tokens = (strip_accents(t).lower() for t in WORD_RE.findall(text))
    return unique_preserve_order(t for t in tokens if len(t) == N and t.isascii() and t.isalpha())


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    return extract_words(soup.get_text("\n", strip=True))


def main():
    ap = argparse.ArgumentParser(description="Fetch a 5-letter word list into the corpus")
    ap.add_argument("--url", required=True)
    ap.add_argument("--language", required=True, help="corpus directory name, e.g. en or pt-br")
    ap.add_argument("--category", choices=CATEGORIES, default="all")
    ap.add_argument("--out", help="output path (default: packages/datasets/data/<language>/<category>_5.txt)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping page order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    out = Path(args.out) if args.out else DATA_DIR / args.language / f"{args.category}_{WORD_LENGTH}.txt"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {out}")


if __name__ == "__main__":
    main()

"""
Corpus validator.

What this module does:
- Validate the packaged pair of lists for one language: answers_5.txt (curated
  solutions) and all_5.txt (full dictionary).
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that answers ⊆ all.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_corpus, pretty_summary
    print(pretty_summary(validate_corpus("en")))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .corpus import WORD_LENGTH, corpus_path


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    category: str        # "answers" or "all"
    path: str
    exists: bool
    count: int           # valid words after cleaning
    unique_count: int
    invalid_lines: int
    sha256: str          # of the raw bytes; empty if the file is missing


@dataclass
class CorpusReport:
    language: str
    answers: FileReport
    all: FileReport
    answers_subset_all: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _file_report(category: str, path: Path) -> Tuple[FileReport, List[str]]:
    if not path.exists():
        return FileReport(category, str(path), False, 0, 0, 0, ""), []
    words, invalid = _load_and_check(path)
    rep = FileReport(
        category=category,
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
    )
    return rep, words


def validate_corpus(language: str) -> Dict:
    """
    Validate both lists of `language`.

    Raises UnsupportedLanguageError (via corpus_path) for an unknown language;
    every other problem is reported in `issues` and flips `passed` to False.
    """
    issues: List[str] = []

    ans_rep, answers = _file_report("answers", corpus_path(language, "answers"))
    all_rep, words = _file_report("all", corpus_path(language, "all"))

    for rep in (ans_rep, all_rep):
        if not rep.exists:
            issues.append(f"{rep.category} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{rep.category} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{rep.category} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{rep.category} contains duplicate lines")

    missing = sorted(set(answers) - set(words))
    subset_ok = ans_rep.exists and all_rep.exists and not missing
    if missing:
        issues.append(f"answers not subset of all (e.g., {missing[:5]})")

    passed = subset_ok and not issues
    return asdict(CorpusReport(language, ans_rep, all_rep, subset_ok, passed, issues))


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.:
        lang=en | answers=476 (uniq=476, sha=abc123...) | all=741 (...) | answers⊆all=True | OK
    """
    a = report["answers"]
    b = report["all"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"lang={report['language']} "
        f"| answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| all={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆all={report['answers_subset_all']} | {status}"
    )

# apps/cli/run.py
"""
CLI entry point for solving Squardle board snapshots.

This script:
  1) Loads every snapshot JSON given on the command line.
  2) Validates the word corpus of each language the snapshots use (counts +
     SHA, answers ⊆ all).
  3) Asks the engine for the next guess on each, with a live progress
     indicator, prints the suggestions and writes:
       - CSV:  one row per snapshot (word, direction, confidence, timing)
       - JSON: manifest with config, corpus report, git commit, etc.

Usage:
    python -m apps.cli.run snapshots/*.json --outdir reports
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from packages.datasets import load_words, pretty_summary, supported_languages, validate_corpus
from packages.engine import GameState
from packages.engine.feasibility import MAX_LOOKAHEAD_ITERATIONS
from packages.harness import load_state, solve_state
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest


def _load_all(paths: List[Path], language: str | None) -> List[Tuple[Path, GameState]]:
    """
    Read every snapshot up front, applying the --language override. Invariant
    errors (corrupt board, unknown hint type) propagate and abort the run.
    """
    loaded = []
    for path in paths:
        state = load_state(path)
        if language:
            state.language = language
        loaded.append((path, state))
    return loaded


def _validate_languages(states: List[GameState]) -> Dict[str, Dict]:
    """Corpus report for each distinct language among `states`, printed as it goes."""
    reports = {}
    for lang in sorted({s.language.strip().lower() for s in states}):
        reports[lang] = validate_corpus(lang)
        print(pretty_summary(reports[lang]))
    return reports


def _solve_one(path: Path, state: GameState, *, category: str, lookahead: int) -> Dict:
    corpus = load_words(state.language, category)
    r = solve_state(state, corpus, lookahead=lookahead, category=category)
    r["snapshot"] = str(path)
    return r


def _describe(r: Dict) -> str:
    if r["word"] is None:
        status = "board complete" if r["complete"] else "no guess available"
        return f"{r['snapshot']}: {status}"
    direction = r["direction"] or "any"
    return (f"{r['snapshot']}: {r['word'].upper()} ({direction}, "
            f"confidence {r['confidence'] * 100:.0f}%, {r['time_ms']:.1f} ms)")


def main():
    """
    Parse CLI args, validate the corpus, solve with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="squardle-solver: suggest the next guess")
    ap.add_argument("snapshots", nargs="+", help="board snapshot JSON file(s)")
    ap.add_argument("--language", choices=supported_languages(),
                    help="override the language recorded in the snapshots")
    ap.add_argument("--category", choices=["answers", "all"], default="answers",
                    help="word list to draw candidates from")
    ap.add_argument("--lookahead", type=int, default=MAX_LOOKAHEAD_ITERATIONS,
                    help="max simulated insertions per candidate (0 disables the lookahead)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Load snapshots, then validate the corpus of every language they use
    loaded = _load_all([Path(p) for p in args.snapshots], args.language)
    reports = _validate_languages([s for _, s in loaded])
    total = len(loaded)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results: List[Dict] = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(loaded, ncols=80, desc="Solving", unit="board") if mode == "bar" else loaded

    # 3) Solve with live progress
    for idx, (path, state) in enumerate(iterator, 1):
        results.append(_solve_one(path, state, category=args.category, lookahead=args.lookahead))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    for r in results:
        print(_describe(r))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "corpus": reports,
        "num_snapshots": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

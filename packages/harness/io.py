"""
I/O utilities for solver runs.

Responsibilities:
- write_csv:      one row per solved snapshot.
- write_manifest: dump a JSON manifest with config, corpus report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

CSV_FIELDS = [
    "snapshot", "language", "next_guess_index", "guesses_remaining", "complete",
    "word", "direction", "confidence", "time_ms",
]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize solve results (see harness.core.solve_state) to CSV.
    Missing keys are written as empty cells; confidence and time are rounded.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        w.writeheader()
        for r in results:
            row = {k: r.get(k, "") for k in CSV_FIELDS}
            if r.get("confidence") is not None:
                row["confidence"] = round(float(r["confidence"]), 6)
            if r.get("time_ms") is not None:
                row["time_ms"] = round(float(r["time_ms"]), 3)
            for k in ("word", "direction"):
                if row[k] is None:
                    row[k] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest. Typical keys:
      run_id, git_commit, config (CLI args), corpus (validate_corpus output),
      num_snapshots
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the current checkout, or 'unknown'."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

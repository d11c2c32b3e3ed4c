"""
I/O utilities for replayed sessions.

Responsibilities:
- write_csv:      flatten per-submission records into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, hashes, and final session state.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import logging
import subprocess
import datetime as dt

logger = logging.getLogger(__name__)

CSV_FIELDS = ["turn", "root", "input", "word", "verdict", "penalized",
              "title", "message", "score"]


def write_csv(records: List[Dict], path: str) -> str:
    """
    Serialize replay records to CSV.

    Each record is a dict with the CSV_FIELDS keys (missing keys are written
    as empty cells). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        w.writeheader()
        for r in records:
            w.writerow({k: r.get(k, "") for k in CSV_FIELDS})

    logger.debug("Wrote %d rows to %s", len(records), p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlists: output of datasets.validate_wordlists(...)
      - session: GameSession.snapshot()
      - possible_words: number of derivable dictionary words for the root
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
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

# apps/cli/replay.py
"""
Replay a file of submissions through one session.

This script:
  1) Validates the word lists (prints counts + SHA, checks start ⊆ dictionary).
  2) Starts a session (random or fixed root) with the requested dictionary.
  3) Submits every line of --words in order with a progress bar and writes:
       - CSV:  one row per judged submission
       - JSON: manifest with config, word-list report, final session state
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlists, pretty_summary, read_lines, read_words
from packages.engine import max_score
from packages.game import GameSession, StartWordsError, load_start_words
from packages.harness import replay_words
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

from apps.cli._common import add_common_args, setup_logging, build_dictionary, build_settings


def possible_words(args, root: str):
    """Best possible score for `root`, or None when the game is not judged by the local word list."""
    if args.dictionary != "wordlist":
        return None
    return max_score(root, read_words(args.dictionary_path), min_length=args.min_length)


def main():
    ap = argparse.ArgumentParser(description="wordscramble: replay submissions from a file")
    add_common_args(ap)
    ap.add_argument("--words", required=True, help="file with one submission per line")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    args = ap.parse_args()
    setup_logging(args.log_level)

    # 1) Word-list report
    rep = validate_wordlists(args.start_words, args.dictionary_path, min_length=args.min_length)
    print(pretty_summary(rep))

    # 2) Session
    try:
        start_words = load_start_words(args.start_words)
    except StartWordsError as e:
        sys.exit(f"fatal: {e}")
    session = GameSession(start_words, build_dictionary(args), seed=args.seed,
                          settings=build_settings(args))
    if args.root:
        session.start(args.root)

    # 3) Replay
    inputs = read_lines(args.words)
    iterator = tqdm(inputs, ncols=80, desc="Replaying", unit="word", disable=args.no_progress)
    records = replay_words(session, iterator)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(records, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "session": session.snapshot(),
        "possible_words": possible_words(args, session.root),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Root: {session.root_word} | score: {session.score} | accepted: {len(session.used_words)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

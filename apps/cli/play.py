# apps/cli/play.py
"""
Interactive terminal game.

Shows the root word, the score and the words found so far (each with its
letter count), then reads one word per line. Commands:
  :restart  new root word, score back to 0
  :hint     how many dictionary words are still left to find
  :quit     leave (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import sys

from packages.datasets import read_words
from packages.dictionary import DictionaryUnavailableError
from packages.engine import letter_count, Vocabulary
from packages.game import GameSession, StartWordsError, load_start_words

from apps.cli._common import add_common_args, setup_logging, build_dictionary, build_settings


def render(session: GameSession) -> None:
    print()
    print(f"== {session.root_word} ==   score: {session.score}")
    for w in session.used_words:
        print(f"  ({letter_count(w)}) {w.capitalize()}")


def main():
    ap = argparse.ArgumentParser(description="wordscramble: make words from the root word")
    add_common_args(ap)
    args = ap.parse_args()
    setup_logging(args.log_level)

    try:
        start_words = load_start_words(args.start_words)
    except StartWordsError as e:
        sys.exit(f"fatal: {e}")

    dictionary = build_dictionary(args)
    settings = build_settings(args)
    session = GameSession(start_words, dictionary, seed=args.seed, settings=settings)
    if args.root:
        session.start(args.root)

    # Hints only make sense against a local word list
    vocab = Vocabulary(read_words(args.dictionary_path)) if args.dictionary == "wordlist" else None

    render(session)
    for line in sys.stdin:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":restart":
            session.restart()
            render(session)
            continue
        if cmd == ":hint":
            if vocab is None:
                print("hints need the wordlist dictionary")
            else:
                possible = vocab.derivable_from(session.root, min_length=settings.min_word_length)
                left = len(set(possible) - set(session.used_words))
                print(f"{left} word(s) left to find")
            continue

        try:
            result = session.submit(cmd)
        except DictionaryUnavailableError as e:
            print(f"dictionary unavailable, try again: {e}")
            continue
        if result is None:
            continue
        if not result.accepted:
            print(f"{result.title}: {result.message}")
        render(session)

    print(f"Final score: {session.score}")


if __name__ == "__main__":
    main()

"""Shared argparse flags and startup for the wordscramble CLIs."""

from __future__ import annotations

import argparse
import logging

from packages.datasets import START_WORDS_PATH, DICTIONARY_PATH
from packages.dictionary import create_dictionary, get_dictionary_ids
from packages.game import GameSettings


def add_common_args(ap: argparse.ArgumentParser) -> None:
    dictionary_choices = ", ".join(get_dictionary_ids())
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to the root-word list (one word per line)")
    ap.add_argument("--dictionary", default="wordlist",
                    help=f"dictionary id (one of: {dictionary_choices})")
    ap.add_argument("--dictionary-path", default=str(DICTIONARY_PATH),
                    help="word list used by the 'wordlist' dictionary")
    ap.add_argument("--root", help="fixed root word instead of a random pick")
    ap.add_argument("--min-length", type=int, default=GameSettings.min_word_length,
                    help="shortest acceptable word")
    ap.add_argument("--seed", type=int, help="RNG seed for the root-word pick")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_dictionary(args):
    if args.dictionary == "wordlist":
        return create_dictionary("wordlist", path=args.dictionary_path)
    return create_dictionary(args.dictionary)


def build_settings(args) -> GameSettings:
    return GameSettings(min_word_length=args.min_length)

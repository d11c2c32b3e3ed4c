"""
Word-list dictionary.

Strategy:
  - A word is real iff its lowercase form is in a fixed set.
  - The set comes from a newline-delimited file (one word per line) or from
    any iterable of strings, which makes it a deterministic stand-in for a
    platform spell-checker in tests.

Notes:
  - Loaded once; lookups are O(1).
  - Only English is bundled.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import read_lines
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "datasets" / "data" / "dictionary.txt"


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Iterable[str] | None = None, *, path: Path | str | None = None):
        if words is None:
            path = Path(path) if path is not None else DEFAULT_PATH
            words = read_lines(path)
            source = str(path)
        else:
            source = "<memory>"
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        logger.debug("Loaded %d dictionary words from %s", len(self.words), source)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self.words

    def is_real_word(self, word: str, language: str = "en") -> bool:
        self.check_language(language)
        return word in self

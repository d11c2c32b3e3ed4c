"""
Enumerate every dictionary word that can be made from a root.

Each vocabulary word becomes a row of 26 letter counts; a word is derivable
iff its row is element-wise <= the root's count vector. The matrix is built
once per Vocabulary and reused across roots.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .letters import normalize

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def letter_vector(word: str) -> np.ndarray:
    """Counts of a..z in `word`; non a-z characters are ignored."""
    v = np.zeros(len(ALPHABET), dtype=np.int16)
    for ch in normalize(word):
        i = _INDEX.get(ch)
        if i is not None:
            v[i] += 1
    return v


class Vocabulary:
    """Lowercase a-z words with their precomputed letter-count matrix."""

    def __init__(self, words: Iterable[str]):
        seen = set()
        self.words: List[str] = []
        for w in words:
            w = normalize(w)
            if w and w.isalpha() and w.isascii() and w not in seen:
                seen.add(w)
                self.words.append(w)
        if self.words:
            self.counts = np.stack([letter_vector(w) for w in self.words])
        else:
            self.counts = np.zeros((0, len(ALPHABET)), dtype=np.int16)
        self.lengths = np.array([len(w) for w in self.words], dtype=np.int32)

    def __len__(self) -> int:
        return len(self.words)

    def derivable_from(self, root: str, min_length: int = 3) -> List[str]:
        root_n = normalize(root)
        target = letter_vector(root_n)
        mask = np.all(self.counts <= target, axis=1) & (self.lengths >= min_length)
        return [self.words[i] for i in np.flatnonzero(mask) if self.words[i] != root_n]


def derivable_words(root: str, vocabulary: Iterable[str] | Vocabulary,
                    min_length: int = 3) -> List[str]:
    """
    Return every vocabulary word (length >= min_length, not the root itself)
    that can be spelled from `root`, in vocabulary order.
    """
    vocab = vocabulary if isinstance(vocabulary, Vocabulary) else Vocabulary(vocabulary)
    return vocab.derivable_from(root, min_length=min_length)


def max_score(root: str, vocabulary: Iterable[str] | Vocabulary, min_length: int = 3) -> int:
    """Best possible score for a root: one point per derivable word."""
    return len(derivable_words(root, vocabulary, min_length=min_length))

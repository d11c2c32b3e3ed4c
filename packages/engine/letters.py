"""
Letter-multiset helpers for a single (word, root) pair.

Conventions:
  - words are compared in their normalized form (stripped, lowercase)
  - the root is treated as a multiset of characters: each letter of the
    candidate consumes exactly one instance from the root

This is NOT a substring check. Order is irrelevant, counts are not:
  is_derivable("silent", "listen") -> True
  is_derivable("ooo", "book")      -> False  (only two o's available)
"""

from collections import Counter


def normalize(word: str) -> str:
    """Strip surrounding whitespace and lowercase; the canonical comparison form."""
    return word.strip().lower()


def is_derivable(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled using only the letters of `root`,
    respecting letter multiplicity.

    Examples:
      is_derivable("gum", "Mug")     -> True
      is_derivable("aliens", "listen") -> False  ('a' is not in the root)
    """
    word = normalize(word)
    remaining = Counter(normalize(root))

    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def letter_count(word: str) -> int:
    """Number of letters shown next to an accepted word."""
    return len(normalize(word))

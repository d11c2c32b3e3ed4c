"""
Word validation for a single submission.

This module answers the question: "Is this word acceptable right now?"
A candidate is accepted iff it passes, in this order:
  1) originality   : not already in the used-word list
  2) derivability  : spelled from the root's letters (with multiplicity)
  3) real word     : the dictionary oracle says it exists
  4) length        : at least MIN_WORD_LENGTH letters
  5) not the root  : differs from the root word itself

The first failing rule decides the verdict. The validator holds no state;
updating the used-word list and the score is the caller's job (see
packages.game.session).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .letters import is_derivable, normalize

MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


class Verdict(str, Enum):
    ACCEPTED = "accepted"
    ALREADY_USED = "already_used"
    NOT_DERIVABLE = "not_derivable"
    NOT_REAL_WORD = "not_real_word"
    TOO_SHORT = "too_short"
    IS_ROOT_WORD = "is_root_word"

    @property
    def penalized(self) -> bool:
        """Rejections that cost a point. Short words and the root itself are free retries."""
        return self in _PENALIZED


_PENALIZED = frozenset({Verdict.ALREADY_USED, Verdict.NOT_DERIVABLE, Verdict.NOT_REAL_WORD})


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one submission; title/message are shown verbatim to the player."""
    word: str
    verdict: Verdict
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED


def _reject(word: str, verdict: Verdict, title: str, message: str) -> ValidationResult:
    return ValidationResult(word=word, verdict=verdict, title=title, message=message)


def validate_word(
        candidate: str,
        root: str,
        used_words: Iterable[str],
        dictionary,
        *,
        min_length: int = MIN_WORD_LENGTH,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[ValidationResult]:
    """
    Validate `candidate` against `root` and the words already played.

    Args:
      candidate  : raw player input (trimmed and lowercased here)
      root       : the session's root word (any case)
      used_words : words accepted so far in this session
      dictionary : object exposing is_real_word(word, language=...) -> bool
      min_length : shortest acceptable word
      language   : language code passed through to the dictionary

    Returns:
      None if the normalized candidate is empty (nothing to judge),
      otherwise a ValidationResult.
    """
    word = normalize(candidate)
    if not word:
        return None

    if word in {normalize(u) for u in used_words}:
        return _reject(word, Verdict.ALREADY_USED,
                       "Word used already", "Be more original...")

    if not is_derivable(word, root):
        return _reject(word, Verdict.NOT_DERIVABLE,
                       "Word not possible",
                       f"You can't spell that word from '{normalize(root)}'!")

    if not dictionary.is_real_word(word, language=language):
        return _reject(word, Verdict.NOT_REAL_WORD,
                       "Word not recognized", "That isn't a real word?!")

    if len(word) < min_length:
        unit = "letter" if len(word) == 1 else "letters"
        return _reject(word, Verdict.TOO_SHORT,
                       f"Word is only {len(word)} {unit} long",
                       f"Word needs to be longer than {min_length - 1} letters, no cheating")

    if word == normalize(root):
        return _reject(word, Verdict.IS_ROOT_WORD,
                       "Can't use the root word",
                       f"Try words within the root word {root.strip().capitalize()}")

    return ValidationResult(word=word, verdict=Verdict.ACCEPTED)

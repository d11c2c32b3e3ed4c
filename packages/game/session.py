"""
One play-through of the game, from start/restart until the next restart.

- load_start_words: read the root-word resource (fatal if unusable).
- GameSession:      holds root word, used words, score and submission history;
                    submit() runs the validator and applies the scoring policy.

The validator itself is pure; every mutation of session state happens here.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from packages.datasets.io import read_words
from packages.engine import validate_word, ValidationResult, Verdict, normalize
from .settings import GameSettings

logger = logging.getLogger(__name__)


class StartWordsError(RuntimeError):
    """The start-word resource is missing, unreadable or empty; no session can start."""


def load_start_words(path: Path | str) -> List[str]:
    """
    Load the newline-delimited root-word list, dropping blank lines.

    Raises:
      StartWordsError if the file is missing, unreadable or has no words.
    """
    try:
        words = read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise StartWordsError(f"Could not load start words from {path}: {e}") from e
    if not words:
        raise StartWordsError(f"No start words found in {path}")
    logger.info("Loaded %d start words from %s", len(words), path)
    return words


class GameSession:
    """
    Mutable session state around the stateless validator.

    Attributes:
      root_word  : display form of the root (capitalized)
      used_words : accepted words, most recent first
      score      : running score, never below 0
      history    : (word, verdict) per judged submission, oldest first
    """

    def __init__(self, start_words: Sequence[str], dictionary, *,
                 seed: int | None = None, settings: GameSettings | None = None):
        self.start_words = [w for w in (normalize(s) for s in start_words) if w]
        self.dictionary = dictionary
        self.settings = settings or GameSettings()
        self.rng = random.Random(seed)

        self.root_word: str = ""
        self.used_words: List[str] = []
        self.score: int = 0
        self.history: List[Tuple[str, Verdict]] = []
        self.start()

    @property
    def root(self) -> str:
        """Comparison form of the root word."""
        return normalize(self.root_word)

    def start(self, root: str | None = None) -> str:
        """
        Begin a new session: pick a random root (or use `root`), clear used
        words, history and score. Returns the display form of the root.
        """
        if root is None:
            root = self.rng.choice(self.start_words) if self.start_words else self.settings.fallback_root
        root = root.strip()
        if not root:
            raise ValueError("root word must be non-empty")
        self.root_word = root.capitalize()
        self.used_words = []
        self.score = 0
        self.history = []
        logger.info("New session with root word %s", self.root_word)
        return self.root_word

    restart = start

    def submit(self, raw: str) -> Optional[ValidationResult]:
        """
        Judge one player submission and apply its side effects.

        Returns None for empty input (no state change). Accepted words are
        prepended to used_words and earn score_reward; penalized rejections
        cost score_penalty (floor 0); free rejections change nothing.
        """
        result = validate_word(
            raw, self.root_word, self.used_words, self.dictionary,
            min_length=self.settings.min_word_length,
            language=self.settings.language,
        )
        if result is None:
            return None

        if result.accepted:
            self.used_words.insert(0, result.word)
            self.score += self.settings.score_reward
            logger.info("Accepted %r (score=%d)", result.word, self.score)
        else:
            if result.verdict.penalized:
                self.score = max(0, self.score - self.settings.score_penalty)
            logger.info("Rejected %r: %s (score=%d)", result.word, result.verdict.value, self.score)

        self.history.append((result.word, result.verdict))
        return result

    def snapshot(self) -> Dict:
        """Plain-dict view of the session for reports and manifests."""
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
            "submissions": len(self.history),
        }

"""
Game configuration.

Single source of truth for the tunable rules of a session. CLIs build a
GameSettings from their flags; everything else takes the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

from packages.engine.validation import MIN_WORD_LENGTH, DEFAULT_LANGUAGE

SCORE_REWARD = 1    # points for an accepted word
SCORE_PENALTY = 1   # points lost on a penalized rejection (score never drops below 0)
FALLBACK_ROOT = "Mug"


@dataclass(frozen=True)
class GameSettings:
    min_word_length: int = MIN_WORD_LENGTH
    score_reward: int = SCORE_REWARD
    score_penalty: int = SCORE_PENALTY
    language: str = DEFAULT_LANGUAGE
    fallback_root: str = FALLBACK_ROOT

    def __post_init__(self):
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1; got {self.min_word_length}")
        if self.score_reward < 0 or self.score_penalty < 0:
            raise ValueError("score_reward and score_penalty must be non-negative")
        if not self.fallback_root.strip():
            raise ValueError("fallback_root must be non-empty")

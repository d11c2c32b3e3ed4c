"""
Replay primitives.

- replay_words: feed a sequence of raw inputs through a GameSession and
                collect one record per judged submission.

UI-agnostic so the same function serves the replay CLI, notebooks and tests.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from packages.dictionary import DictionaryUnavailableError
from packages.engine import normalize
from packages.game import GameSession

logger = logging.getLogger(__name__)

# Verdict recorded when the dictionary could not be asked; the session is untouched.
UNAVAILABLE = "unavailable"


def replay_words(session: GameSession, inputs: Iterable[str]) -> List[Dict]:
    """
    Submit each input in order. Empty inputs are skipped (no record).

    A DictionaryUnavailableError does not stop the replay: the submission is
    recorded with verdict "unavailable" and the next input is tried.

    Returns:
      list of dicts with keys:
        turn, root, input, word, verdict, penalized, title, message, score
    """
    out: List[Dict] = []
    for raw in inputs:
        try:
            result = session.submit(raw)
        except DictionaryUnavailableError as e:
            logger.warning("Dictionary unavailable for %r: %s", raw, e)
            out.append({
                "turn": len(out) + 1,
                "root": session.root_word,
                "input": raw,
                "word": normalize(raw),
                "verdict": UNAVAILABLE,
                "penalized": False,
                "title": "Dictionary unavailable",
                "message": str(e),
                "score": session.score,
            })
            continue
        if result is None:
            continue
        out.append({
            "turn": len(out) + 1,
            "root": session.root_word,
            "input": raw,
            "word": result.word,
            "verdict": result.verdict.value,
            "penalized": result.verdict.penalized,
            "title": result.title,
            "message": result.message,
            "score": session.score,
        })
    return out

"""
Remote dictionary backed by an HTTP word-lookup API.

The default endpoint is the free dictionaryapi.dev service:
  GET https://api.dictionaryapi.dev/api/v2/entries/<lang>/<word>
    200 -> the word has at least one entry (real)
    404 -> no definitions found (not real)
Anything else (timeouts, 5xx, rate limits) raises DictionaryUnavailableError
so the caller can tell "not a word" apart from "could not ask".
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from .base import BaseDictionary, DictionaryUnavailableError, register

logger = logging.getLogger(__name__)

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"


@register
class RemoteDictionary(BaseDictionary):
    id = "remote"
    name = "Remote API"

    def __init__(self, url: str = API_URL, timeout: float = 5.0,
                 session: requests.Session | None = None):
        self.url = url
        self.timeout = float(timeout)
        self.http = session or requests
        # (language, word) -> verdict
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_real_word(self, word: str, language: str = "en") -> bool:
        self.check_language(language)
        w = word.strip().lower()
        key = (language, w)
        if key in self._cache:
            return self._cache[key]

        url = self.url.format(language=language, word=quote(w))
        try:
            r = self.http.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryUnavailableError(f"lookup failed for {w!r}: {e}") from e

        if r.status_code == 200:
            verdict = True
        elif r.status_code == 404:
            verdict = False
        else:
            raise DictionaryUnavailableError(
                f"unexpected HTTP {r.status_code} looking up {w!r}")

        logger.debug("remote lookup %s -> %s", w, verdict)
        self._cache[key] = verdict
        return verdict

from __future__ import annotations
from typing import Dict, Type

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


class DictionaryUnavailableError(RuntimeError):
    """The dictionary could not give a verdict (network down, bad response, ...)."""


class UnsupportedLanguageError(ValueError):
    """The dictionary has no word list for the requested language."""


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionaries inherit ----
class BaseDictionary:
    id = "base"
    name = "Base"
    languages = ("en",)

    def check_language(self, language: str) -> None:
        if language not in self.languages:
            raise UnsupportedLanguageError(
                f"{self.name} dictionary does not support language {language!r}; "
                f"supported: {list(self.languages)}")

    def is_real_word(self, word: str, language: str = "en") -> bool:
        raise NotImplementedError("Override in subclass")

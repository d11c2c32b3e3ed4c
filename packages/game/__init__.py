from .session import GameSession, StartWordsError, load_start_words
from .settings import GameSettings

__all__ = ["GameSession", "StartWordsError", "load_start_words", "GameSettings"]

from .letters import normalize, is_derivable, letter_count
from .validation import validate_word, ValidationResult, Verdict, MIN_WORD_LENGTH
from .search import derivable_words, max_score, Vocabulary

__all__ = [
    "normalize", "is_derivable", "letter_count",
    "validate_word", "ValidationResult", "Verdict", "MIN_WORD_LENGTH",
    "derivable_words", "max_score", "Vocabulary",
]

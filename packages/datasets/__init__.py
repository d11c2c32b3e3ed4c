from pathlib import Path

from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_lines, unique_preserve_order

DATA_DIR = Path(__file__).resolve().parent / "data"
START_WORDS_PATH = DATA_DIR / "start.txt"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "read_words", "write_lines", "unique_preserve_order",
    "DATA_DIR", "START_WORDS_PATH", "DICTIONARY_PATH",
]

from .strings import reverse, acronym
from .scrabble import scrabble_score, LETTER_VALUES
from .word_count import word_count
from .search import BinarySearch, NOT_FOUND

__all__ = [
    "reverse",
    "acronym",
    "scrabble_score",
    "LETTER_VALUES",
    "word_count",
    "BinarySearch",
    "NOT_FOUND",
]

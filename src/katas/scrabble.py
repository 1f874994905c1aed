from __future__ import annotations
from typing import Dict

_TILE_GROUPS = {
    "AEIOULNRST": 1,
    "DG": 2,
    "BCMP": 3,
    "FHVWY": 4,
    "K": 5,
    "JX": 8,
    "QZ": 10,
}

LETTER_VALUES: Dict[str, int] = {
    letter: points for letters, points in _TILE_GROUPS.items() for letter in letters
}

def scrabble_score(word: str) -> int:
    """Sum of tile values for ``word``, ignoring case.

    Only letters A-Z are scored; anything else raises ``KeyError``.
    """
    return sum(LETTER_VALUES[ch] for ch in word.upper())

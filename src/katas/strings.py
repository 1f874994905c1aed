from __future__ import annotations
import re
from typing import Optional

# words break on whitespace and hyphens only; other punctuation stays in the word
_WORD_SPLIT = re.compile(r"[\s\-]+")

def reverse(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    return s[::-1]

def acronym(phrase: Optional[str]) -> Optional[str]:
    """Uppercased first letter of each word, e.g. "First In, First Out" -> "FIFO".

    Words without any letter are skipped, so a phrase made only of
    punctuation gives "".
    """
    if phrase is None:
        return None
    initials = []
    for word in _WORD_SPLIT.split(phrase):
        first = next((ch for ch in word if ch.isalpha()), None)
        if first is not None:
            initials.append(first.upper())
    return "".join(initials)

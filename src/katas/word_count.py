import re
from collections import Counter
from typing import Dict

SEPARATOR_RE = re.compile(r"[\s,]+")

def word_count(text: str) -> Dict[str, int]:
    """Return token -> frequency map, splitting on whitespace and commas.
    Tokens keep their case, so "Fish" and "fish" are counted separately.
    """
    tokens = [t for t in SEPARATOR_RE.split(text) if t]
    return dict(Counter(tokens))

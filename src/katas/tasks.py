from __future__ import annotations
from typing import Any, Dict, List, Union

# One entry per graded question, in question order
TASKS: List[Dict[str, Any]] = [
    {
        "name": "reverse",
        "question": 1,
        "function": "reverse",
        "signature": "def reverse(s: Optional[str]) -> Optional[str]:",
        "tests": ["tests/test_strings.py"],
        "prompt": "Return s with its characters in reverse order; None stays None.",
    },
    {
        "name": "acronym",
        "question": 2,
        "function": "acronym",
        "signature": "def acronym(phrase: Optional[str]) -> Optional[str]:",
        "tests": ["tests/test_strings.py"],
        "prompt": "Build an uppercase acronym from a phrase; hyphens split words, other punctuation is ignored.",
    },
    {
        "name": "scrabble_score",
        "question": 3,
        "function": "scrabble_score",
        "signature": "def scrabble_score(word: str) -> int:",
        "tests": ["tests/test_scrabble.py"],
        "prompt": "Sum the standard Scrabble tile values of a word, ignoring case.",
    },
    {
        "name": "word_count",
        "question": 4,
        "function": "word_count",
        "signature": "def word_count(text: str) -> dict[str, int]:",
        "tests": ["tests/test_word_count.py"],
        "prompt": "Map each token to its count; whitespace and commas separate tokens.",
    },
    {
        "name": "binary_search",
        "question": 5,
        "function": "BinarySearch",
        "signature": "class BinarySearch(Generic[T]):",
        "tests": ["tests/test_search.py"],
        "prompt": "Find the index of a value in a sorted sequence, or NOT_FOUND.",
    },
]

def task_names() -> List[str]:
    return [t["name"] for t in TASKS]

def get_task(key: Union[str, int]) -> Dict[str, Any]:
    """Look a task up by name or question number ("3" works as well as 3)."""
    if isinstance(key, str) and key.isdigit():
        key = int(key)
    for t in TASKS:
        if t["name"] == key or t["question"] == key:
            return t
    raise KeyError(f"Unknown task: {key!r}")

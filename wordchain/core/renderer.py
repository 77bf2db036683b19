"""Turn a word path into a printable sentence.

WHY: The model stores sentence-initial words lower-cased and without
their terminators. Output needs the opposite: a capital letter at the
start and a period at the end.

RULES:
- Words joined by single spaces
- Exactly one "." appended after the last word
- Only the first character of the result is upper-cased
- Word entries are never modified
"""

from __future__ import annotations

from typing import Sequence

from wordchain.core.model import Word


def render(path: Sequence[Word]) -> str:
    """Join a path into a capitalized, period-terminated sentence."""
    if not path:
        raise ValueError("Cannot render an empty path.")
    sentence = " ".join(word.text for word in path) + "."
    return sentence[:1].upper() + sentence[1:]

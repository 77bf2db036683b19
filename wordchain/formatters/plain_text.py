"""Plain text model listing.

WHY: The quickest way to debug odd sentences is to look at what the
model actually recorded: each word, how often it was seen, whether it
ends sentences, and every follower in the order it was observed.

HOW: A header with the vocabulary size, one line per Word in
first-observed order, then the starter list, then a footer rule.

RULES:
- Word line: "<text> (<occurrences>)", then " (se)" for sentence enders,
  then ": " and each follower text followed by a single space
- Followers and starters keep duplicates and recorded order
- Starter section header carries the starter count
"""

from __future__ import annotations

from typing import List

from wordchain.core.model import Model, Word
from wordchain.formatters.base import BaseDumper

_HEADER = "----------MODEL----------"
_FOOTER = "---------------------------"


def _word_line(word: Word) -> str:
    parts = ["{} ({})".format(word.text, word.occurrences)]
    if word.is_sentence_ender:
        parts.append(" (se)")
    parts.append(": ")
    parts.extend("{} ".format(follower.text) for follower in word.followers)
    return "".join(parts)


class PlainTextDumper(BaseDumper):
    """Dumper that produces the human-readable model listing."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def dump(self, model: Model) -> str:
        lines: List[str] = [
            _HEADER,
            "---Model size: {} words".format(len(model)),
            "---Words:",
        ]
        lines.extend(_word_line(word) for word in model.words)
        lines.append("---Sentence-starting words ({}):".format(len(model.starters)))
        lines.extend(word.text for word in model.starters)
        lines.append(_FOOTER)
        return "\n".join(lines) + "\n"

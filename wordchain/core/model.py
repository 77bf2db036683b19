"""Word-transition model dataclasses.

WHY: Every stage after tokenizing works on the same structure: which
words exist, which words have followed which, which words start
sentences and which end them. A small, well-typed model decouples
building (builder.py) from searching (synthesizer.py) and printing
(formatters/).

HOW: Two dataclasses form the model:
  Word:  one vocabulary entry with its statistics and follower list
  Model: the vocabulary in first-seen order plus the starter list

RULES:
- Word.text is unique within a Model (case-sensitive exact match)
- followers and starters keep duplicates; frequency biases selection
- Words are only ever appended to; nothing is removed after building
- The Model never holds search state or generated sentences
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(eq=False)
class Word:
    """A single vocabulary entry.

    WHY: The synthesizer walks from word to word, so each entry carries
    the links it needs (followers) and the flag that decides whether a
    path may stop here (is_sentence_ender).

    RULES:
    - text: normalized token, never ends in . ? ! ;
    - occurrences: how many times text was seen in the source
    - is_sentence_ender: True once text has been seen ending a clause
    - followers: every Word seen right after this one, in source order,
      duplicates included
    - Identity comparison only (eq=False): two entries are the same word
      only if they are the same object
    """

    text: str
    occurrences: int = 1
    is_sentence_ender: bool = False
    followers: List[Word] = field(default_factory=list, repr=False)

    def __repr__(self) -> str:
        return "Word({!r}, occurrences={}, ender={}, followers={})".format(
            self.text, self.occurrences, self.is_sentence_ender, len(self.followers),
        )


@dataclass
class Model:
    """The complete word-transition model built from one source text.

    WHY: This is the container the synthesizer and the dumpers receive.
    It owns every Word; callers only hold references into it.

    HOW: Built by builder.ModelBuilder in a single pass. A private text
    index keeps lookups constant-time while ``words`` keeps the
    first-observed order for printing.

    RULES:
    - words: vocabulary, first-observed order
    - starters: Words that began a sentence, once per occurrence
    - add() refuses duplicate text
    """

    words: List[Word] = field(default_factory=list)
    starters: List[Word] = field(default_factory=list)
    _index: Dict[str, Word] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for word in self.words:
            if word.text in self._index:
                raise ValueError("Duplicate word text '{}' in model.".format(word.text))
            self._index[word.text] = word

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __contains__(self, text: object) -> bool:
        return text in self._index

    def lookup(self, text: str) -> Optional[Word]:
        """Return the Word whose text matches exactly, or None."""
        return self._index.get(text)

    def add(self, word: Word) -> Word:
        """Append a new Word to the vocabulary."""
        if word.text in self._index:
            raise ValueError("Duplicate word text '{}' in model.".format(word.text))
        self._index[word.text] = word
        self.words.append(word)
        return word

    def enders(self) -> List[Word]:
        """Vocabulary entries that may end a sentence."""
        return [w for w in self.words if w.is_sentence_ender]

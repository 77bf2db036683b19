"""Single-pass construction of the word-transition model.

WHY: The synthesizer needs to know, for every word, which words have
followed it, plus which words start and end sentences. All of that is
visible from a one-token lookback window while reading the source once.

HOW: ModelBuilder keeps the previous Word and a "sentence start pending"
flag. Each raw token has its clause terminator split off, is
lower-cased at its first character when it starts a sentence, is
looked up or created in the Model, and is then linked either into the
starter list or onto the previous Word's followers.

RULES:
- The very first token always starts a sentence
- Only the first character of a sentence-initial token is lower-cased
  (a proper noun starting a sentence loses its capital, a known limitation)
- Mid-sentence tokens keep their capitalization
- A Word reached after a clause terminator is a starter, never a follower
- Zero tokens → EmptyInputError, no partial model is returned
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from wordchain.config import MAX_TOKEN_LENGTH
from wordchain.core.model import Model, Word
from wordchain.core.tokenizer import TextSource, scan_tokens, split_terminator

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """The source text contained no tokens, so no model can be built."""


class ModelBuilder:
    """Incrementally builds a Model from raw tokens.

    Feed tokens in source order, then call build(). The builder may be
    fed from any token source; build_model() wires it to scan_tokens().
    """

    def __init__(self) -> None:
        self.model = Model()
        self.previous: Optional[Word] = None
        self.sentence_start_pending = True
        self.tokens_seen = 0

    def feed(self, raw_token: str) -> Word:
        """Add one raw token to the model and return its Word."""
        text, ends_sentence = split_terminator(raw_token)
        starts_sentence = self.sentence_start_pending
        if starts_sentence:
            text = text[:1].lower() + text[1:]

        word = self.model.lookup(text)
        if word is not None:
            word.occurrences += 1
            if ends_sentence:
                word.is_sentence_ender = True
        else:
            word = self.model.add(Word(text=text, is_sentence_ender=ends_sentence))

        if starts_sentence:
            self.model.starters.append(word)
            self.sentence_start_pending = False
        else:
            self.previous.followers.append(word)

        if ends_sentence:
            self.sentence_start_pending = True

        self.previous = word
        self.tokens_seen += 1
        return word

    def feed_all(self, tokens: Iterable[str]) -> "ModelBuilder":
        for token in tokens:
            self.feed(token)
        return self

    def build(self) -> Model:
        """Return the finished Model.

        Raises:
            EmptyInputError: If no token was ever fed.
        """
        if not self.tokens_seen:
            raise EmptyInputError("Could not create model, no words found.")
        logger.info(
            "Built model: %d tokens, %d words, %d sentence starters",
            self.tokens_seen, len(self.model), len(self.model.starters),
        )
        return self.model


def build_model(stream: TextSource, max_length: int = MAX_TOKEN_LENGTH) -> Model:
    """Build a Model from a text source in one pass.

    Args:
        stream: A string, a text file object, or an iterable of strings.
        max_length: Longest token to keep (see tokenizer).

    Returns:
        The complete Model.

    Raises:
        EmptyInputError: If the source yields no tokens.
    """
    return ModelBuilder().feed_all(scan_tokens(stream, max_length=max_length)).build()

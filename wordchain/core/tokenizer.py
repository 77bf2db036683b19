"""Raw token scanning and clause-terminator detection.

WHY: The model only understands words and where clauses end. Source
text arrives as an arbitrary character stream full of whitespace,
digits, quotes, and line breaks that must be reduced to a clean token
sequence before any statistics can be gathered.

HOW: The stream is read in chunks. A regex built from TOKEN_ALPHABET
finds maximal runs of allowed characters; a run touching the end of a
chunk is carried over and joined with the start of the next chunk so
chunking never splits a token. Each run is truncated to max_length.

RULES:
- Token characters: a-z, A-Z, ! ? , . ; : ' (case preserved)
- Any other character separates tokens and is discarded
- Runs longer than max_length keep their first max_length characters;
  the excess is dropped silently
- Empty tokens are never produced; end of stream is not an error
- Clause terminators: ". ? ! ;" only; ":" "," "'" stay in the token
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, TextIO, Tuple, Union

from wordchain.config import CLAUSE_TERMINATORS, MAX_TOKEN_LENGTH, READ_CHUNK_SIZE, TOKEN_ALPHABET

TextSource = Union[str, TextIO, Iterable[str]]

_TOKEN_RE = re.compile("[{}]+".format(re.escape("".join(sorted(TOKEN_ALPHABET)))))


def _iter_chunks(stream: TextSource) -> Iterator[str]:
    """Yield text chunks from a string, a file object, or an iterable of strings."""
    if isinstance(stream, str):
        yield stream
        return
    read = getattr(stream, "read", None)
    if callable(read):
        while True:
            chunk = read(READ_CHUNK_SIZE)
            if not chunk:
                return
            yield chunk
    else:
        for chunk in stream:
            yield chunk


def scan_tokens(stream: TextSource, max_length: int = MAX_TOKEN_LENGTH) -> Iterator[str]:
    """Lazily scan raw tokens from a text source.

    WHY: Source files can be large; the builder consumes tokens one at a
    time, so the tokenizer never needs the whole text in memory.

    HOW: For each chunk, a pending run from the previous chunk is either
    flushed (chunk starts with a separator) or prefixed to the first
    match. A match that ends exactly at the chunk boundary becomes the
    new pending run.

    RULES:
    - max_length must be >= 1
    - Output tokens are 1..max_length characters long
    - The generator is single-use

    Args:
        stream: A string, a text file object, or an iterable of strings.
        max_length: Longest token to keep.

    Yields:
        Raw tokens, including any trailing punctuation.
    """
    if max_length < 1:
        raise ValueError("max_length must be >= 1, got {}".format(max_length))

    carry = ""
    for chunk in _iter_chunks(stream):
        if not chunk:
            continue
        if carry and chunk[0] not in TOKEN_ALPHABET:
            yield carry
            carry = ""
        for match in _TOKEN_RE.finditer(chunk):
            run = carry + match.group()
            carry = ""
            if match.end() == len(chunk):
                carry = run[:max_length]
            else:
                yield run[:max_length]
    if carry:
        yield carry


def ends_clause(token: str) -> bool:
    """True if the token's last character is one of . ? ! ;"""
    return bool(token) and token[-1] in CLAUSE_TERMINATORS


def split_terminator(token: str) -> Tuple[str, bool]:
    """Strip one trailing clause terminator.

    Returns the (possibly shortened) token and whether a terminator was
    removed. Only the final character is inspected, so "wait..." becomes
    "wait.." and a lone "." becomes the empty string. The builder keeps
    that empty text as a Word, so such a model can render the sentence ".".
    """
    if ends_clause(token):
        return token[:-1], True
    return token, False

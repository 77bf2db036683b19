"""Randomized backtracking search for sentences of an exact length.

WHY: Walking the transition graph at random produces sentences of
arbitrary length that usually stop mid-clause. Searching for a path
that has exactly the requested number of words AND ends on a word that
has ended a clause in the source yields far more natural output, at
the cost of exponential worst-case time.

HOW: Sentence starters are tried in shuffled order. From each starter a
depth-first search extends the path one follower at a time. Every
search frame holds its own shuffled copy of the current word's
followers and pops candidates from it, so each follower position is
tried at most once per frame. Frames live on an explicit stack instead
of the Python call stack, which keeps long lengths clear of the
recursion limit while exploring in the same order as a recursive walk.

RULES:
- length must be >= 1
- A path starts with a starter entry and ends with a sentence ender
- Consecutive path words are linked through followers
- First success wins; no further search
- No path → None (a normal outcome, never an exception)
- All "tried" state is local to the call; the Model is never mutated
- All randomness comes from the rng argument
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from wordchain.core.model import Model, Word
from wordchain.core.renderer import render

logger = logging.getLogger(__name__)


def _shuffled(words: List[Word], rng: random.Random) -> List[Word]:
    """A shuffled copy of words; candidates are popped from the end."""
    order = list(words)
    rng.shuffle(order)
    return order


def _extend(start: Word, length: int, rng: random.Random) -> Optional[List[Word]]:
    """Depth-first search for a path of ``length`` words beginning at ``start``.

    WHY: This is the inner backtracking loop of the synthesizer.

    HOW: ``frames[i]`` holds the untried followers for path position
    i + 1. A candidate that would fill the last position succeeds only
    if it is a sentence ender; otherwise it is appended and a new frame
    is opened on its followers. An exhausted frame is closed and the
    word it was extending is removed from the path.

    RULES:
    - The path and frames always have equal length while searching
    - A word without followers yields an empty frame and backtracks
    """
    path = [start]
    if length == 1:
        return path if start.is_sentence_ender else None

    frames = [_shuffled(start.followers, rng)]
    while frames:
        candidates = frames[-1]
        if not candidates:
            frames.pop()
            path.pop()
            continue
        candidate = candidates.pop()
        if len(path) + 1 == length:
            if candidate.is_sentence_ender:
                path.append(candidate)
                return path
            continue
        path.append(candidate)
        frames.append(_shuffled(candidate.followers, rng))
    return None


def find_path(model: Model, length: int, rng: Optional[random.Random] = None) -> Optional[List[Word]]:
    """Find a random word path of exactly ``length`` words.

    Args:
        model: The word-transition model to search.
        length: Number of words in the sentence (>= 1).
        rng: Random generator; a fresh OS-seeded one is used when omitted.

    Returns:
        The list of Words, or None when every starter has been exhausted.

    Raises:
        ValueError: If length is less than 1.
    """
    if length < 1:
        raise ValueError("Sentence length must be >= 1, got {}".format(length))
    if rng is None:
        rng = random.Random()

    starters = _shuffled(model.starters, rng)
    tried = 0
    while starters:
        start = starters.pop()
        tried += 1
        path = _extend(start, length, rng)
        if path is not None:
            logger.debug(
                "Found %d-word path from '%s' after %d starter(s)", length, start.text, tried,
            )
            return path

    logger.debug("No %d-word path after trying %d starter(s)", length, tried)
    return None


def generate_sentence(model: Model, length: int, rng: Optional[random.Random] = None) -> Optional[str]:
    """Generate a rendered sentence of ``length`` words, or None.

    The returned string belongs to the caller; the Model keeps no record
    of generated sentences.
    """
    path = find_path(model, length, rng)
    if path is None:
        return None
    return render(path)

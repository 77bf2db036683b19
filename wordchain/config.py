"""Configuration constants, character classes, and .env loading.

WHY: Centralizes every tunable value (token alphabet, clause terminators,
token length bound, dump format, log level, RNG seed) so both humans and
tests can find and override them without touching the algorithms.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level sets and strings. load_seed() and make_rng() turn the
optional WORDCHAIN_SEED variable into an injectable random generator.

RULES:
- TOKEN_ALPHABET is ASCII letters plus ! ? , . ; : ' (no i18n)
- CLAUSE_TERMINATORS is exactly ". ? ! ;" and ":" is NOT a terminator
- MAX_TOKEN_LENGTH bounds a single token; longer runs are truncated
- All defaults can be overridden via environment variables
- A seed is never required; without one the generator is OS-seeded
"""

from __future__ import annotations

import logging
import os
import random
import string
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Tokenizer character classes
# ---------------------------------------------------------------------------

TOKEN_ALPHABET: frozenset = frozenset(string.ascii_letters + "!?,.;:'")
"""Characters that may appear inside a token. Everything else separates."""

CLAUSE_TERMINATORS: frozenset = frozenset({".", "?", "!", ";"})
"""Final characters that mark a token as ending a clause."""


def _int_from_env(name: str, default: int) -> int:
    """Read a positive integer setting, failing with a message naming the variable."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got '{}'.".format(name, raw)) from None
    if value < 1:
        raise ValueError("{} must be >= 1, got {}.".format(name, value))
    return value


MAX_TOKEN_LENGTH = _int_from_env("WORDCHAIN_MAX_TOKEN_LENGTH", 50)
"""Longest token kept; excess characters of a longer run are dropped."""

READ_CHUNK_SIZE = 64 * 1024
"""Characters requested per read() when scanning a file object."""

# ---------------------------------------------------------------------------
# Output and logging defaults
# ---------------------------------------------------------------------------

DEFAULT_DUMP_FORMAT = os.getenv("WORDCHAIN_DUMP_FORMAT", "plain_text")
LOG_LEVEL = os.getenv("WORDCHAIN_LOG_LEVEL", "WARNING").strip().upper()


def load_seed() -> Optional[int]:
    """Load the random seed from the environment.

    WHY: Reproducible sentences are needed for tests and for sharing
    interesting output. A seed in .env makes every run deterministic
    without changing the command line.

    HOW: Reads WORDCHAIN_SEED from os.environ (populated by python-dotenv).

    RULES:
    - Missing or blank → None (non-deterministic generation)
    - Anything that is not an integer raises ValueError
    """
    raw = os.getenv("WORDCHAIN_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "WORDCHAIN_SEED must be an integer, got '{}'.".format(raw)
        ) from None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the random generator threaded through synthesis calls.

    An explicit seed wins; otherwise WORDCHAIN_SEED is consulted, and
    with neither the generator is seeded from the OS.
    """
    if seed is None:
        seed = load_seed()
    return random.Random(seed)


def resolve_log_level(name: Optional[str] = None) -> int:
    """Turn a level name such as "INFO" into its numeric logging level.

    Defaults to LOG_LEVEL (WORDCHAIN_LOG_LEVEL). An unknown name raises
    ValueError naming the variable instead of failing inside logging.
    """
    if name is None:
        name = LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            "WORDCHAIN_LOG_LEVEL must be a logging level name, got '{}'.".format(name)
        )
    return level

"""Shared test fixtures for the wordchain test suite.

WHY: Most test modules need the same small source texts and the models
built from them. Centralizing fixtures here avoids duplication and keeps
the worked example ("The cat ran. The dog ran far.") identical everywhere.

HOW: Pytest fixtures provide raw texts, prebuilt Models, and seeded
random generators.

RULES:
- Source texts are tiny so expected models can be written out by hand
- Seeded generators make every randomized assertion reproducible
"""

import random

import pytest

from wordchain.core.builder import build_model


# ---------------------------------------------------------------------------
# Source texts
# ---------------------------------------------------------------------------

CAT_DOG_TEXT = "The cat ran. The dog ran far."

# Eight words, two sentences, no cycles: no long sentence can exist.
EIGHT_WORD_TEXT = "The cat ran home. The dog ran far."

# "saw" always leads back to "the", so sentences of any length
# 3k + 2 exist and end on "cat" or "dog".
CYCLIC_TEXT = "the dog saw the cat. the cat saw the dog."

PARAGRAPH_TEXT = (
    "It was a bright cold day in April, and the clocks were striking thirteen. "
    "The hallway smelt of boiled cabbage and old rag mats. At one end of it a "
    "coloured poster, too large for indoor display, had been tacked to the wall. "
    "It depicted simply an enormous face, more than a metre wide: the face of a "
    "man of about forty-five, with a heavy black moustache. Was it the face of "
    "the man? It was! The man was old; the day was cold. The clocks were old "
    "and the wall was cold."
)


@pytest.fixture
def cat_dog_text():
    return CAT_DOG_TEXT


@pytest.fixture
def cat_dog_model():
    """Model for "The cat ran. The dog ran far."

    Vocabulary in order: the (2), cat (1), ran (2, ender), dog (1), far (1, ender).
    Starters: the, the.
    """
    return build_model(CAT_DOG_TEXT)


@pytest.fixture
def eight_word_model():
    return build_model(EIGHT_WORD_TEXT)


@pytest.fixture
def cyclic_model():
    return build_model(CYCLIC_TEXT)


@pytest.fixture
def paragraph_model():
    return build_model(PARAGRAPH_TEXT)


@pytest.fixture
def rng():
    return random.Random(1234)

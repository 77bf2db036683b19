"""Unit tests for the sentence synthesizer.

WHY: The synthesizer is the heart of the generator. It must never return
a path of the wrong length, a path that starts anywhere but a sentence
starter, or a path that stops on a word that never ended a clause, and
it must report impossibility as None rather than failing.

HOW: Tests cover the search contract on hand-checked models:
  - Path shape (length, starter, ender, follower links)
  - Impossible lengths (None, no exception)
  - One-word sentences
  - Determinism under a fixed seed
  - Long paths beyond the interpreter recursion limit
  - Selection bias toward frequent followers and starters
  - Model immutability during search

RULES:
- All randomized tests use seeded random.Random instances.
"""

import random
import string
from collections import Counter

import pytest

from wordchain.core.builder import build_model
from wordchain.core.renderer import render
from wordchain.core.synthesizer import find_path, generate_sentence
from wordchain.formatters import dump_model


def _texts(words):
    return [w.text for w in words]


def _assert_valid_path(model, path, length):
    assert len(path) == length
    assert any(path[0] is s for s in model.starters)
    assert path[-1].is_sentence_ender
    for current, nxt in zip(path, path[1:]):
        assert any(f is nxt for f in current.followers)


class TestPathShape:
    """Found paths have exact length, a starter head, and an ender tail."""

    def test_worked_example_length_three(self, cat_dog_model, rng):
        path = find_path(cat_dog_model, 3, rng)
        assert _texts(path) in (["the", "cat", "ran"], ["the", "dog", "ran"])

    def test_worked_example_can_render_the_cat_ran(self, cat_dog_model):
        sentences = {generate_sentence(cat_dog_model, 3, random.Random(seed)) for seed in range(50)}
        assert "The cat ran." in sentences
        assert sentences <= {"The cat ran.", "The dog ran."}

    def test_length_four(self, cat_dog_model, rng):
        path = find_path(cat_dog_model, 4, rng)
        assert _texts(path) in (["the", "cat", "ran", "far"], ["the", "dog", "ran", "far"])

    @pytest.mark.parametrize("length", range(1, 9))
    def test_paragraph_paths_are_valid(self, paragraph_model, length):
        for seed in range(5):
            path = find_path(paragraph_model, length, random.Random(seed))
            if path is not None:
                _assert_valid_path(paragraph_model, path, length)

    def test_paragraph_has_medium_sentences(self, paragraph_model, rng):
        path = find_path(paragraph_model, 6, rng)
        assert path is not None
        _assert_valid_path(paragraph_model, path, 6)


class TestNoPath:
    """Impossible requests return None."""

    def test_length_one_hundred_on_eight_words(self, eight_word_model, rng):
        assert find_path(eight_word_model, 100, rng) is None

    def test_generate_returns_none(self, eight_word_model, rng):
        assert generate_sentence(eight_word_model, 100, rng) is None

    def test_length_two_without_short_sentence(self, cat_dog_model, rng):
        # "the" is never directly followed by an ender
        assert find_path(cat_dog_model, 2, rng) is None

    def test_no_enders_at_all(self, rng):
        model = build_model("round and round and round")
        for length in range(1, 6):
            assert find_path(model, length, rng) is None


class TestOneWordSentences:
    """Length 1 needs a starter that is also an ender."""

    def test_starter_and_ender(self, rng):
        model = build_model("Stop. Go now.")
        path = find_path(model, 1, rng)
        assert _texts(path) == ["stop"]
        assert render(path) == "Stop."

    def test_no_starter_ender(self, cat_dog_model, rng):
        assert find_path(cat_dog_model, 1, rng) is None

    def test_lone_terminator_renders_bare_period(self):
        model = build_model("Hi. . there is more.")
        sentences = {generate_sentence(model, 1, random.Random(seed)) for seed in range(50)}
        assert sentences == {"Hi.", "."}


class TestArguments:
    """Invalid lengths are rejected; the generator is optional."""

    @pytest.mark.parametrize("length", [0, -1])
    def test_length_below_one(self, cat_dog_model, length):
        with pytest.raises(ValueError):
            find_path(cat_dog_model, length)

    def test_default_generator(self, cat_dog_model):
        path = find_path(cat_dog_model, 3)
        _assert_valid_path(cat_dog_model, path, 3)


class TestDeterminism:
    """Identical seeds give identical output."""

    def test_same_seed_same_sentence(self, paragraph_model):
        first = [generate_sentence(paragraph_model, n, random.Random(99)) for n in range(1, 8)]
        second = [generate_sentence(paragraph_model, n, random.Random(99)) for n in range(1, 8)]
        assert first == second

    def test_shared_generator_sequence_repeats(self, paragraph_model):
        def run():
            gen = random.Random(5)
            return [generate_sentence(paragraph_model, 5, gen) for _ in range(5)]

        assert run() == run()


class TestFrequencyBias:
    """Duplicate follower and starter entries make frequent transitions likelier."""

    SEEDS = range(500)

    def test_frequent_follower_preferred(self):
        model = build_model("the cat. " * 9 + "the dog.")
        counts = Counter(find_path(model, 2, random.Random(seed))[1].text for seed in self.SEEDS)
        assert set(counts) == {"cat", "dog"}
        assert counts["cat"] > 3 * counts["dog"]

    def test_frequent_starter_preferred(self):
        model = build_model("the cat. " * 9 + "a dog.")
        counts = Counter(find_path(model, 2, random.Random(seed))[0].text for seed in self.SEEDS)
        assert set(counts) == {"the", "a"}
        assert counts["the"] > 3 * counts["a"]

    def test_single_viable_starter_always_found(self):
        # every "xN stop." sentence is too short for length 3
        dead_ends = ["x" + c + " stop." for c in string.ascii_lowercase]
        text = " ".join(dead_ends[:13] + ["alpha beta gamma."] + dead_ends[13:])
        model = build_model(text)
        assert len(model.starters) == 27
        for seed in range(50):
            path = find_path(model, 3, random.Random(seed))
            assert _texts(path) == ["alpha", "beta", "gamma"]


class TestLongPaths:
    """The search does not depend on Python recursion depth."""

    def test_cycle_supports_long_sentence(self, cyclic_model, rng):
        path = find_path(cyclic_model, 20, rng)
        _assert_valid_path(cyclic_model, path, 20)

    def test_beyond_recursion_limit(self, cyclic_model, rng):
        path = find_path(cyclic_model, 2000, rng)
        assert path is not None
        assert len(path) == 2000
        assert path[-1].text in ("cat", "dog")

    def test_wrong_phase_is_impossible(self, cyclic_model, rng):
        # positions 3k land on "saw", which never ends a sentence
        assert find_path(cyclic_model, 6, rng) is None


class TestModelUnchanged:
    """Searching never mutates the Model."""

    def test_dump_identical_after_search(self, paragraph_model, rng):
        before = dump_model(paragraph_model, "json")
        for length in range(1, 10):
            find_path(paragraph_model, length, rng)
        assert dump_model(paragraph_model, "json") == before

    def test_follower_lists_untouched(self, cat_dog_model, rng):
        the = cat_dog_model.lookup("the")
        followers = list(the.followers)
        find_path(cat_dog_model, 3, rng)
        assert the.followers == followers
        assert _texts(cat_dog_model.starters) == ["the", "the"]

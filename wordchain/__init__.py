"""wordchain: random sentences from a first-order word-transition model.

WHY: Sentences that borrow the word-pair statistics of a source text
read surprisingly like the source, as long as they start where its
sentences start and stop where its clauses stop.

HOW: Three-stage pipeline. Build (tokenize text into a model of
followers, starters, and enders), synthesize (backtracking search for a
path of exact length), render (capitalize and punctuate). Each stage is
independently testable.

RULES:
- Only word pairs are modeled; no grammar, no n-grams
- The model lives in memory for one run; nothing is persisted
- All randomness is injected, so a fixed seed reproduces output
"""

from wordchain.core.builder import EmptyInputError, build_model
from wordchain.core.model import Model, Word
from wordchain.core.renderer import render
from wordchain.core.synthesizer import find_path, generate_sentence
from wordchain.formatters import dump_model

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "Model",
    "Word",
    "build_model",
    "dump_model",
    "find_path",
    "generate_sentence",
    "render",
    "__version__",
]

"""JSON model dump for tooling and tests.

WHY: Scripts that analyse a model (vocabulary size, branching, which
words can end sentences) should not have to parse the plain text
listing. JSON gives them a stable, schema-checked structure.

HOW: The Model is converted into plain dicts and lists, with followers
and starters referenced by word text, validated against
model_dump_schema.json, then serialized with two-space indentation.

RULES:
- Top-level keys: "size", "words", "starters"
- Each word: "text", "occurrences", "sentence_ender", "followers"
- Order and duplicates are preserved exactly as in the Model
- Validate output against the schema before returning; raise on failure
- Output ends with a newline
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from wordchain.core.model import Model
from wordchain.formatters.base import BaseDumper

_SCHEMA_PATH = Path(__file__).resolve().parent / "model_dump_schema.json"


def _load_schema() -> Dict[str, Any]:
    """Load the dump JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def model_to_dict(model: Model) -> Dict[str, Any]:
    """Convert a Model to JSON-ready builtins."""
    return {
        "size": len(model),
        "words": [
            {
                "text": word.text,
                "occurrences": word.occurrences,
                "sentence_ender": word.is_sentence_ender,
                "followers": [follower.text for follower in word.followers],
            }
            for word in model.words
        ],
        "starters": [word.text for word in model.starters],
    }


class JSONDumper(BaseDumper):
    """Dumper that produces a schema-validated JSON document."""

    @property
    def name(self) -> str:
        return "JSON"

    def dump(self, model: Model) -> str:
        output = model_to_dict(model)

        # Validate against the JSON schema
        jsonschema.validate(instance=output, schema=_get_schema())

        return json.dumps(output, ensure_ascii=False, indent=2) + "\n"

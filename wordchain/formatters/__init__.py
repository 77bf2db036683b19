"""Model dump registry for pluggable inspection formats.

WHY: The CLI needs a single lookup to find the right dumper by name.
A central dict makes it trivial to add new formats: create the dumper
class, import it here, add one line.

HOW: FORMATTERS maps string keys to dumper *classes* (not instances).
dump_model() instantiates the requested one and returns its text.

RULES:
- Keys are snake_case identifiers (used in CLI flags and .env)
- Values are BaseDumper subclasses (not instances)
- Unknown keys raise ValueError listing the available formats
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from wordchain.config import DEFAULT_DUMP_FORMAT
from wordchain.core.model import Model
from wordchain.formatters.json_dump import JSONDumper
from wordchain.formatters.plain_text import PlainTextDumper

if TYPE_CHECKING:
    from wordchain.formatters.base import BaseDumper

FORMATTERS: dict[str, type[BaseDumper]] = {
    "plain_text": PlainTextDumper,
    "json": JSONDumper,
}


def dump_model(model: Model, fmt: Optional[str] = None) -> str:
    """Dump the Model in the named format (default from config)."""
    key = fmt or DEFAULT_DUMP_FORMAT
    if key not in FORMATTERS:
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            )
        )
    return FORMATTERS[key]().dump(model)

"""Abstract base dumper for model inspection output.

WHY: Every dump format reads the same Model but renders it differently
(the classic plain-text listing for eyeballing, JSON for tooling). A
shared base class lets the CLI work with any dumper generically.

HOW: BaseDumper is an ABC with two requirements: a ``name`` property
and a ``dump()`` method returning the complete text.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``dump()``
- ``dump()`` is read-only: it never mutates the Model
- The same Model always dumps to the same text

To add a new dump format:
1. Create a new file in formatters/
2. Subclass BaseDumper
3. Implement dump() and name
4. Register in FORMATTERS dict in formatters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wordchain.core.model import Model


class BaseDumper(ABC):
    """Abstract base for all model dumpers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def dump(self, model: Model) -> str:
        """Render the whole Model as text.

        Args:
            model: The word-transition model to describe.

        Returns:
            The complete dump, ending with a newline.
        """

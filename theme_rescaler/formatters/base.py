"""Abstract base formatter and output container.

WHY: The same configuration mapping is consumed by different build
setups — a JSON file for tooling that merges configs, a CommonJS module
for Tailwind's CLI. This base class keeps the CLI generic over them.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list, usually of one item
- ``suffix`` includes the extension, e.g. ``".config.json"``
- The caller is responsible for prepending the output stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the output stem,
                e.g. ``".config.js"`` → ``"tailwind.config.js"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all configuration formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Tailwind config JSON'."""

    @abstractmethod
    def format(self, config: dict[str, Any]) -> list[FormatterOutput]:
        """Serialise a configuration mapping into one or more output files.

        Args:
            config: A full Tailwind configuration or a rescaled theme
                    mapping, containing only plain JSON values.

        Returns:
            List of FormatterOutput objects.
        """

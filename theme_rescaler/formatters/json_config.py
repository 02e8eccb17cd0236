"""Tailwind configuration JSON formatter.

WHY: Some build steps (and the tests) want the generated configuration as
data rather than code, e.g. to diff it between releases or merge it into
another config.

HOW: Validates the mapping against the configuration schema, then dumps
it with two-space indentation, preserving key order.

RULES:
- Output suffix: ".config.json"
- Validate before serialising; raise on failure
- Non-ASCII is written as-is (ensure_ascii=False), trailing newline added
"""

from __future__ import annotations

import json
from typing import Any

from theme_rescaler.core.loader import validate_config
from theme_rescaler.formatters.base import BaseFormatter, FormatterOutput


def dump_config(config: dict[str, Any]) -> str:
    return json.dumps(config, indent=2, ensure_ascii=False)


class JSONConfigFormatter(BaseFormatter):
    """Formatter producing a plain JSON configuration file."""

    @property
    def name(self) -> str:
        return "Tailwind config JSON"

    def format(self, config: dict[str, Any]) -> list[FormatterOutput]:
        """Serialise the configuration as JSON.

        Raises:
            jsonschema.ValidationError: If the mapping holds values that
                are not plain JSON.
        """
        validate_config(config)
        return [
            FormatterOutput(
                suffix=".config.json",
                content=dump_config(config) + "\n",
                media_type="application/json",
            )
        ]

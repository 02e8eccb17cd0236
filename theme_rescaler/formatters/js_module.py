"""CommonJS ``tailwind.config.js`` formatter.

WHY: Tailwind's CLI and PostCSS plugin load ``tailwind.config.js`` as a
CommonJS module. Emitting it directly means the storefront build needs no
JavaScript of its own to rescale the default theme.

HOW: JSON is valid JavaScript expression syntax, so the module body is
``module.exports = <json>;``. A header comment marks the file as generated.

RULES:
- Output suffix: ".config.js"
- Same schema validation as the JSON formatter
"""

from __future__ import annotations

from typing import Any

from theme_rescaler.core.loader import validate_config
from theme_rescaler.formatters.base import BaseFormatter, FormatterOutput
from theme_rescaler.formatters.json_config import dump_config

_HEADER = "// Generated by theme_rescaler. Do not edit by hand.\n"


class JSModuleFormatter(BaseFormatter):
    """Formatter producing a CommonJS Tailwind configuration module."""

    @property
    def name(self) -> str:
        return "Tailwind config module"

    def format(self, config: dict[str, Any]) -> list[FormatterOutput]:
        validate_config(config)
        content = "{}module.exports = {};\n".format(_HEADER, dump_config(config))
        return [
            FormatterOutput(
                suffix=".config.js",
                content=content,
                media_type="text/javascript",
            )
        ]

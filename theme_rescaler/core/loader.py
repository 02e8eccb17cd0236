"""Loading and validating Tailwind configuration JSON.

WHY: The rescaler runs in Python, but Tailwind's default configuration
lives in a JavaScript module. The build dumps it once with
``node -e "console.log(JSON.stringify(require('tailwindcss/defaultConfig')))"``
and hands the JSON file to this package. A truncated or hand-edited dump
should fail loudly before any tokens are generated.

HOW: Read the file as UTF-8 JSON and validate it against
tailwind_config.schema.json with jsonschema. The same schema validates
the generated configuration before it is written.

RULES:
- Top level must be an object; "theme", when present, must be an object
- Only plain JSON values are accepted (no tuples or custom types)
- Function-valued Tailwind entries are simply absent from a JSON dump
- Errors propagate: FileNotFoundError, json.JSONDecodeError,
  jsonschema.ValidationError
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "tailwind_config.schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load the configuration schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def validate_config(config: Any) -> None:
    """Validate a configuration mapping against the schema.

    Raises:
        jsonschema.ValidationError: If the configuration is not a plain
            JSON object of the expected shape.
    """
    jsonschema.validate(instance=config, schema=get_schema())


def load_default_config(path: str | Path) -> dict[str, Any]:
    """Load a JSON dump of Tailwind's default configuration.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed configuration mapping.
    """
    config_path = Path(path)
    with open(config_path, encoding="utf-8") as f:
        config = json.load(f)
    validate_config(config)
    logger.info(
        "Loaded %s (%d theme groups)",
        config_path.name,
        len(config.get("theme") or {}),
    )
    return config

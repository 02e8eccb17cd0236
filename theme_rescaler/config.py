"""Configuration constants and .env loading.

WHY: Centralizes the configurable values (base font size, parsing mode,
output naming) so they are easy to find, update, and override per
storefront without touching the rescaling logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. load_base_font_size() re-reads the environment at
call time and gives a clear error for unusable values.

RULES:
- ROOT_FONT_SIZE is Tailwind's built-in assumption and is not configurable
- THEME_BASE_FONT_SIZE overrides the storefront root size (default 10)
- THEME_STRICT_REM=false switches to the legacy permissive rem parser
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

ROOT_FONT_SIZE = 16
"""Root font size (px) that Tailwind's default rem values assume."""

REM_SUFFIX = "rem"

DEFAULT_BASE_FONT_SIZE = 10
"""Root font size (px) of the storefront stylesheet."""

DEFAULT_STRICT_REM = os.getenv("THEME_STRICT_REM", "true").lower() == "true"
DEFAULT_OUTPUT_STEM = os.getenv("THEME_OUTPUT_STEM", "tailwind")


def load_base_font_size() -> float:
    """Load the storefront base font size from the environment.

    WHY: Different storefronts set different root font sizes. The value
    must be a positive number or every rescaled token is garbage.

    HOW: Reads THEME_BASE_FONT_SIZE from os.environ (populated by
    python-dotenv), falling back to DEFAULT_BASE_FONT_SIZE.

    RULES:
    - Missing or blank variable returns the default
    - Raises ValueError for non-numeric, non-finite or non-positive values
    """
    raw = os.getenv("THEME_BASE_FONT_SIZE", "").strip()
    if not raw:
        return float(DEFAULT_BASE_FONT_SIZE)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(
            f"THEME_BASE_FONT_SIZE must be a number, got {raw!r}. "
            "Fix the value in the .env file."
        ) from None
    if not value > 0 or value == float("inf"):
        raise ValueError(
            f"THEME_BASE_FONT_SIZE must be a positive number, got {raw!r}."
        )
    return value

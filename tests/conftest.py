"""Shared test fixtures for the theme_rescaler test suite.

WHY: Several test modules need the same slice of Tailwind's default
configuration. Centralizing it here keeps the expected rescaled values in
one place.

HOW: DEFAULT_CONFIG is a trimmed JSON dump of tailwindcss/defaultConfig
covering every node kind the rescaler handles: rem scales, px scales,
[size, {lineHeight}] tuples, numeric-string scales, nested color palettes
and scalar theme entries.

RULES:
- Values are copied verbatim from Tailwind's default theme
- Fixtures return deep copies so tests may mutate them
"""

import copy
import json
from typing import Any, Dict

import pytest


DEFAULT_CONFIG: Dict[str, Any] = {
    "content": [],
    "presets": [],
    "darkMode": "media",
    "theme": {
        "spacing": {
            "px": "1px",
            "0": "0px",
            "0.5": "0.125rem",
            "1": "0.25rem",
            "2": "0.5rem",
            "4": "1rem",
            "8": "2rem",
        },
        "borderRadius": {
            "none": "0px",
            "sm": "0.125rem",
            "DEFAULT": "0.25rem",
            "full": "9999px",
        },
        "fontSize": {
            "xs": ["0.75rem", {"lineHeight": "1rem"}],
            "base": ["1rem", {"lineHeight": "1.5rem"}],
            "5xl": ["3rem", {"lineHeight": "1"}],
        },
        "lineHeight": {
            "none": "1",
            "tight": "1.25",
            "3": ".75rem",
            "10": "2.5rem",
        },
        "screens": {
            "sm": "640px",
            "md": "768px",
        },
        "opacity": {
            "0": "0",
            "50": "0.5",
            "100": "1",
        },
        "colors": {
            "black": "#000",
            "slate": {"50": "#f8fafc", "900": "#0f172a"},
        },
        "fontFamily": {
            "sans": ["ui-sans-serif", "system-ui", "sans-serif"],
        },
        "zIndex": {
            "auto": "auto",
            "10": "10",
        },
        "flexGrow": {
            "0": "0",
            "DEFAULT": "1",
        },
        "animation": {
            "none": "none",
        },
        "blur": {
            "0": "0",
            "none": "0",
            "sm": "4px",
        },
        "accentColor": None,
    },
    "plugins": [],
}


@pytest.fixture
def default_config():
    """A trimmed Tailwind default configuration (deep copy)."""
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def default_config_path(tmp_path):
    """DEFAULT_CONFIG written to a JSON file, as the build dumps it."""
    path = tmp_path / "default-config.json"
    path.write_text(json.dumps(DEFAULT_CONFIG), encoding="utf-8")
    return path

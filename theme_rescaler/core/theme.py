"""Storefront design tokens and the final Tailwind configuration build.

WHY: The storefront theme is Tailwind's default scales (rescaled for a
10px root) extended with the storefront's own tokens: CSS-variable backed
colors, section paddings, breakpoints and aspect ratios. Keeping the
tokens as plain module-level data means designers and developers can
change them without reading any logic.

HOW: build_config() rescales the default theme, pulls out spacing and
borderRadius so the storefront entries can be layered on top of them,
and shallow-merges everything under theme.extend.

RULES:
- spacing and borderRadius keep every rescaled default plus storefront keys
- Other storefront groups replace a rescaled group of the same name
- Token tables are deep-copied into the result; callers may mutate it
- Colors reference CSS custom properties set by the Liquid theme settings
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from theme_rescaler.config import load_base_font_size
from theme_rescaler.core.rem import RemScale
from theme_rescaler.core.rescaler import rescale_theme

# ---------------------------------------------------------------------------
# Build inputs
# ---------------------------------------------------------------------------

CONTENT_GLOBS: List[str] = [
    "./layout/*.{html,liquid}",
    "./sections/*.{html,liquid}",
    "./snippets/*.{html,liquid}",
    "./templates/*.{html,liquid}",
]

SAFELIST: List[str] = [
    "page-width",
]

VARIANTS: Dict[str, List[str]] = {
    "translate": ["responsive", "hover", "focus", "group-hover"],
}

# ---------------------------------------------------------------------------
# Tokens merged into rescaled default groups
# ---------------------------------------------------------------------------

SPACING_TOKENS: Dict[str, str] = {
    "section-xs": "var(--vf-padding-section-xsmall)",
    "section-sm": "var(--vf-padding-section-small)",
    "section-md": "var(--vf-padding-section-medium)",
    "section-lg": "var(--vf-padding-section-large)",
}

BORDER_RADIUS_TOKENS: Dict[str, str] = {
    "DEFAULT": "var(--vf-border-radius)",
}

# ---------------------------------------------------------------------------
# Storefront-only groups
# ---------------------------------------------------------------------------

ASPECT_RATIOS: Dict[str, str] = {
    "3/1": "3 / 1",
    "16/9": "16 / 9",
    "3/2": "3 / 2",
    "4/3": "4 / 3",
    "1/1": "1 / 1",
    "3/4": "3 / 4",
}

BOX_SHADOW: Dict[str, str] = {
    "DEFAULT": "var(--vf-box-shadow)",
}

GRID_TEMPLATE_COLUMNS: Dict[str, str] = {
    "DEFAULT": "var(--vf-grid-cols-default)",
    "full-bleed": "1fr repeat(12, calc(var(--vf-container-width) / 12)) 1fr",
}

GAP: Dict[str, str] = {
    "grid": "var(--vf-grid-gap)",
}

BORDER_STYLE: Dict[str, str] = {
    "DEFAULT": "solid",
}

BACKGROUND_IMAGE: Dict[str, str] = {
    "disabled-variant": (
        "linear-gradient(to top right, rgb(var(--vf-color-disabled)) calc(50% - 1px), "
        "rgb(var(--vf-color-disabled-high-contrast)), "
        "rgb(var(--vf-color-disabled)) calc(50% + 1px) )"
    ),
}

# Names of CSS variable backed colors; each maps to --vf-color-<name>.
_VARIABLE_COLORS = (
    "primary",
    "primary-hover",
    "primary-pressed",
    "secondary",
    "secondary-hover",
    "secondary-pressed",
    "ui-background",
    "input-background",
    "border",
    "disabled",
    "disabled-high-contrast",
    "placeholder-high-contrast",
    "error",
    "warning",
    "success",
    "error-background",
    "warning-background",
    "success-background",
    "copy",
    "copy-light",
    "header",
    "facebook",
    "twitter",
    "linkedin",
    "pinterest",
    "youtube",
    "snapchat",
    "instagram",
)


def css_variable_color(name: str) -> str:
    """Color token reading an "r g b" triplet from --vf-color-<name>."""
    return f"rgb(var(--vf-color-{name}) / <alpha-value>)"


COLORS: Dict[str, str] = {
    "transparent": "transparent",
    "current": "currentColor",
    "black": "#000",
    "white": "#fff",
    **{name: css_variable_color(name) for name in _VARIABLE_COLORS},
}

SCREENS: Dict[str, str] = {
    "sm": "576px",
    "md": "768px",
    "lg": "992px",
    "xl": "1200px",
    "2xl": "1536px",
}

CONTAINER: Dict[str, Any] = {
    "center": True,
    "padding": {
        "DEFAULT": "1rem",
    },
}

STOREFRONT_GROUPS: Dict[str, Any] = {
    "aspectRatio": ASPECT_RATIOS,
    "boxShadow": BOX_SHADOW,
    "gridTemplateColumns": GRID_TEMPLATE_COLUMNS,
    "gap": GAP,
    "borderStyle": BORDER_STYLE,
    "backgroundImage": BACKGROUND_IMAGE,
    "colors": COLORS,
    "screens": SCREENS,
    "container": CONTAINER,
}


def build_extend(rescaled_theme: Dict[str, Any]) -> Dict[str, Any]:
    """Merge rescaled default groups with the storefront token groups.

    Args:
        rescaled_theme: Output of rescale_theme(). Not mutated.

    Returns:
        The mapping to place under theme.extend.
    """
    groups = dict(rescaled_theme)
    spacing = groups.pop("spacing", None) or {}
    border_radius = groups.pop("borderRadius", None) or {}

    extend: Dict[str, Any] = dict(groups)
    extend["spacing"] = {**spacing, **SPACING_TOKENS}
    extend["borderRadius"] = {**border_radius, **BORDER_RADIUS_TOKENS}
    extend.update(STOREFRONT_GROUPS)
    return copy.deepcopy(extend)


def build_config(
    default_config: Dict[str, Any],
    base_font_size: Optional[float] = None,
    strict: bool = True,
) -> Dict[str, Any]:
    """Build the complete storefront Tailwind configuration.

    WHY: This is what tailwind.config.js exports: the content globs the
    JIT scanner reads, and a theme.extend block built from the rescaled
    defaults plus storefront tokens.

    HOW: rescale_theme() with RemScale(base_font_size), then build_extend().

    RULES:
    - base_font_size=None reads THEME_BASE_FONT_SIZE (default 10)
    - Raises MalformedRemLiteral in strict mode for bad default values

    Args:
        default_config: Tailwind's default configuration (JSON dump).
        base_font_size: Storefront root font size in px.
        strict: Raise on malformed rem literals.

    Returns:
        Configuration mapping with content, safelist, theme, variants
        and plugins keys.
    """
    if base_font_size is None:
        base_font_size = load_base_font_size()
    scale = RemScale(base_font_size=base_font_size)
    rescaled = rescale_theme(default_config, scale, strict=strict)

    return {
        "content": list(CONTENT_GLOBS),
        "safelist": list(SAFELIST),
        "theme": {
            "extend": build_extend(rescaled),
        },
        "variants": copy.deepcopy(VARIANTS),
        "plugins": [],
    }

"""Storefront theme rescaler — Tailwind design tokens for a non-16px root.

WHY: The storefront sets its root font size to 10px so that 1rem == 10px
in hand-written CSS. Tailwind's default theme assumes a 16px root, so every
rem value in its spacing, sizing and typography scales comes out 37.5%
too small. This package rescales those values and merges them with the
storefront's own design tokens into a complete Tailwind configuration.

HOW: Four-stage pipeline — load (JSON dump of Tailwind's default config),
rescale (pure rem transform with pruning), build (merge with storefront
token tables), format (pluggable formatters). Each stage is independently
testable.

RULES:
- The rescaler is pure: input trees are never mutated
- Only branches that contain a rem value survive the rescale
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"

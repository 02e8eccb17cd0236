"""Core rescaling, loading and theme build modules.

WHY: The core package holds the part of the build that has behaviour —
the rem transform — plus the data it is applied to and merged with.
Formatters and the CLI only serialise what the core produces.

HOW: rem.py parses and renders single rem literals, rescaler.py walks
configuration trees, loader.py reads and validates Tailwind JSON dumps,
theme.py holds the storefront tokens and builds the final configuration.

RULES:
- Everything except loader.py is pure (no I/O)
- Output structures contain only dict, list, str, bool and numbers
"""

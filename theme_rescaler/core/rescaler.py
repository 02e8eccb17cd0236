"""Recursive rem rescaling with pruning of rem-free branches.

WHY: Tailwind's default theme mixes rem lengths with colors, px breakpoints,
font stacks and numeric weights. Only the rem-bearing parts need to be
overridden for a non-16px root; copying the rest would shadow Tailwind's
own defaults for no reason. The rescaler therefore returns the smallest
subtree that still carries every rem value, with those values rescaled.

HOW: rescale() dispatches on node kind. Strings are rescaled when they end
in "rem" and passed through otherwise. Lists and dicts are rebuilt from
their surviving children; a container with no rem value anywhere in its
subtree is pruned (None) before recursing. Everything else (numbers,
booleans, None) is pruned.
rescale_theme() applies this to each container group under config["theme"].

RULES:
- For containers and rem strings, rescale(node) is None exactly when
  contains_rem_value(node) is False; bare non-rem strings pass through
- Output is always a fresh structure; input is never mutated
- Inside containers, non-rem strings survive only in a rem-bearing branch
- A nested container without a rem value is dropped, even beside rem siblings
- Numbers, booleans and None are always dropped, even beside rem siblings
- Output containers are plain dict / list, key order preserved
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from theme_rescaler.core.rem import RemScale, is_rem_value, rescale_rem_value

logger = logging.getLogger(__name__)

ConfigNode = Union[str, int, float, bool, None, List[Any], Tuple[Any, ...], Dict[str, Any]]


def contains_rem_value(node: Any) -> bool:
    """Return True if node is, or transitively contains, a rem value."""
    if isinstance(node, str):
        return is_rem_value(node)
    if isinstance(node, (list, tuple)):
        return any(contains_rem_value(item) for item in node)
    if isinstance(node, dict):
        return any(contains_rem_value(value) for value in node.values())
    return False


def rescale(node: Any, scale: RemScale, strict: bool = True) -> Optional[ConfigNode]:
    """Rescale every rem value in node, pruning branches without one.

    Args:
        node: A configuration node (str, list/tuple, dict, or scalar).
        scale: Font size conversion to apply to rem values.
        strict: Raise on malformed rem literals instead of emitting "NaNrem".

    Returns:
        The rescaled node, or None when the branch holds no rem value.

    Raises:
        MalformedRemLiteral: In strict mode, for strings like "remrem".
    """
    return _rescale(node, scale, strict, ())


def _rescale(
    node: Any,
    scale: RemScale,
    strict: bool,
    path: Tuple[str, ...],
) -> Optional[ConfigNode]:
    if isinstance(node, str):
        if is_rem_value(node):
            return rescale_rem_value(node, scale, strict=strict, path=_format_path(path))
        return node

    if not contains_rem_value(node):
        return None

    if isinstance(node, (list, tuple)):
        items: List[Any] = []
        for index, item in enumerate(node):
            updated = _rescale(item, scale, strict, path + (str(index),))
            if updated is not None:
                items.append(updated)
        return items

    if isinstance(node, dict):
        mapping: Dict[str, Any] = {}
        for key, value in node.items():
            updated = _rescale(value, scale, strict, path + (str(key),))
            if updated is not None:
                mapping[key] = updated
        return mapping


def _format_path(path: Tuple[str, ...]) -> str:
    return ".".join(path)


def rescale_theme(config: Dict[str, Any], scale: RemScale, strict: bool = True) -> Dict[str, Any]:
    """Rescale the token groups under config["theme"].

    WHY: Only container-valued groups (spacing, fontSize, ...) are token
    scales. Scalar theme entries and groups without any rem value are not
    part of the override set.

    HOW: For each container group, rescale it and keep it when the group
    contains a rem value.

    RULES:
    - Missing or non-dict "theme" yields {} (logged as a warning)
    - An empty "theme" mapping yields {} (logged at INFO)
    - Non-container groups are ignored, never copied
    - Dropped groups are logged at DEBUG
    - The key path in MalformedRemLiteral starts at the group name

    Args:
        config: Root configuration mapping with a "theme" key.
        scale: Font size conversion to apply.
        strict: Raise on malformed rem literals.

    Returns:
        Mapping of group name to rescaled group.
    """
    theme = config.get("theme")
    if not isinstance(theme, dict):
        logger.warning("Configuration has no theme mapping; nothing to rescale")
        return {}
    if not theme:
        logger.info("Theme mapping is empty; nothing to rescale")
        return {}

    updated_theme: Dict[str, Any] = {}
    for key, value in theme.items():
        if not isinstance(value, (dict, list, tuple)):
            continue
        updated = _rescale(value, scale, strict, (str(key),))
        if contains_rem_value(updated):
            updated_theme[key] = updated
        else:
            logger.debug("Dropped theme group %s (no rem values)", key)

    logger.info(
        "Rescaled %d of %d theme groups (ratio %s)",
        len(updated_theme),
        len(theme),
        scale.ratio,
    )
    return updated_theme

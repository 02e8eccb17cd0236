"""Rem literal parsing, scaling and rendering.

WHY: Tailwind expresses lengths as strings like "1.5rem". Rescaling means
pulling the number out, multiplying it, and writing it back exactly the
way the legacy JavaScript build rendered numbers, so the generated CSS
does not churn between the two toolchains.

HOW: RemScale holds the two font sizes and applies
(value * root) / base in that order. parse_rem_value() extracts the
number, either strictly (whole string must be "<number>rem") or
permissively (longest leading numeric prefix, NaN when there is none).
format_js_number() renders a float the way Number.prototype.toString does.

RULES:
- A rem value is any string ending in "rem" (case-sensitive)
- Strict parsing raises MalformedRemLiteral for e.g. "remrem" or "1rem 2rem"
- Permissive parsing never raises; unparsable prefixes become NaN
- Integral results render without a fractional part ("4", not "4.0")
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from theme_rescaler.config import REM_SUFFIX, ROOT_FONT_SIZE

# Whole-string match for a well-formed rem literal.
_STRICT_REM_RE = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?" + re.escape(REM_SUFFIX) + r"$",
    re.ASCII,
)

# Leading numeric prefix as accepted by JavaScript's parseFloat().
_NUMERIC_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


class MalformedRemLiteral(ValueError):
    """A string ends in "rem" but is not a numeric literal followed by "rem".

    Attributes:
        value: The offending string.
        path: Dotted key path where it was found ("" at the root).
    """

    def __init__(self, value: str, path: str = "") -> None:
        self.value = value
        self.path = path
        location = f" at '{path}'" if path else ""
        super().__init__(f"Malformed rem literal {value!r}{location}")


@dataclass(frozen=True)
class RemScale:
    """Conversion between Tailwind's root font size and the storefront's.

    RULES:
    - ratio = root_font_size / base_font_size
    - Both sizes must be positive finite numbers
    - apply() multiplies before dividing, matching the legacy output
    """

    base_font_size: float
    root_font_size: float = ROOT_FONT_SIZE

    def __post_init__(self) -> None:
        for label, size in (
            ("base_font_size", self.base_font_size),
            ("root_font_size", self.root_font_size),
        ):
            if isinstance(size, bool) or not isinstance(size, (int, float)):
                raise ValueError(f"{label} must be a number, got {size!r}")
            if not size > 0 or math.isinf(size):
                raise ValueError(f"{label} must be positive and finite, got {size!r}")

    @property
    def ratio(self) -> float:
        return self.root_font_size / self.base_font_size

    def apply(self, value: float) -> float:
        return (value * self.root_font_size) / self.base_font_size


def is_rem_value(value: object) -> bool:
    """Return True if value is a string carrying the rem suffix."""
    return isinstance(value, str) and value.endswith(REM_SUFFIX)


def parse_rem_value(value: str, strict: bool = True, path: str = "") -> float:
    """Extract the numeric part of a rem literal.

    Args:
        value: A string ending in "rem".
        strict: Require the whole string to be "<number>rem".
        path: Key path used in the error message.

    Returns:
        The parsed number (NaN in permissive mode when nothing parses).

    Raises:
        MalformedRemLiteral: In strict mode, when the string is not a
            well-formed rem literal.
    """
    if strict:
        if not _STRICT_REM_RE.match(value):
            raise MalformedRemLiteral(value, path)
        return float(value[: -len(REM_SUFFIX)])

    match = _NUMERIC_PREFIX_RE.match(value.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def format_js_number(value: float) -> str:
    """Render a float the way JavaScript's default number-to-string does.

    RULES:
    - NaN -> "NaN", infinities -> "Infinity" / "-Infinity"
    - Integral values render without a fractional part; -0.0 renders as "0"
    - Shortest round-trip digits otherwise (same as Python's repr)
    - Positional notation for exponents -7 < e < 21, else "1e-7" / "1e+21"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e16:
        return str(int(value))

    text = repr(float(value))
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return "{}e{}{}".format(mantissa, "+" if exp > 0 else "-", abs(exp))


def rescale_rem_value(value: str, scale: RemScale, strict: bool = True, path: str = "") -> str:
    """Rescale a single rem literal, e.g. "0.5rem" at base 10 -> "0.8rem"."""
    number = parse_rem_value(value, strict=strict, path=path)
    return format_js_number(scale.apply(number)) + REM_SUFFIX

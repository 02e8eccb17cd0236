"""Output formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used in the --formats flag)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from theme_rescaler.formatters.js_module import JSModuleFormatter
from theme_rescaler.formatters.json_config import JSONConfigFormatter

if TYPE_CHECKING:
    from theme_rescaler.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json": JSONConfigFormatter,
    "js_module": JSModuleFormatter,
}

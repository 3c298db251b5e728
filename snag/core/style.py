"""Text pieces used when rendering a Snag.

`DEFAULT_STYLE` produces the stable formats that other tools may parse:

    error: Save failed

    cause:
      0: Could not open file
      1: Directory not writable

    error: Save failed <- Could not open file <- Directory not writable
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["RenderStyle", "DEFAULT_STYLE"]


@dataclass(frozen=True, slots=True)
class RenderStyle:
    """Prefixes and separators for `pretty_print` and `line_print`."""

    prefix: str = "error: "
    cause_header: str = "cause:"
    indent: str = "  "  # before each cause index
    separator: str = " <- "

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> RenderStyle:
        """Create a style from a mapping (parsed TOML).

        Values are taken verbatim; missing or non-string values keep the
        default.
        """
        default = cls()
        return cls(
            prefix=_verbatim(data, "prefix", default.prefix),
            cause_header=_verbatim(data, "cause_header", default.cause_header),
            indent=_verbatim(data, "indent", default.indent),
            separator=_verbatim(data, "separator", default.separator),
        )


def _verbatim(data: Mapping[str, object], key: str, fallback: str) -> str:
    # Whitespace is significant in separators and indents, so no stripping.
    value = data.get(key)
    return value if isinstance(value, str) else fallback


DEFAULT_STYLE = RenderStyle()

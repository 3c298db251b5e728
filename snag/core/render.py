"""Rendering a Snag as text.

Both functions are pure: they build a string and never write it anywhere.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .style import DEFAULT_STYLE, RenderStyle

if TYPE_CHECKING:
    from .snag import Snag

__all__ = ["pretty_print", "line_print"]


def pretty_print(snag: Snag, *, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Render a Snag over multiple lines.

    The issue comes first. When there are causes, a blank line and a
    `cause:` header follow, then one indexed line per cause, most recent
    first, so the highest index is the root cause.

    Args:
        snag: The Snag to render.
        style: Prefix, header, indent and separator to use.

    Returns:
        The rendered text, ending in a newline.
    """
    parts = [f"{style.prefix}{snag.issue}\n"]
    cause = snag.cause
    if cause:
        parts.append(f"\n{style.cause_header}\n")
        parts.extend(f"{style.indent}{index}: {entry}\n" for index, entry in enumerate(cause))
    return "".join(parts)


def line_print(snag: Snag, *, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Render a Snag on a single line, without a trailing newline."""
    return style.separator.join([f"{style.prefix}{snag.issue}", *snag.cause])

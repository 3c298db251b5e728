"""Ad-hoc layered error values.

    from snag import context, error, pretty_print

    result = context(error("Directory not writable"), "Save failed")
    print(pretty_print(result.error), end="")
"""

from .core import (
    DEFAULT_STYLE,
    Err,
    Ok,
    RenderStyle,
    Result,
    Snag,
    SnagError,
    attempt,
    context,
    error,
    is_err,
    is_ok,
    layer,
    line_print,
    load_style,
    load_style_or_default,
    map_error,
    new,
    pretty_print,
    raise_for,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_STYLE",
    "Err",
    "Ok",
    "RenderStyle",
    "Result",
    "Snag",
    "SnagError",
    "attempt",
    "context",
    "error",
    "is_err",
    "is_ok",
    "layer",
    "line_print",
    "load_style",
    "load_style_or_default",
    "map_error",
    "new",
    "pretty_print",
    "raise_for",
]

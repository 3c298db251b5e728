"""Core snag types and logic."""

from .config import load_style, load_style_or_default
from .errors import SnagError, attempt, raise_for
from .render import line_print, pretty_print
from .result import Err, Ok, Result, is_err, is_ok
from .snag import Snag, context, error, layer, map_error, new
from .style import DEFAULT_STYLE, RenderStyle

__all__ = [
    # snag
    "Snag",
    "new",
    "error",
    "layer",
    "context",
    "map_error",
    # render
    "pretty_print",
    "line_print",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # errors
    "SnagError",
    "attempt",
    "raise_for",
    # style / config
    "DEFAULT_STYLE",
    "RenderStyle",
    "load_style",
    "load_style_or_default",
]

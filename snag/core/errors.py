"""Crossing between snags and Python exceptions.

Inside a program, failures travel as `Result[T, Snag]`. At the edges they
sometimes have to become exceptions (a framework callback that must raise),
or exceptions from third-party code have to become snags.
"""

from __future__ import annotations

from collections.abc import Callable

from .result import Err, Ok, Result
from .snag import Snag, map_error

__all__ = ["SnagError", "raise_for", "attempt"]


class SnagError(Exception):
    """Exception carrying a Snag. `str()` gives the one-line rendering."""

    def __init__(self, snag: Snag) -> None:
        super().__init__(str(snag))
        self.snag = snag


def raise_for[T](result: Result[T, Snag]) -> T:
    """Return the Ok value, or raise SnagError for an Err.

    Raises:
        SnagError: If `result` is an Err.
    """
    return result.unwrap()


def attempt[T](
    fn: Callable[..., T],
    *args: object,
    describer: Callable[[Exception], str] = str,
    **kwargs: object,
) -> Result[T, Snag]:
    """Call `fn` and turn a raised exception into a root-cause Snag.

    A SnagError raised by `fn` keeps its Snag, layers included. Any other
    Exception is passed to `describer`, which produces the issue text.
    BaseException subclasses such as KeyboardInterrupt propagate.

    Example:
        result = attempt(json.loads, text, describer=lambda e: f"bad JSON: {e}")
        result = context(result, "Could not parse manifest")
    """
    try:
        return Ok(fn(*args, **kwargs))
    except SnagError as e:
        return Err(e.snag)
    except Exception as e:
        failed: Result[T, Exception] = Err(e)
        return map_error(failed, describer)

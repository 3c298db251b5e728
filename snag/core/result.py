"""Two-variant outcome type used to carry snags.

An operation either succeeds with a value (`Ok`) or fails with an error
(`Err`). Snag-producing code returns `Result[T, Snag]`, and each caller adds
a description of what it was doing on the way up:

    def read_config(path: Path) -> Result[str, Snag]:
        if not path.exists():
            return error(f"{path} does not exist")
        return Ok(path.read_text())

    match read_config(path).context("Could not load settings"):
        case Ok(text):
            ...
        case Err(snag):
            sys.stderr.write(pretty_print(snag))

Foreign error values (exit codes, exceptions) may sit in an `Err` too;
`map_error` turns them into snags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, TypeGuard

if TYPE_CHECKING:
    from .snag import Snag

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"expected a failed result, got Ok({self.value!r})")

    def context(self, issue: str) -> Ok[T]:
        """Return self; there is nothing to describe."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome.

    Attributes:
        error: The error value; a `Snag` once it has passed through
            `map_error` or was created with `error()`.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise instead of returning a value.

        Raises:
            SnagError: If the error is a Snag; it is carried unchanged.
            ValueError: For any other error value.
        """
        # Imported here: both modules build on this one.
        from .errors import SnagError
        from .snag import Snag

        if isinstance(self.error, Snag):
            raise SnagError(self.error)
        raise ValueError(f"expected a successful result, got Err({self.error!r})")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def context(self: Err[Snag], issue: str) -> Err[Snag]:
        """Layer `issue` on top of the carried Snag."""
        return Err(self.error.layer(issue))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow a Result to `Ok` for static type checkers."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow a Result to `Err` for static type checkers.

    Example:
        result = context(load(path), "Could not load")
        if is_err(result):
            print(line_print(result.error))
    """
    return isinstance(result, Err)

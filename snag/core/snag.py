"""The Snag error value and the functions that build and layer it.

A Snag is an issue string plus the trail of issues recorded before it.
Every layering step puts the current issue at the front of the trail and
installs a new, more general issue on top:

    snag = new("Directory not writable")
    snag = layer(snag, "Could not open file")
    snag = layer(snag, "Save failed")

    snag.issue  # "Save failed"
    snag.cause  # ("Could not open file", "Directory not writable")
    snag == Snag("Save failed", ["Could not open file", "Directory not writable"])

Each Snag keeps a private reference to the Snag it was layered on, so
layering is O(1) and never touches existing values. `cause` is materialized
on access.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .render import line_print
from .result import Err, Ok, Result

__all__ = ["Snag", "new", "error", "layer", "context", "map_error"]


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class Snag:
    """Immutable error value: an issue and its most-recent-first causes.

    Attributes:
        issue: The outermost description of what went wrong.
        cause: Prior issues, most recent first (read-only property).
    """

    issue: str
    _below: Snag | None

    __match_args__ = ("issue", "cause")

    def __init__(self, issue: str, cause: Iterable[str] = ()) -> None:
        if isinstance(cause, str):
            raise TypeError("cause must be a sequence of issue strings, not a single str")
        below: Snag | None = None
        for entry in reversed(tuple(cause)):
            below = Snag._on_top(entry, below)
        object.__setattr__(self, "issue", issue)
        object.__setattr__(self, "_below", below)

    @classmethod
    def _on_top(cls, issue: str, below: Snag | None) -> Snag:
        snag = object.__new__(cls)
        object.__setattr__(snag, "issue", issue)
        object.__setattr__(snag, "_below", below)
        return snag

    @property
    def cause(self) -> tuple[str, ...]:
        """Prior issues, most recent first. The last entry is the root cause."""
        return tuple(snag.issue for snag in self._layers_below())

    @property
    def root_cause(self) -> str:
        """The first issue ever recorded in this chain."""
        root = self
        while root._below is not None:
            root = root._below
        return root.issue

    def layer(self, issue: str) -> Snag:
        """Return a new Snag with `issue` on top of this one."""
        return Snag._on_top(issue, self)

    def _layers_below(self) -> Iterator[Snag]:
        node = self._below
        while node is not None:
            yield node
            node = node._below

    def __len__(self) -> int:
        return 1 + sum(1 for _ in self._layers_below())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snag):
            return NotImplemented
        if self is other:
            return True
        return self.issue == other.issue and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.issue, self.cause))

    def __reduce__(self) -> tuple[type[Snag], tuple[str, tuple[str, ...]]]:
        # Flat form; the linked chain would pickle one frame per layer.
        return (Snag, (self.issue, self.cause))

    def __repr__(self) -> str:
        return f"Snag(issue={self.issue!r}, cause={self.cause!r})"

    def __str__(self) -> str:
        return line_print(self)


def new(issue: str) -> Snag:
    """Create a root-cause Snag with no layers below it."""
    return Snag(issue)


def error[T](issue: str) -> Result[T, Snag]:
    """Fail immediately with a fresh Snag."""
    return Err(new(issue))


def layer(snag: Snag, issue: str) -> Snag:
    """Add `issue` as the new outermost layer of `snag`.

    The previous issue becomes the first cause entry; the previous causes
    follow in their existing order.
    """
    return snag.layer(issue)


def context[T](result: Result[T, Snag], issue: str) -> Result[T, Snag]:
    """Describe what the caller was trying to do if `result` failed.

    Ok results are returned unchanged. Err results get `issue` layered on
    top of their Snag.

    Example:
        text = context(read_file(path), f"Could not read {path}")
    """
    return result.context(issue)


def map_error[T, E](result: Result[T, E], describer: Callable[[E], str]) -> Result[T, Snag]:
    """Convert a foreign error value into a root-cause Snag.

    `describer` is called once, and only for an Err. Its return value becomes
    the issue of a new Snag; the original error value is dropped.

    Example:
        result = map_error(run(cmd), lambda rc: f"exit status {rc}")
        result = context(result, "Build failed")
    """
    if isinstance(result, Ok):
        return result
    return Err(new(describer(result.error)))

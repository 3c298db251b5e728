"""Console output abstraction.

A small protocol for styled terminal output with a Rich backend and a
capturing backend for tests. Reporting code depends on the protocol only,
so the core package never needs Rich.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()  # Red "error:" prefix
    DIM = auto()  # Muted text, used for cause lines
    HEADER = auto()  # Section header

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def error(self, message: str) -> None:
        """Print an error message with an `error:` prefix."""
        ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...

    def newline(self) -> None:
        """Print an empty line."""
        ...


class RichConsole:
    """Console implementation using the Rich library.

    Messages are escaped, so brackets in issue text are never read as markup.
    """

    def __init__(self, *, stderr: bool = True) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._console = Console(stderr=stderr)
        self._escape = escape
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
            Style.HEADER: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(self._escape(message), style=rich_style)
        else:
            self._console.print(self._escape(message))

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def header(self, message: str) -> None:
        self._console.print(f"[bold]{self._escape(message)}[/bold]")

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def count(self, style: Style) -> int:
        """Count outputs with a specific style."""
        return sum(1 for o in self.outputs if o.style == style)

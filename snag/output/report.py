"""Writing snags to a console.

Same layout as `pretty_print`, with the issue styled as an error and the
cause lines dimmed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snag.core.result import Err, Result
from snag.core.snag import Snag
from snag.core.style import DEFAULT_STYLE, RenderStyle
from snag.output.console import Style

if TYPE_CHECKING:
    from snag.output.console import ConsoleProtocol

__all__ = ["report", "report_result"]


def report(snag: Snag, console: ConsoleProtocol, *, style: RenderStyle = DEFAULT_STYLE) -> None:
    """Print a Snag with its causes, most recent first.

    The console's own error prefix is used unless `style` sets a different
    one, in which case the whole issue line is printed in the error style.
    """
    if style.prefix == DEFAULT_STYLE.prefix:
        console.error(snag.issue)
    else:
        console.print(f"{style.prefix}{snag.issue}", Style.ERROR)
    cause = snag.cause
    if not cause:
        return
    console.newline()
    console.header(style.cause_header)
    for index, entry in enumerate(cause):
        console.print(f"{style.indent}{index}: {entry}", Style.DIM)


def report_result[T](
    result: Result[T, Snag],
    console: ConsoleProtocol,
    *,
    style: RenderStyle = DEFAULT_STYLE,
) -> bool:
    """Report the Snag of a failed result.

    Returns:
        True for Ok (nothing printed), False after reporting an Err.
    """
    if isinstance(result, Err):
        report(result.error, console, style=style)
        return False
    return True

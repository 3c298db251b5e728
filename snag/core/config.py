"""Loading a RenderStyle from TOML.

The style lives in a `[tool.snag]` table (so it can sit in pyproject.toml)
or in a top-level `[snag]` table of a dedicated file:

    [tool.snag]
    prefix = "fatal: "
    separator = " | "
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from .result import Err, Ok, Result
from .snag import Snag, context, error, map_error
from .style import DEFAULT_STYLE, RenderStyle

__all__ = ["load_style", "load_style_or_default"]

TomlTable = dict[str, object]


def _table(data: TomlTable, key: str) -> TomlTable | None:
    # tomllib only produces str keys, so a dict check is enough.
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _read_toml(path: Path) -> Result[TomlTable, Exception]:
    try:
        content = path.read_bytes()
        return Ok(tomllib.loads(content.decode("utf-8")))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        return Err(e)


def _describe(exc: Exception) -> str:
    match exc:
        case PermissionError():
            return "Permission denied"
        case IsADirectoryError():
            return "Path is a directory"
        case UnicodeDecodeError(reason=reason):
            return f"File is not valid UTF-8: {reason}"
        case tomllib.TOMLDecodeError():
            return f"Invalid TOML syntax: {exc}"
        case _:
            return str(exc)


def _style_table(data: TomlTable) -> Result[TomlTable | None, Snag]:
    tool = _table(data, "tool") or {}
    for owner, name in ((tool, "[tool.snag]"), (data, "[snag]")):
        if "snag" not in owner:
            continue
        table = _table(owner, "snag")
        if table is None:
            return error(f"{name} must be a table")
        return Ok(table)
    return Ok(None)


def load_style(path: Path) -> Result[RenderStyle, Snag]:
    """Load a render style from a TOML file.

    Args:
        path: TOML file holding a `[tool.snag]` or `[snag]` table.

    Returns:
        Ok(RenderStyle) on success; Ok(DEFAULT_STYLE) if the file or the table
        does not exist; Err(Snag) if the file cannot be read or is malformed.
    """
    if not path.exists():
        return Ok(DEFAULT_STYLE)

    parsed = context(map_error(_read_toml(path), _describe), f"Could not read {path}")
    if isinstance(parsed, Err):
        return context(parsed, "Could not load render style")

    table = context(_style_table(parsed.value), f"Bad style table in {path}")
    if isinstance(table, Err):
        return context(table, "Could not load render style")
    if table.value is None:
        return Ok(DEFAULT_STYLE)
    return Ok(RenderStyle.from_dict(table.value))


def load_style_or_default(path: Path) -> RenderStyle:
    """Load a style, falling back to DEFAULT_STYLE on any failure."""
    return load_style(path).unwrap_or(DEFAULT_STYLE)

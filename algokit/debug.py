"""Compact formatting of values and named debug output on standard error."""

from __future__ import annotations

import inspect
import os
import sys
from collections.abc import Iterable, Mapping
from typing import Any


def _ordered(items: Iterable[Any]) -> list[Any]:
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def format_value(value: Any) -> str:
    """Render a value: T/F for booleans, quoted strings, ``{...}`` for containers."""
    if isinstance(value, bool):
        return "T" if value else "F"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, tuple):
        return "(" + ",".join(map(format_value, value)) + ")"
    if isinstance(value, Mapping):
        return "{" + ",".join(format_value(item) for item in value.items()) + "}"
    if isinstance(value, (set, frozenset)):
        return "{" + ",".join(map(format_value, _ordered(value))) + "}"
    if isinstance(value, list) and value and all(isinstance(row, list) for row in value):
        return "{\n" + ",\n".join(map(format_value, value)) + "}\n"
    if isinstance(value, (bytes, bytearray)):
        return str(value)
    if isinstance(value, Iterable):
        return "{" + ",".join(map(format_value, value)) + "}"
    return str(value)


def _split_names(names: str, count: int) -> list[str]:
    """Split ``names`` at top-level commas into exactly ``count`` pieces."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(names):
        if len(parts) == count - 1:
            break
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(names[start:i])
            start = i + 1
    if len(parts) != count - 1:
        raise ValueError(f"expected {count} names in {names!r}")
    parts.append(names[start:])
    return parts


def format_debug(names: str, *args: Any) -> str:
    """Pair comma-separated ``names`` with ``args``: ``[a = 1 || b = 2]``."""
    if not args:
        raise ValueError("at least one value is required")
    pieces = [f"{name} = {format_value(value)}" for name, value in zip(_split_names(names, len(args)), args)]
    return "[" + " ||".join(pieces) + "]"


def debug(names: str, *args: Any) -> None:
    """Write named values with the caller's line number to standard error.

    Nothing is written when the ONLINE_JUDGE environment variable is set.
    """
    if os.environ.get("ONLINE_JUDGE") is not None:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    line = caller.f_lineno if caller is not None else 0
    print(f"{line}: {format_debug(names, *args)}", file=sys.stderr)
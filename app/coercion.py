"""Shared value coercion for form fields and spreadsheet cells."""
from __future__ import annotations

from typing import Any

NOT_SPECIFIED = "Not Specified"


def as_list(value: Any) -> list[Any]:
    """Normalise a field that may arrive as a single value or a list.

    ``None`` becomes an empty list, a list or tuple is returned as a list,
    anything else is wrapped into a one-element list.
    """

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def is_blank(value: Any) -> bool:
    """True for values that count as "not provided" in a submitted row."""

    if value is None or value == "":
        return True
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def sheet_cell(value: Any, default: str = NOT_SPECIFIED) -> str:
    """Render one spreadsheet cell.

    Lists are joined with ``", "``; blank values fall back to ``default``.
    """

    if isinstance(value, (list, tuple)):
        return ", ".join(_text(item) for item in value)
    if is_blank(value):
        return default
    return _text(value)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

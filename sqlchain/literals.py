"""Typed value to SQL literal serialization.

Every place a value is inlined into a statement (comparisons, IN lists,
SET assignments and VALUES rows) goes through ``to_sql_literal``, so a value
renders the same way wherever it appears.
"""

import math
from decimal import Decimal
from typing import Any

from pydantic import RootModel

from .exceptions import UnsupportedValueError

NULL = "NULL"
PLACEHOLDER = "?"

SQL_KEYWORD_LITERALS: frozenset[str] = frozenset({NULL, "NOW()", "UUID()"})
"""Strings rendered unquoted and upper-cased (matched case-insensitively)."""


class Ref(RootModel[Any]):
    """Reference to a value, standing in for a nullable pointer.

    ``Ref(None)`` (or ``Ref()``) renders as ``NULL``; any other reference is
    dereferenced once and its target rendered in its place.
    """

    root: Any = None


def _format_float(value: float) -> str:
    """Shortest round-tripping decimal text, never in exponent notation."""
    if not math.isfinite(value):
        raise UnsupportedValueError(value, f"Cannot render non-finite float {value!r} as SQL")
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_string(value: str) -> str:
    upper = value.upper()
    if upper in SQL_KEYWORD_LITERALS:
        return upper
    if value == PLACEHOLDER:
        return PLACEHOLDER
    return "'" + value.replace("'", "''") + "'"


def to_sql_literal(value: Any) -> str:
    """Render value as the SQL literal text to embed in a statement.

    Supported: int, float, bool, str, None and a ``Ref`` to one of these.
    Strings ``NULL``, ``NOW()`` and ``UUID()`` (any case) render unquoted and
    upper-cased; a bare ``?`` passes through as a placeholder.

    Raises:
        UnsupportedValueError: For any other type, and for non-finite floats.
    """
    if isinstance(value, Ref):
        value = value.root
        if isinstance(value, Ref):
            raise UnsupportedValueError(value, "Cannot render a reference to a reference")
    if value is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _format_string(value)
    raise UnsupportedValueError(value)


__all__ = ["NULL", "PLACEHOLDER", "SQL_KEYWORD_LITERALS", "Ref", "to_sql_literal"]

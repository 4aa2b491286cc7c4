"""Condition fragments for WHERE clauses.

Each function returns a plain SQL fragment. Combinators (``and_``, ``or_``)
take fragments and return a parenthesized fragment, so their output can be
fed back into another combinator to build nested boolean trees::

    or_(eq("age", "10"), and_(eq("x", "1"), eq("y", "2")))
    # "(age = '10' OR (x = '1' AND y = '2'))"
"""

from typing import Any

from .exceptions import EmptyFieldError
from .literals import to_sql_literal
from .utils.flatten import flatten
from .validators import is_empty


def compare(field: str, value: Any, operator: str) -> str:
    """Build ``field <operator> <literal>``.

    ``None`` (or a null ``Ref``) renders as ``NULL`` under the requested
    operator: ``compare("a", None, "=")`` gives ``a = NULL``.

    Raises:
        EmptyFieldError: If field is empty.
        UnsupportedValueError: If value has no SQL literal.
    """
    if is_empty(field):
        raise EmptyFieldError("field name cannot be empty", details={"operator": operator})
    return f"{field} {operator} {to_sql_literal(value)}"


def eq(field: str, value: Any) -> str:
    """Equality condition (``field = value``)."""
    return compare(field, value, "=")


def like(field: str, value: Any) -> str:
    """LIKE condition; the pattern is used as given (no escaping of ``%`` or ``_``)."""
    return compare(field, value, "LIKE")


def is_(field: str, value: Any) -> str:
    """IS condition (e.g. ``is_("deleted_at", None)`` gives ``deleted_at IS NULL``)."""
    return compare(field, value, "IS")


def in_(field: str, *values: Any) -> str:
    """IN condition over all values, with nested lists/tuples flattened.

    Returns an empty string when there is no value to compare against.
    """
    if is_empty(field):
        raise EmptyFieldError("field name cannot be empty", details={"operator": "IN"})
    literals = [to_sql_literal(value) for value in flatten(values)]
    if not literals:
        return ""
    return f"{field} IN ({','.join(literals)})"


def _combine(symbol: str, fragments: tuple[str, ...]) -> str:
    if len(fragments) < 2:
        return ""
    return "(" + (" " + symbol + " ").join(fragments) + ")"


def and_(*fragments: str) -> str:
    """Join fragments with AND in parentheses; empty string for fewer than two."""
    return _combine("AND", fragments)


def or_(*fragments: str) -> str:
    """Join fragments with OR in parentheses; empty string for fewer than two."""
    return _combine("OR", fragments)


__all__ = ["compare", "eq", "like", "is_", "in_", "and_", "or_"]

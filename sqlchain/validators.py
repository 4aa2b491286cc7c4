"""Argument checks used by Statement builder methods before they mutate state."""

import re

DESC = "DESC"
"""Descending order."""
ASC = "ASC"
"""Ascending order."""

ORDER_TYPES: tuple[str, ...] = (ASC, DESC)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_empty(s: str) -> bool:
    """Return True for an empty (or missing) name."""
    return not s


def is_valid_int(val: str) -> bool:
    """Return True if val is a base-10 integer string (optional sign, digits only)."""
    if not isinstance(val, str):
        return False
    return _INT_PATTERN.fullmatch(val) is not None


def is_valid_order_type(val: str) -> bool:
    """Return True if val is ``ASC`` or ``DESC``, case-insensitively."""
    if not isinstance(val, str):
        return False
    return val.upper() in ORDER_TYPES

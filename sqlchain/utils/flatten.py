"""Flatten nested argument lists into a single sequence of scalar values."""

from typing import Any, Iterable


def flatten(values: Iterable[Any]) -> list[Any]:
    """Return values with nested lists and tuples expanded in place, in order.

    Strings, ``Ref`` instances and other scalars are kept whole.
    """
    result = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(flatten(value))
        else:
            result.append(value)
    return result

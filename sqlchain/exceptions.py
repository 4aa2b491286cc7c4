"""Exceptions raised by sqlchain.

Malformed structural input (empty table names, bad LIMIT strings, ...) never
raises; these are reserved for programmer errors that would otherwise produce
a statement missing a value.
"""


class SqlChainError(Exception):
    """Base exception for all sqlchain errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class EmptyFieldError(SqlChainError, ValueError):
    """Raised when a comparison is built for an empty field name."""

    pass


class UnsupportedValueError(SqlChainError, TypeError):
    """Raised when a value of a type with no SQL literal reaches the serializer.

    Attributes:
        value: The rejected value
    """

    def __init__(self, value, reason: str | None = None):
        message = reason or (
            f"Unsupported value type {type(value).__name__}: "
            "only numbers, strings, booleans, None and Ref are supported"
        )
        super().__init__(message, details={"value": value, "type": type(value).__name__})
        self.value = value

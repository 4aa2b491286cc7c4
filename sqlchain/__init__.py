"""sqlchain: compose SQL statements through chained calls, with typed literal rendering."""

from .statement import Statement, WhereClause, new
from .conditions import compare, eq, like, is_, in_, and_, or_
from .literals import Ref, to_sql_literal
from .validators import ASC, DESC, is_valid_order_type
from .exceptions import SqlChainError, EmptyFieldError, UnsupportedValueError

__all__ = [
    "ASC",
    "DESC",
    "EmptyFieldError",
    "Ref",
    "SqlChainError",
    "Statement",
    "UnsupportedValueError",
    "WhereClause",
    "and_",
    "compare",
    "eq",
    "in_",
    "is_",
    "is_valid_order_type",
    "like",
    "new",
    "or_",
    "to_sql_literal",
]

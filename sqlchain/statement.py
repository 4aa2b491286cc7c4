"""Fluent SQL statement builder.

A ``Statement`` starts from one base clause (``SELECT * FROM users``,
``INSERT INTO users``, ``UPDATE users``, ...) and collects joins, WHERE
conditions, grouping, ordering, pagination and insert/update payloads through
chained calls. Nothing is rendered until ``sql`` (or ``str()``) is read, and
clauses are always emitted in the same order whatever order they were set in::

    statement = new("SELECT * FROM users").limit("10").order("name", DESC)
    statement.where().eq("name", "John").or_(eq("age", 12), is_("age", None))
    statement.sql
    # SELECT * FROM users WHERE name = 'John' AND (age = 12 OR age IS NULL)
    #   ORDER BY name DESC LIMIT 10

Builder methods ignore malformed structural arguments (empty names, invalid
order direction, non-integer LIMIT/OFFSET, ...) and leave the statement
unchanged. Values that cannot be rendered as SQL literals raise
``UnsupportedValueError``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from . import conditions
from .literals import to_sql_literal
from .validators import is_empty, is_valid_int, is_valid_order_type

logger = logging.getLogger("sqlchain")


class Statement(BaseModel):
    """One in-progress SQL command.

    Every clause is stored already rendered (or, for VALUES rows, as raw
    values); ``sql`` assembles them in a fixed order.
    """

    model_config = {"arbitrary_types_allowed": True}

    base: list[str] = Field(default_factory=list)
    """Base clause followed by JOIN fragments, joined by single spaces."""
    where_fragments: list[str] = Field(default_factory=list)
    """Top-level WHERE conditions, ANDed together."""
    group_by_clause: str = ""
    having_clause: str = ""
    """Only rendered when group_by_clause is set."""
    order_clause: str = ""
    limit_clause: str = ""
    offset_clause: str = ""
    insert_column_names: list[str] = Field(default_factory=list)
    value_rows: list[list[Any]] = Field(default_factory=list)
    """Rows for VALUES, as raw values (arity not checked against insert_column_names)."""
    set_assignments: list[str] = Field(default_factory=list)
    """``column = literal`` fragments for UPDATE ... SET."""
    returning_columns: list[str] = Field(default_factory=list)

    @classmethod
    def new(cls, base: str) -> Statement:
        """Create a statement seeded with the given base clause."""
        return cls(base=[base])

    def query(self) -> Statement:
        """Return this statement (counterpart of ``WhereClause.query``)."""
        return self

    def clone(self) -> Statement:
        """Return an independent copy; mutating it leaves this statement unchanged."""
        d = self.model_dump(exclude={"value_rows"})
        d["value_rows"] = [list(row) for row in self.value_rows]
        return type(self)(**d)

    # --- joins ---

    def _join(self, kind: str, table: str, on: str) -> Statement:
        if is_empty(table) or is_empty(on):
            logger.debug("Ignoring %s JOIN: table=%r on=%r", kind, table, on)
            return self
        self.base.append(f"{kind} JOIN {table} ON {on}")
        return self

    def inner_join(self, table: str, on: str) -> Statement:
        """Append ``INNER JOIN table ON on``."""
        return self._join("INNER", table, on)

    def left_join(self, table: str, on: str) -> Statement:
        """Append ``LEFT JOIN table ON on``."""
        return self._join("LEFT", table, on)

    def right_join(self, table: str, on: str) -> Statement:
        """Append ``RIGHT JOIN table ON on``."""
        return self._join("RIGHT", table, on)

    def full_join(self, table: str, on: str) -> Statement:
        """Append ``FULL JOIN table ON on``."""
        return self._join("FULL", table, on)

    def cross_join(self, table: str) -> Statement:
        """Append ``CROSS JOIN table``."""
        if is_empty(table):
            logger.debug("Ignoring CROSS JOIN: empty table")
            return self
        self.base.append(f"CROSS JOIN {table}")
        return self

    # --- filtering, grouping, ordering, pagination ---

    def where(self) -> WhereClause:
        """Return the WHERE builder for this statement."""
        return WhereClause(statement=self)

    def group_by(self, *columns: str) -> Statement:
        """Set ``GROUP BY`` to the given columns (replaces any previous grouping)."""
        if not columns or any(is_empty(c) for c in columns):
            logger.debug("Ignoring GROUP BY: columns=%r", columns)
            return self
        self.group_by_clause = "GROUP BY " + ", ".join(columns)
        return self

    def having(self, condition: str) -> Statement:
        """Set ``HAVING``; it is only rendered if ``group_by`` is set too."""
        if is_empty(condition):
            logger.debug("Ignoring HAVING: empty condition")
            return self
        self.having_clause = f"HAVING {condition}"
        return self

    def order(self, by: str, direction: str = "ASC") -> Statement:
        """Set ``ORDER BY by direction``; direction must be ASC or DESC (any case)."""
        if is_empty(by) or not is_valid_order_type(direction):
            logger.debug("Ignoring ORDER BY: by=%r direction=%r", by, direction)
            return self
        self.order_clause = f"ORDER BY {by} {direction.upper()}"
        return self

    @staticmethod
    def _integer_text(val: str | int) -> str | None:
        if isinstance(val, int) and not isinstance(val, bool):
            return str(val)
        if is_valid_int(val):
            return val
        return None

    def limit(self, val: str | int) -> Statement:
        """Set ``LIMIT``; val must be an integer or an integer string."""
        text = self._integer_text(val)
        if text is None:
            logger.debug("Ignoring LIMIT %r: not an integer", val)
            return self
        self.limit_clause = f"LIMIT {text}"
        return self

    def offset(self, val: str | int) -> Statement:
        """Set ``OFFSET``; val must be an integer or an integer string."""
        text = self._integer_text(val)
        if text is None:
            logger.debug("Ignoring OFFSET %r: not an integer", val)
            return self
        self.offset_clause = f"OFFSET {text}"
        return self

    # --- INSERT / UPDATE payloads ---

    def insert_columns(self, *columns: str) -> Statement:
        """Set the INSERT column list (replaces any previous list)."""
        if not columns or any(is_empty(c) for c in columns):
            logger.debug("Ignoring INSERT columns: %r", columns)
            return self
        self.insert_column_names = list(columns)
        return self

    def values(self, *values: Any) -> Statement:
        """Append one row to VALUES.

        Raises:
            UnsupportedValueError: If any value has no SQL literal.
        """
        if not values:
            logger.debug("Ignoring empty VALUES row")
            return self
        for value in values:
            to_sql_literal(value)
        self.value_rows.append(list(values))
        return self

    def set(self, column: str, value: Any) -> Statement:
        """Append ``column = value`` to the UPDATE ``SET`` list.

        Raises:
            UnsupportedValueError: If value has no SQL literal.
        """
        if is_empty(column):
            logger.debug("Ignoring SET: empty column")
            return self
        self.set_assignments.append(f"{column} = {to_sql_literal(value)}")
        return self

    def returning(self, *columns: str) -> Statement:
        """Set the ``RETURNING`` column list (replaces any previous list)."""
        if not columns or any(is_empty(c) for c in columns):
            logger.debug("Ignoring RETURNING: columns=%r", columns)
            return self
        self.returning_columns = list(columns)
        return self

    # --- rendering ---

    @property
    def sql_values(self) -> str:
        """``VALUES (...), (...)`` clause, or empty string when there is no row."""
        if not self.value_rows:
            return ""
        rows = ("(" + ", ".join(map(to_sql_literal, row)) + ")" for row in self.value_rows)
        return "VALUES " + ", ".join(rows)

    @property
    def sql(self) -> str:
        """Return the SQL text for the current state.

        Clause order: base and joins, SET, WHERE, GROUP BY, ORDER BY, HAVING,
        LIMIT, OFFSET, INSERT columns, VALUES, RETURNING.
        """
        parts = [" ".join(self.base)]
        if self.set_assignments:
            parts.append("SET " + ", ".join(self.set_assignments))
        if self.where_fragments:
            parts.append("WHERE " + " AND ".join(self.where_fragments))
        if self.group_by_clause:
            parts.append(self.group_by_clause)
        if self.order_clause:
            parts.append(self.order_clause)
        if self.having_clause and self.group_by_clause:
            parts.append(self.having_clause)
        if self.limit_clause:
            parts.append(self.limit_clause)
        if self.offset_clause:
            parts.append(self.offset_clause)
        if self.insert_column_names:
            parts.append("(" + ", ".join(self.insert_column_names) + ")")
        if self.value_rows:
            parts.append(self.sql_values)
        if self.returning_columns:
            parts.append("RETURNING " + ", ".join(self.returning_columns))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.sql


class WhereClause(BaseModel):
    """WHERE builder bound to a statement.

    Each call appends one top-level condition to the statement; top-level
    conditions are ANDed together. Use ``or_``/``and_`` with fragments from
    ``sqlchain.conditions`` to express grouping within one condition.
    """

    model_config = {"arbitrary_types_allowed": True}

    statement: Statement

    def query(self) -> Statement:
        """Return the owning statement to continue with statement-level calls."""
        return self.statement

    def _append(self, fragment: str) -> WhereClause:
        self.statement.where_fragments.append(fragment)
        return self

    def _comparison(self, field: str, value: Any, operator: str) -> WhereClause:
        if is_empty(field):
            logger.debug("Ignoring WHERE %s: empty field", operator)
            return self
        return self._append(conditions.compare(field, value, operator))

    def eq(self, field: str, value: Any) -> WhereClause:
        """Add ``field = value``."""
        return self._comparison(field, value, "=")

    def like(self, field: str, value: Any) -> WhereClause:
        """Add ``field LIKE value``."""
        return self._comparison(field, value, "LIKE")

    def is_(self, field: str, value: Any) -> WhereClause:
        """Add ``field IS value``."""
        return self._comparison(field, value, "IS")

    def in_(self, field: str, *values: Any) -> WhereClause:
        """Add ``field IN (...)``; ignored when no value is given."""
        if is_empty(field):
            logger.debug("Ignoring WHERE IN: empty field")
            return self
        fragment = conditions.in_(field, *values)
        if not fragment:
            logger.debug("Ignoring WHERE %s IN: no values", field)
            return self
        return self._append(fragment)

    def and_(self, *fragments: str) -> WhereClause:
        """Add ``(f1 AND f2 ...)``; ignored with fewer than two fragments."""
        if len(fragments) < 2:
            logger.debug("Ignoring WHERE AND: %d fragment(s)", len(fragments))
            return self
        return self._append(conditions.and_(*fragments))

    def or_(self, *fragments: str) -> WhereClause:
        """Add ``(f1 OR f2 ...)``; ignored with fewer than two fragments."""
        if len(fragments) < 2:
            logger.debug("Ignoring WHERE OR: %d fragment(s)", len(fragments))
            return self
        return self._append(conditions.or_(*fragments))

    @property
    def sql(self) -> str:
        """SQL text of the owning statement."""
        return self.statement.sql

    def __str__(self) -> str:
        return self.statement.sql


def new(base: str) -> Statement:
    """Create a statement seeded with the given base clause (e.g. ``SELECT * FROM t``)."""
    return Statement.new(base)


__all__ = ["Statement", "WhereClause", "new"]

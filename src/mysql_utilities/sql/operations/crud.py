"""
SQL statement builders for SELECT / INSERT / UPDATE / DELETE.

Builders are pure: they only assemble text. Deciding which columns to
write (schema lookups, key resolution) happens in
``mysql_utilities.connection.crud``.
"""

from typing import Any, List, Mapping, Optional, Protocol, Sequence, Union

from ..core.conditions import compile_order, compile_where
from ..core.statement import SqlStatement

FilterSpec = Mapping[str, Any]
OrderSpec = Mapping[str, str]
SelectFields = Union[str, Sequence[str]]


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str
    identifier_quote: str

    def quote(self, identifier: str) -> str: ...
    def literal(self, value: Any) -> str: ...


def limit_clause(limit: Sequence[int]) -> str:
    """
    Render a LIMIT argument list from a 1- or 2-element sequence.

    Examples:
        >>> limit_clause([10])
        '10'
        >>> limit_clause((20, 10))
        '20,10'
    """
    if isinstance(limit, (str, bytes)) or len(limit) not in (1, 2):
        raise ValueError(f"limit must have one or two elements, got {limit!r}")
    parts = []
    for item in limit:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValueError(f"limit elements must be integers, got {item!r}")
        parts.append(str(item))
    return ",".join(parts)


class StatementBuilder:
    """
    High-level builder for CRUD statements.

    Example:
        >>> from mysql_utilities.sql import MySQLDialect, StatementBuilder
        >>> builder = StatementBuilder(MySQLDialect())
        >>> print(builder.delete("users", {"id": 5}))
        DELETE FROM users WHERE id = 5
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the StatementBuilder.

        Args:
            dialect: SQL dialect to use for quoting and literals
        """
        self.dialect = dialect

    def where(self, spec: Optional[FilterSpec]) -> str:
        return compile_where(spec, self.dialect.literal, self.dialect.identifier_quote)

    def order(self, spec: Optional[OrderSpec]) -> str:
        return compile_order(spec, self.dialect.identifier_quote)

    def key_predicate(self, column: str, value: Any) -> str:
        """Equality predicate on a key column, always value-escaped."""
        return f"{self.dialect.quote(column)} = {self.dialect.literal(value)}"

    def select_list(self, fields: SelectFields) -> str:
        # A plain string is a caller-written select list and is kept verbatim
        if isinstance(fields, str):
            return fields
        return ", ".join(self.dialect.quote(field) for field in fields)

    def select(
        self,
        table: str,
        fields: SelectFields = "*",
        where: Optional[FilterSpec] = None,
        order: Optional[OrderSpec] = None,
        limit: Optional[Sequence[int]] = None,
    ) -> SqlStatement:
        """
        Build a SELECT statement.

        Args:
            table: Table name
            fields: Select list string or sequence of column names
            where: Filter mapping (omitted from SQL when empty)
            order: Field -> direction mapping
            limit: Optional 1- or 2-element LIMIT pair

        Returns:
            SELECT statement
        """
        sql = f"SELECT {self.select_list(fields)} FROM {self.dialect.quote(table)}"
        predicate = self.where(where)
        if predicate:
            sql += f" WHERE {predicate}"
        ordering = self.order(order)
        if ordering:
            sql += f" ORDER BY {ordering}"
        if limit is not None:
            sql += f" LIMIT {limit_clause(limit)}"
        return SqlStatement(sql, table)

    def count(self, table: str, where: Optional[FilterSpec] = None) -> SqlStatement:
        sql = f"SELECT count(*) FROM {self.dialect.quote(table)}"
        predicate = self.where(where)
        if predicate:
            sql += f" WHERE {predicate}"
        return SqlStatement(sql, table)

    def count_by_key(self, table: str, column: str, value: Any) -> SqlStatement:
        return SqlStatement(
            f"SELECT count(*) FROM {self.dialect.quote(table)} "
            f"WHERE {self.key_predicate(column, value)}",
            table,
        )

    def insert(
        self, table: str, columns: List[str], row: Mapping[str, Any]
    ) -> SqlStatement:
        """
        Build an INSERT statement for ``columns`` taken from ``row``.

        Columns are emitted in the given order.
        """
        quoted_cols = ", ".join(self.dialect.quote(c) for c in columns)
        values = ", ".join(self.dialect.literal(row[c]) for c in columns)
        return SqlStatement(
            f"INSERT INTO {self.dialect.quote(table)} ({quoted_cols}) VALUES ({values})",
            table,
        )

    def update(
        self, table: str, assignments: Mapping[str, Any], predicate: str
    ) -> SqlStatement:
        """
        Build an UPDATE statement.

        Args:
            table: Table name
            assignments: Column -> new value, in emission order
            predicate: Already compiled, non-empty WHERE predicate
        """
        data = ", ".join(
            f"{self.dialect.quote(column)} = {self.dialect.literal(value)}"
            for column, value in assignments.items()
        )
        return SqlStatement(
            f"UPDATE {self.dialect.quote(table)} SET {data} WHERE {predicate}", table
        )

    def delete(self, table: str, predicate: str) -> SqlStatement:
        return SqlStatement(
            f"DELETE FROM {self.dialect.quote(table)} WHERE {predicate}", table
        )

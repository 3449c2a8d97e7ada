"""
MySQL-specific SQL dialect implementation.

Provides value literal rendering, identifier quoting and the catalog
queries used for schema and server introspection.
"""

from typing import Any, Callable, Optional

import sqlalchemy as sa
from sqlalchemy.dialects import mysql

from ..core.identifier import escape_identifier
from ..core.statement import SqlStatement

# Literals are rendered into statements executed without parameters, so the
# dialect must not double percent signs the way the format paramstyle does.
_LITERAL_DIALECT = mysql.dialect(paramstyle="named")

TABLE_METADATA_COLUMNS = (
    "TABLE_NAME, TABLE_TYPE, ENGINE, VERSION, ROW_FORMAT, "
    "TABLE_ROWS, AVG_ROW_LENGTH, DATA_LENGTH, MAX_DATA_LENGTH, "
    "INDEX_LENGTH, DATA_FREE, AUTO_INCREMENT, CREATE_TIME, "
    "UPDATE_TIME, CHECK_TIME, TABLE_COLLATION, CHECKSUM, "
    "CREATE_OPTIONS, TABLE_COMMENT"
)


def render_literal(value: Any) -> str:
    """
    Render a Python value as an injection-safe MySQL literal.

    Examples:
        >>> render_literal("O'Reilly")
        "'O''Reilly'"
        >>> render_literal(42)
        '42'
    """
    compiled = sa.literal(value).compile(
        dialect=_LITERAL_DIALECT, compile_kwargs={"literal_binds": True}
    )
    return str(compiled)


class MySQLDialect:
    """MySQL SQL dialect implementation."""

    name = "mysql"

    def __init__(
        self, quote: str = "`", escape_value: Callable[[Any], str] = render_literal
    ):
        self.identifier_quote = quote
        self._escape_value = escape_value

    def quote(self, identifier: str) -> str:
        """Escape an identifier using MySQL syntax (backticks when needed)."""
        return escape_identifier(identifier, self.identifier_quote)

    def literal(self, value: Any) -> str:
        """Escape a value with the connection's value escaper."""
        return self._escape_value(value)

    # Schema introspection

    def show_full_columns(self, table: str) -> SqlStatement:
        return SqlStatement(f"SHOW FULL COLUMNS FROM {self.quote(table)}", table)

    def show_primary_key(self, table: str) -> SqlStatement:
        return SqlStatement(
            f"SHOW KEYS FROM {self.quote(table)} WHERE Key_name = 'PRIMARY'", table
        )

    def foreign_keys(self, table: str) -> SqlStatement:
        return SqlStatement(
            "SELECT CONSTRAINT_NAME, COLUMN_NAME, ORDINAL_POSITION, "
            "POSITION_IN_UNIQUE_CONSTRAINT, REFERENCED_TABLE_NAME, "
            "REFERENCED_COLUMN_NAME FROM information_schema.KEY_COLUMN_USAGE "
            "WHERE REFERENCED_TABLE_NAME IS NOT NULL AND "
            f"CONSTRAINT_SCHEMA = DATABASE() AND TABLE_NAME = {self.literal(table)} "
            "ORDER BY REFERENCED_TABLE_NAME",
            table,
        )

    def referential_constraints(self, table: str) -> SqlStatement:
        return SqlStatement(
            "SELECT CONSTRAINT_NAME, UNIQUE_CONSTRAINT_NAME, "
            "REFERENCED_TABLE_NAME, MATCH_OPTION, UPDATE_RULE, DELETE_RULE "
            "FROM information_schema.REFERENTIAL_CONSTRAINTS "
            f"WHERE TABLE_NAME = {self.literal(table)} "
            "ORDER BY CONSTRAINT_NAME",
            table,
        )

    def tables(self, database: Optional[str] = None) -> SqlStatement:
        """
        Build the table metadata query.

        Args:
            database: Schema to list; the connection's current database if omitted
        """
        schema = self.literal(database) if database is not None else "DATABASE()"
        return SqlStatement(
            f"SELECT {TABLE_METADATA_COLUMNS} "
            f"FROM information_schema.TABLES WHERE TABLE_SCHEMA = {schema}"
        )

    def table_status(self, table: str) -> SqlStatement:
        return SqlStatement(f"SHOW TABLE STATUS LIKE {self.literal(table)}", table)

    def show_index(self, table: str) -> SqlStatement:
        return SqlStatement(f"SHOW INDEX FROM {self.quote(table)}", table)

    # Server scope

    def show_databases(self) -> SqlStatement:
        return SqlStatement("SHOW DATABASES")

    def process_list(self) -> SqlStatement:
        return SqlStatement("SELECT * FROM information_schema.PROCESSLIST")

    def global_variables(self) -> SqlStatement:
        return SqlStatement("SELECT * FROM information_schema.GLOBAL_VARIABLES")

    def global_status(self) -> SqlStatement:
        return SqlStatement("SELECT * FROM information_schema.GLOBAL_STATUS")

    def users(self) -> SqlStatement:
        return SqlStatement("SELECT * FROM mysql.user")

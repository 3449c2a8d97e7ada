"""
mysql_utilities: declarative query construction for MySQL connections.

Usage:
    >>> from mysql_utilities import SQLAlchemyExecutor, upgrade
    >>> db = upgrade(SQLAlchemyExecutor(conn))
    >>> db.where({"id": 5, "year": ">2010"})
    "id = 5 AND year > '2010'"
    >>> await db.upsert("users", {"id": 5, "name": "Ann"})
"""

__version__ = "0.1.0"

from .connection import (
    ColumnMetadata,
    Connection,
    EmptyPredicate,
    EventEmitter,
    ExecutionResult,
    Executor,
    KeyRole,
    MissingKeySpec,
    MySQLUtilitiesError,
    SQLAlchemyExecutor,
    TableNotFound,
    upgrade,
)
from .sql import SqlStatement, compile_order, compile_where, escape_identifier

__all__ = [
    "ColumnMetadata",
    "Connection",
    "EmptyPredicate",
    "EventEmitter",
    "ExecutionResult",
    "Executor",
    "KeyRole",
    "MissingKeySpec",
    "MySQLUtilitiesError",
    "SQLAlchemyExecutor",
    "SqlStatement",
    "TableNotFound",
    "compile_order",
    "compile_where",
    "escape_identifier",
    "upgrade",
]

"""
Asynchronous query, introspection and CRUD layer over an execution collaborator.
"""

from .connection import Connection, upgrade
from .crud import resolve_key_column
from .errors import EmptyPredicate, MissingKeySpec, MySQLUtilitiesError, TableNotFound
from .events import EventEmitter
from .executor import Executor, with_diagnostics
from .models import ColumnMetadata, ExecutionResult, KeyRole
from .shapers import shape_column, shape_hash, shape_key_value, shape_row, shape_value
from .sqlalchemy_executor import SQLAlchemyExecutor

__all__ = [
    "Connection",
    "upgrade",
    "resolve_key_column",
    "MySQLUtilitiesError",
    "TableNotFound",
    "MissingKeySpec",
    "EmptyPredicate",
    "EventEmitter",
    "Executor",
    "with_diagnostics",
    "ColumnMetadata",
    "ExecutionResult",
    "KeyRole",
    "shape_row",
    "shape_value",
    "shape_column",
    "shape_hash",
    "shape_key_value",
    "SQLAlchemyExecutor",
]

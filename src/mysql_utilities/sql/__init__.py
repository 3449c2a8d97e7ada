"""
SQL module for statement generation.

This module provides reusable utilities for building MySQL statements with
conditional identifier quoting, the flat filter grammar, and CRUD builders.
"""

from .core.conditions import compile_condition, compile_order, compile_where
from .core.identifier import escape_identifier
from .core.statement import SqlStatement
from .dialects.mysql import MySQLDialect, render_literal
from .operations.crud import StatementBuilder, limit_clause

__all__ = [
    "escape_identifier",
    "compile_condition",
    "compile_where",
    "compile_order",
    "SqlStatement",
    "MySQLDialect",
    "render_literal",
    "StatementBuilder",
    "limit_clause",
]

"""Core SQL utilities package."""

from .conditions import compile_condition, compile_order, compile_where
from .identifier import escape_identifier
from .statement import SqlStatement

__all__ = [
    "escape_identifier",
    "compile_condition",
    "compile_where",
    "compile_order",
    "SqlStatement",
]

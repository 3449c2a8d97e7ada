"""SQL dialect implementations."""

from .mysql import MySQLDialect, render_literal

__all__ = ["MySQLDialect", "render_literal"]

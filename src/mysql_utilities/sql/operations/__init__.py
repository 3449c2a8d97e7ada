"""SQL statement builders."""

from .crud import StatementBuilder, limit_clause

__all__ = ["StatementBuilder", "limit_clause"]

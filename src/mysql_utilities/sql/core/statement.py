"""Generated statement value type."""

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class SqlStatement:
    """
    A generated SQL statement ready for execution.

    Attributes:
        sql: Statement text with values already inlined through the escaper
        table: Target table name (unescaped), empty for server-scope queries
        params: Positional parameters, normally empty
    """

    sql: str
    table: str = ""
    params: Tuple[Any, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.sql

"""
Query execution and result-shaping surface of a connection.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from mysql_utilities.sql.core.statement import SqlStatement
from mysql_utilities.sql.dialects.mysql import MySQLDialect
from mysql_utilities.sql.operations.crud import StatementBuilder
from mysql_utilities.utils.logging import get_logger

from .errors import MySQLUtilitiesError
from .events import EventEmitter
from .executor import Executor, with_diagnostics
from .models import ExecutionResult, Row
from .shapers import shape_column, shape_hash, shape_key_value, shape_row, shape_value

logger = get_logger(__name__)

SqlText = Union[str, SqlStatement]


class QueryConnection:
    """
    Executes statements through a diagnostics-wrapped executor and shapes results.

    Args:
        executor: External execution collaborator
        events: Emitter for error/query/slow events
        slow_threshold_ms: Initial slow-query threshold; mutable afterwards
        identifier_quote: Quote character for non-bare identifiers
    """

    def __init__(
        self,
        executor: Executor,
        events: EventEmitter,
        slow_threshold_ms: Optional[int],
        identifier_quote: str = "`",
    ):
        self.executor = executor
        self.events = events
        self.slow_threshold_ms = slow_threshold_ms
        self.dialect = MySQLDialect(identifier_quote, executor.escape_value)
        self.builder = StatementBuilder(self.dialect)
        self.execute = with_diagnostics(
            executor.execute, events, lambda: self.slow_threshold_ms
        )

    def on(self, name: str, listener: Any) -> Any:
        return self.events.on(name, listener)

    def escape(self, value: Any) -> str:
        return self.executor.escape_value(value)

    def where(self, spec: Optional[Mapping[str, Any]]) -> str:
        """Compile a filter mapping; empty string when there is nothing to filter on."""
        return self.builder.where(spec)

    def order(self, spec: Optional[Mapping[str, str]]) -> str:
        return self.builder.order(spec)

    async def _fail(self, error: MySQLUtilitiesError) -> None:
        """Log and emit a generator failure; the caller raises it afterwards."""
        logger.error(
            "crud.operation.failed",
            table=error.table,
            error=str(error),
            error_type=type(error).__name__,
        )
        await self.events.emit("error", error)

    async def _run(self, sql: SqlText, params: Sequence[Any] = ()) -> ExecutionResult:
        if isinstance(sql, SqlStatement):
            statement = sql
        else:
            statement = SqlStatement(sql, params=tuple(params))
        return await self.execute(statement)

    async def query(self, sql: SqlText, params: Sequence[Any] = ()) -> List[Row]:
        result = await self._run(sql, params)
        return result.rows

    async def query_row(self, sql: SqlText, params: Sequence[Any] = ()) -> Optional[Row]:
        """Single row as a dict of fields, or None."""
        return shape_row(await self.query(sql, params))

    async def query_value(self, sql: SqlText, params: Sequence[Any] = ()) -> Any:
        """Single value (scalar), or None."""
        return shape_value(await self.query(sql, params))

    async def query_col(self, sql: SqlText, params: Sequence[Any] = ()) -> List[Any]:
        """List of first-column values."""
        return shape_column(await self.query(sql, params))

    async def query_hash(
        self, sql: SqlText, params: Sequence[Any] = ()
    ) -> Dict[Any, Row]:
        """Rows keyed by their first column."""
        return shape_hash(await self.query(sql, params))

    async def query_key_value(
        self, sql: SqlText, params: Sequence[Any] = ()
    ) -> Dict[Any, Any]:
        """First column mapped to second column."""
        return shape_key_value(await self.query(sql, params))

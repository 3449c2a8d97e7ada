"""
Execution collaborator contract and the diagnostics decorator.

The query layer never talks to a driver directly. It is handed an object
implementing :class:`Executor` and wraps its ``execute`` once, at
construction, with :func:`with_diagnostics`.
"""

import time
from typing import Any, Awaitable, Callable, Optional, Protocol, Sequence

from mysql_utilities.sql.core.statement import SqlStatement
from mysql_utilities.utils.logging import get_logger

from .events import EventEmitter
from .models import ExecutionResult

logger = get_logger(__name__)

ExecuteFn = Callable[[str, Sequence[Any]], Awaitable[ExecutionResult]]
TimedExecuteFn = Callable[[SqlStatement], Awaitable[ExecutionResult]]


class Executor(Protocol):
    """Protocol for the external execution collaborator."""

    async def execute(
        self, sql: str, params: Sequence[Any] = ()
    ) -> ExecutionResult: ...

    def escape_value(self, value: Any) -> str: ...


def with_diagnostics(
    execute: ExecuteFn,
    events: EventEmitter,
    slow_threshold_ms: Callable[[], Optional[int]],
) -> TimedExecuteFn:
    """
    Wrap a base execute callable with timing, events and logging.

    Args:
        execute: The collaborator's ``execute(sql, params)``
        events: Emitter receiving ``query`` and ``slow`` events
        slow_threshold_ms: Read on every call so the threshold stays mutable;
            a falsy value disables slow reporting

    Returns:
        Coroutine function taking a SqlStatement
    """

    async def report(
        error: Optional[BaseException],
        result: Optional[ExecutionResult],
        statement: SqlStatement,
        elapsed_ms: float,
    ) -> None:
        await events.emit("query", error, result, statement)
        threshold = slow_threshold_ms()
        if threshold and elapsed_ms >= threshold:
            logger.warning(
                "sql.query.slow",
                sql=statement.sql,
                table=statement.table,
                elapsed_ms=round(elapsed_ms, 3),
                threshold_ms=threshold,
            )
            await events.emit("slow", error, result, statement, elapsed_ms)

    async def timed_execute(statement: SqlStatement) -> ExecutionResult:
        started = time.perf_counter()
        try:
            result = await execute(statement.sql, statement.params)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.warning(
                "sql.query.failed",
                sql=statement.sql,
                table=statement.table,
                elapsed_ms=round(elapsed_ms, 3),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            await report(exc, None, statement, elapsed_ms)
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            "sql.query.executed",
            sql=statement.sql,
            table=statement.table,
            elapsed_ms=round(elapsed_ms, 3),
            row_count=len(result.rows),
        )
        await report(None, result, statement, elapsed_ms)
        return result

    return timed_execute

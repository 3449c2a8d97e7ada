"""Pytest configuration and shared fixtures.

Tests never talk to a real server. ``FakeExecutor`` stands in for the
execution collaborator: it serves scripted results by SQL prefix and
records every statement it receives.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

# Optional overrides for local runs (e.g. LOG_LEVEL=DEBUG)
_TEST_ENV_FILE = Path(__file__).parent.parent / ".env.test"
if _TEST_ENV_FILE.exists():
    load_dotenv(_TEST_ENV_FILE, override=True)

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pytest

from mysql_utilities.config import Settings
from mysql_utilities.connection import Connection, EventEmitter, ExecutionResult, upgrade

Outcome = Union[ExecutionResult, Exception]


class FakeExecutor:
    """Scripted execution collaborator."""

    def __init__(self) -> None:
        self.statements: List[str] = []
        self.params: List[Tuple[Any, ...]] = []
        self._responses: List[Tuple[str, Outcome]] = []

    def respond(
        self,
        prefix: str,
        rows: Optional[List[Dict[str, Any]]] = None,
        *,
        error: Optional[Exception] = None,
        insert_id: Optional[int] = None,
        changed_rows: Optional[int] = None,
        affected_rows: Optional[int] = None,
    ) -> None:
        """Answer statements starting with ``prefix``; first registered match wins."""
        if error is not None:
            self._responses.append((prefix, error))
            return
        rows = rows or []
        self._responses.append(
            (
                prefix,
                ExecutionResult(
                    rows=rows,
                    fields=list(rows[0]) if rows else [],
                    insert_id=insert_id,
                    changed_rows=changed_rows,
                    affected_rows=affected_rows,
                ),
            )
        )

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecutionResult:
        self.statements.append(sql)
        self.params.append(tuple(params))
        for prefix, outcome in self._responses:
            if sql.startswith(prefix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        return ExecutionResult()

    def escape_value(self, value: Any) -> str:
        if value is None:
            return "NULL"
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"


def column_rows(*columns: Tuple[str, str]) -> List[Dict[str, Any]]:
    """SHOW FULL COLUMNS rows from (name, Key) pairs, in the given order."""
    return [
        {
            "Field": name,
            "Type": "int(11)" if key else "varchar(64)",
            "Collation": None if key else "utf8mb4_general_ci",
            "Null": "NO" if key == "PRI" else "YES",
            "Key": key,
            "Default": None,
            "Extra": "auto_increment" if key == "PRI" else "",
            "Privileges": "select,insert,update,references",
            "Comment": "",
        }
        for name, key in columns
    ]


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def events() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(slow_threshold_ms=0, identifier_quote="`")


@pytest.fixture
def db(executor: FakeExecutor, events: EventEmitter, test_settings: Settings) -> Connection:
    return upgrade(executor, events=events, settings=test_settings)


@pytest.fixture
def recorded_errors(events: EventEmitter) -> List[Exception]:
    """Collects everything emitted on the 'error' channel."""
    errors: List[Exception] = []
    events.on("error", errors.append)
    return errors


@pytest.fixture
def make_columns():
    return column_rows

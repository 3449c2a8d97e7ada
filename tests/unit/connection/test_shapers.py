"""
Unit tests for result shapers and the query_* connection variants.
"""

import pytest

from mysql_utilities.connection.shapers import (
    shape_column,
    shape_hash,
    shape_key_value,
    shape_row,
    shape_value,
)

ROWS = [
    {"code": "b", "name": "Beta", "rank": 2},
    {"code": "a", "name": "Alpha", "rank": 1},
]


class TestShapers:
    def test_row(self):
        assert shape_row(ROWS) == ROWS[0]
        assert shape_row([]) is None

    def test_value_uses_first_declared_field(self):
        assert shape_value(ROWS) == "b"
        assert shape_value([]) is None

    def test_column(self):
        assert shape_column(ROWS) == ["b", "a"]
        assert shape_column([]) == []

    def test_hash_keyed_by_first_field_whatever_its_name(self):
        result = shape_hash(ROWS)
        assert list(result) == ["b", "a"]
        assert result["a"] is ROWS[1]

    def test_hash_later_duplicates_win(self):
        rows = [{"k": 1, "v": "first"}, {"k": 1, "v": "second"}]
        assert shape_hash(rows) == {1: {"k": 1, "v": "second"}}

    def test_key_value(self):
        assert shape_key_value(ROWS) == {"b": "Beta", "a": "Alpha"}

    def test_key_value_one_column_maps_to_none(self):
        assert shape_key_value([{"Variable_name": "x"}]) == {"x": None}


class TestQueryVariants:
    @pytest.mark.asyncio
    async def test_query_value(self, db, executor):
        executor.respond("SELECT count(*)", [{"count(*)": 7}])
        assert await db.query_value("SELECT count(*) FROM users") == 7

    @pytest.mark.asyncio
    async def test_query_row_empty(self, db, executor):
        assert await db.query_row("SELECT * FROM users WHERE id = 0") is None

    @pytest.mark.asyncio
    async def test_query_hash_and_col(self, db, executor):
        executor.respond("SELECT", ROWS)
        assert list(await db.query_hash("SELECT code, name FROM t")) == ["b", "a"]
        assert await db.query_col("SELECT code FROM t") == ["b", "a"]

    @pytest.mark.asyncio
    async def test_query_key_value(self, db, executor):
        executor.respond("SELECT", ROWS)
        assert await db.query_key_value("SELECT code, name FROM t") == {
            "b": "Beta",
            "a": "Alpha",
        }

    @pytest.mark.asyncio
    async def test_params_forwarded(self, db, executor):
        await db.query("SELECT * FROM t WHERE id = %s", [3])
        assert executor.params == [(3,)]

    @pytest.mark.asyncio
    async def test_driver_error_short_circuits(self, db, executor):
        executor.respond("SELECT", error=RuntimeError("gone away"))
        with pytest.raises(RuntimeError, match="gone away"):
            await db.query_hash("SELECT 1")

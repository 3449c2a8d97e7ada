"""
Unit tests for the pure CRUD statement builders and the MySQL dialect.
"""

import pytest

from mysql_utilities.sql import MySQLDialect, SqlStatement, StatementBuilder, limit_clause
from mysql_utilities.sql.dialects.mysql import render_literal


def escape(value):
    if isinstance(value, int):
        return str(value)
    return f"'{value}'"


@pytest.fixture
def builder():
    return StatementBuilder(MySQLDialect(escape_value=escape))


class TestSelect:
    def test_plain(self, builder):
        statement = builder.select("users")
        assert statement == SqlStatement("SELECT * FROM users", "users")

    def test_where_and_order(self, builder):
        statement = builder.select("users", "id, name", {"id": ">3"}, {"name": "asc"})
        assert statement.sql == (
            "SELECT id, name FROM users WHERE id > '3' ORDER BY name asc"
        )

    def test_empty_where_omits_keyword(self, builder):
        assert "WHERE" not in builder.select("users", "*", {}).sql

    def test_field_sequence_is_escaped(self, builder):
        statement = builder.select("users", ["id", "full name"])
        assert statement.sql == "SELECT id, `full name` FROM users"

    def test_limit(self, builder):
        statement = builder.select("users", "*", {"id": 1}, None, [10, 20])
        assert statement.sql == "SELECT * FROM users WHERE id = 1 LIMIT 10,20"

    def test_table_is_escaped(self, builder):
        assert builder.select("my table").sql == "SELECT * FROM `my table`"


class TestLimitClause:
    def test_single(self):
        assert limit_clause([5]) == "5"

    def test_pair(self):
        assert limit_clause((0, 25)) == "0,25"

    @pytest.mark.parametrize("limit", [[], [1, 2, 3], ["5"], [1.5], "10", [True]])
    def test_rejects_bad_limits(self, limit):
        with pytest.raises(ValueError):
            limit_clause(limit)


class TestWrites:
    def test_insert_in_given_column_order(self, builder):
        statement = builder.insert("users", ["id", "name"], {"name": "Ann", "id": 1})
        assert statement.sql == "INSERT INTO users (id, name) VALUES (1, 'Ann')"
        assert statement.table == "users"
        assert statement.params == ()

    def test_update(self, builder):
        statement = builder.update("users", {"name": "Ann"}, "id = 1")
        assert statement.sql == "UPDATE users SET name = 'Ann' WHERE id = 1"

    def test_delete(self, builder):
        assert builder.delete("users", "id = 1").sql == "DELETE FROM users WHERE id = 1"

    def test_count(self, builder):
        assert builder.count("users").sql == "SELECT count(*) FROM users"
        assert builder.count("users", {"id": 2}).sql == (
            "SELECT count(*) FROM users WHERE id = 2"
        )

    def test_count_by_key_escapes_value(self, builder):
        statement = builder.count_by_key("users", "email", "a@b.c")
        assert statement.sql == "SELECT count(*) FROM users WHERE email = 'a@b.c'"


class TestMySQLDialect:
    def test_catalog_queries_escape_table(self):
        dialect = MySQLDialect(escape_value=escape)
        assert dialect.show_full_columns("my table").sql == (
            "SHOW FULL COLUMNS FROM `my table`"
        )
        assert dialect.table_status("users").sql == "SHOW TABLE STATUS LIKE 'users'"
        assert "TABLE_NAME = 'users'" in dialect.foreign_keys("users").sql

    def test_tables_current_or_named_database(self):
        dialect = MySQLDialect(escape_value=escape)
        assert dialect.tables().sql.endswith("WHERE TABLE_SCHEMA = DATABASE()")
        assert dialect.tables("shop").sql.endswith("WHERE TABLE_SCHEMA = 'shop'")

    def test_render_literal_string(self):
        assert render_literal("abc") == "'abc'"

    def test_render_literal_integer(self):
        assert render_literal(42) == "42"

    def test_render_literal_quote_is_escaped(self):
        rendered = render_literal("O'Reilly")
        assert rendered.startswith("'") and rendered.endswith("'")
        assert "O'Reilly" not in rendered

    def test_render_literal_keeps_single_percent(self):
        assert render_literal("%str_") == "'%str_'"

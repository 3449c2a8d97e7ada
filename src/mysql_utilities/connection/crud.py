"""
Metadata-driven CRUD generator.

Writes read the live column list of the target table first and decide
from it which row fields to write and which column identifies the row.
Every multi-step operation runs as a strict sequence of awaits on the one
connection and either issues its final write or aborts before any write.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from mysql_utilities.sql.operations.crud import FilterSpec, OrderSpec, SelectFields
from mysql_utilities.utils.logging import bind_context

from .errors import EmptyPredicate, MissingKeySpec, TableNotFound
from .models import ColumnMetadata, Row
from .shapers import shape_value


def resolve_key_column(
    columns: Mapping[str, ColumnMetadata], row: Mapping[str, Any]
) -> Optional[str]:
    """First PRIMARY or UNIQUE column, in schema order, that is present in ``row``."""
    for name, column in columns.items():
        if column.is_key and name in row:
            return name
    return None


class CrudMixin:
    """CRUD methods; expects the QueryConnection and IntrospectionMixin surfaces."""

    async def _write_columns(self, table: str) -> Dict[str, ColumnMetadata]:
        try:
            return await self.fields(table)
        except Exception as exc:
            error = TableNotFound(table)
            await self._fail(error)
            raise error from exc

    async def count(self, table: str, where: Optional[FilterSpec] = None) -> Any:
        """Number of rows matching ``where``."""
        return await self.query_value(self.builder.count(table, where))

    async def select(
        self,
        table: str,
        fields: SelectFields = "*",
        where: Optional[FilterSpec] = None,
        order: Optional[OrderSpec] = None,
    ) -> List[Row]:
        return await self.query(self.builder.select(table, fields, where, order))

    async def select_limit(
        self,
        table: str,
        fields: SelectFields,
        limit: Sequence[int],
        where: Optional[FilterSpec] = None,
        order: Optional[OrderSpec] = None,
    ) -> List[Row]:
        """SELECT with a ``LIMIT`` built from a 1- or 2-element integer sequence."""
        return await self.query(self.builder.select(table, fields, where, order, limit))

    async def insert(self, table: str, row: Mapping[str, Any]) -> Optional[int]:
        """
        Insert the schema-known fields of ``row``.

        Columns are emitted in schema order; fields unknown to the table
        are dropped.

        Returns:
            The auto-increment id reported by the driver, or None

        Raises:
            TableNotFound: Column metadata could not be fetched
        """
        columns = await self._write_columns(table)
        present = [name for name in columns if name in row]
        dropped = [name for name in row if name not in columns]
        if dropped:
            bind_context(table=table, operation="insert").debug(
                "crud.insert.columns_ignored", ignored_columns=dropped
            )
        result = await self.execute(self.builder.insert(table, present, row))
        return result.insert_id

    async def update_where(
        self, table: str, row: Mapping[str, Any], where: FilterSpec
    ) -> Optional[int]:
        """
        Update rows matching an explicit filter; every field of ``row`` is assigned.

        An empty ``row`` returns 0 without issuing SQL.

        Returns:
            Changed-row count reported by the driver, or None

        Raises:
            EmptyPredicate: ``where`` compiles to nothing; no SQL is issued
        """
        predicate = self.where(where)
        if not predicate:
            error = EmptyPredicate(table, "update")
            await self._fail(error)
            raise error
        if not row:
            bind_context(table=table, operation="update").warning(
                "crud.update.nothing_to_assign", where=predicate
            )
            return 0
        result = await self.execute(self.builder.update(table, row, predicate))
        return result.changed_rows

    async def update_by_key(self, table: str, row: Mapping[str, Any]) -> Optional[int]:
        """
        Update the row identified by its first primary/unique column.

        The key column becomes the predicate and is left out of SET; every
        other schema-known field of ``row`` is assigned.

        Raises:
            TableNotFound: Column metadata could not be fetched
            MissingKeySpec: ``row`` carries no key column
        """
        columns = await self._write_columns(table)
        key = resolve_key_column(columns, row)
        if key is None:
            error = MissingKeySpec(table, "update")
            await self._fail(error)
            raise error

        assignments = {
            name: row[name] for name in columns if name in row and name != key
        }
        if not assignments:
            bind_context(table=table, operation="update").warning(
                "crud.update.nothing_to_assign", key=key
            )
            return 0

        statement = self.builder.update(
            table, assignments, self.builder.key_predicate(key, row[key])
        )
        result = await self.execute(statement)
        return result.changed_rows

    async def upsert(self, table: str, row: Mapping[str, Any]) -> Optional[int]:
        """
        Update the row if its key already exists, insert it otherwise.

        A ``SELECT count(*)`` probe on the key decides the branch. No lock is
        held between probe and write, so two callers racing on the same key
        can both insert and one of them gets the driver's duplicate-key error.

        Returns:
            Changed-row count when updated, insert id when inserted

        Raises:
            TableNotFound: Column metadata could not be fetched
            MissingKeySpec: ``row`` carries no key column
        """
        columns = await self._write_columns(table)
        key = resolve_key_column(columns, row)
        if key is None:
            error = MissingKeySpec(table, "insert or update")
            await self._fail(error)
            raise error

        probe = await self.execute(self.builder.count_by_key(table, key, row[key]))
        count = shape_value(probe.rows)
        bind_context(table=table, operation="upsert").debug(
            "crud.upsert.probe", key=key, count=count
        )
        if count == 1:
            return await self.update_by_key(table, row)
        return await self.insert(table, row)

    async def delete(self, table: str, where: FilterSpec) -> Optional[int]:
        """
        Delete rows matching ``where``.

        Returns:
            Affected-row count reported by the driver, or None

        Raises:
            EmptyPredicate: ``where`` compiles to nothing; no SQL is issued
        """
        predicate = self.where(where)
        if not predicate:
            error = EmptyPredicate(table, "delete from")
            await self._fail(error)
            raise error
        result = await self.execute(self.builder.delete(table, predicate))
        return result.affected_rows

"""
Read-only schema and server introspection.

Every method is one catalog query shaped into a dict or list. Nothing is
cached: each call reflects the live schema. Driver errors propagate
unchanged and no partial result is ever returned.
"""

from typing import Any, Dict, List, Optional

from .models import ColumnMetadata, Row


class IntrospectionMixin:
    """Introspection methods; expects the QueryConnection surface on ``self``."""

    async def fields(self, table: str) -> Dict[str, ColumnMetadata]:
        """
        Column metadata keyed by column name, in schema order.

        Args:
            table: Table name

        Returns:
            ``{column_name: ColumnMetadata}``
        """
        rows = await self.query_hash(self.dialect.show_full_columns(table))
        return {name: ColumnMetadata.from_row(row) for name, row in rows.items()}

    async def primary(self, table: str) -> Optional[Row]:
        return await self.query_row(self.dialect.show_primary_key(table))

    async def foreign(self, table: str) -> Dict[Any, Row]:
        """Foreign key usage rows keyed by constraint name."""
        return await self.query_hash(self.dialect.foreign_keys(table))

    async def constraints(self, table: str) -> Dict[Any, Row]:
        return await self.query_hash(self.dialect.referential_constraints(table))

    async def tables(self) -> Dict[Any, Row]:
        """Table metadata of the current database keyed by table name."""
        return await self.query_hash(self.dialect.tables())

    async def database_tables(self, database: str) -> Dict[Any, Row]:
        return await self.query_hash(self.dialect.tables(database))

    async def table_info(self, table: str) -> Optional[Row]:
        return await self.query_row(self.dialect.table_status(table))

    async def indexes(self, table: str) -> Dict[str, Row]:
        """
        Index rows keyed by index name.

        SHOW INDEX returns one row per indexed column; for multi-column
        indexes the row of the last column wins.
        """
        rows = await self.query(self.dialect.show_index(table))
        return {row["Key_name"]: row for row in rows}

    async def databases(self) -> List[str]:
        return await self.query_col(self.dialect.show_databases())

    async def processes(self) -> List[Row]:
        return await self.query(self.dialect.process_list())

    async def global_variables(self) -> Dict[Any, Any]:
        return await self.query_key_value(self.dialect.global_variables())

    async def global_status(self) -> Dict[Any, Any]:
        return await self.query_key_value(self.dialect.global_status())

    async def users(self) -> List[Row]:
        return await self.query(self.dialect.users())

"""
Errors raised by the CRUD generator.

Driver errors are never wrapped here; they propagate exactly as the
execution collaborator raised them.
"""


class MySQLUtilitiesError(Exception):
    """Base class for failures detected before any write is issued."""

    def __init__(self, table: str, message: str):
        super().__init__(message)
        self.table = table


class TableNotFound(MySQLUtilitiesError):
    """Raised when schema metadata for a write target cannot be fetched."""

    def __init__(self, table: str):
        super().__init__(table, f'Table "{table}" not found')


class MissingKeySpec(MySQLUtilitiesError):
    """Raised when a row carries no primary or unique key column of its table."""

    def __init__(self, table: str, operation: str = "update"):
        super().__init__(
            table,
            f'Can not {operation} table "{table}": '
            "no primary or unique key column is present in the row",
        )
        self.operation = operation


class EmptyPredicate(MySQLUtilitiesError):
    """Raised when an update or delete would run without a WHERE clause."""

    def __init__(self, table: str, operation: str):
        super().__init__(
            table, f'Can not {operation} "{table}": "where" parameter is empty'
        )
        self.operation = operation

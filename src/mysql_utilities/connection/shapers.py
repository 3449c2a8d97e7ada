"""
Result shapers: reduce a rowset to a narrower projection.

"First column" is the first field of each row in select-list order, not a
column with any particular name.
"""

from typing import Any, Dict, List, Optional, Sequence

from .models import Row


def _first(row: Row) -> Any:
    return next(iter(row.values()))


def shape_row(rows: Sequence[Row]) -> Optional[Row]:
    """First row, or None for an empty rowset."""
    return rows[0] if rows else None


def shape_value(rows: Sequence[Row]) -> Any:
    """First column of the first row, or None for an empty rowset."""
    row = shape_row(rows)
    if not row:
        return None
    return _first(row)


def shape_column(rows: Sequence[Row]) -> List[Any]:
    return [_first(row) for row in rows if row]


def shape_hash(rows: Sequence[Row]) -> Dict[Any, Row]:
    """Rows keyed by their first column; later duplicates overwrite earlier ones."""
    return {_first(row): row for row in rows if row}


def shape_key_value(rows: Sequence[Row]) -> Dict[Any, Any]:
    """First column -> second column for every row; None for one-column rows."""
    result: Dict[Any, Any] = {}
    for row in rows:
        values = list(row.values())
        if values:
            result[values[0]] = values[1] if len(values) > 1 else None
    return result

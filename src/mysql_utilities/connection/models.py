from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

Row = Dict[str, Any]


@dataclass
class ExecutionResult:
    """What the execution collaborator reports for one statement."""

    rows: List[Row] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    insert_id: Optional[int] = None
    changed_rows: Optional[int] = None
    affected_rows: Optional[int] = None


class KeyRole(str, Enum):
    PRIMARY = "PRIMARY"
    UNIQUE = "UNIQUE"
    NONE = "NONE"

    @classmethod
    def from_catalog(cls, key: Optional[str]) -> "KeyRole":
        """Map the ``Key`` column of SHOW COLUMNS (PRI, UNI, MUL, '')."""
        if key == "PRI":
            return cls.PRIMARY
        if key == "UNI":
            return cls.UNIQUE
        return cls.NONE


@dataclass(frozen=True)
class ColumnMetadata:
    """
    One column as reported by ``SHOW FULL COLUMNS``.

    Attributes:
        name: Column name
        type: Declared SQL type, e.g. ``int(10) unsigned``
        nullable: Whether NULL is allowed
        key_role: PRIMARY, UNIQUE or NONE
        default: Default value as reported by the server
        extra: Extra info such as ``auto_increment``
        collation: Column collation, None for non-text columns
        comment: Column comment
        raw: The catalog row as returned
    """

    name: str
    type: str
    nullable: bool
    key_role: KeyRole
    default: Any = None
    extra: str = ""
    collation: Optional[str] = None
    comment: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_key(self) -> bool:
        return self.key_role in (KeyRole.PRIMARY, KeyRole.UNIQUE)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ColumnMetadata":
        return cls(
            name=row["Field"],
            type=row.get("Type", ""),
            nullable=row.get("Null") == "YES",
            key_role=KeyRole.from_catalog(row.get("Key")),
            default=row.get("Default"),
            extra=row.get("Extra") or "",
            collation=row.get("Collation"),
            comment=row.get("Comment") or "",
            raw=dict(row),
        )

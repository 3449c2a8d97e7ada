"""
WHERE and ORDER BY fragment compilers.

The filter grammar is a flat conjunction: every field in the mapping
contributes one clause and the clauses are joined with AND. String values
carry their operator in-band:

    >=V  <=V  <>V  >V  <V     comparison
    (a,b,c)                   set membership
    lo..hi                    inclusive range
    *str?                     wildcard (* -> %, ? -> _)
    anything else             equality

Example:
    >>> compile_where({"id": 5, "year": ">2010", "sn": "*str?"}, escape)
    "id = 5 AND year > '2010' AND sn LIKE '%str_'"
"""

from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

from .identifier import DEFAULT_QUOTE, escape_identifier

ValueEscaper = Callable[[Any], str]

# Two-character operators must be tried before their one-character prefixes
COMPARISON_OPERATORS = (">=", "<=", "<>", ">", "<")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def compile_condition(
    field: str, value: Any, escape_value: ValueEscaper, quote: str = DEFAULT_QUOTE
) -> str:
    """
    Compile a single field filter into a SQL clause.

    Args:
        field: Column name
        value: Number, operator-string, None or any other literal
        escape_value: Injection-safe value escaper from the driver
        quote: Identifier quoting character

    Returns:
        One SQL clause without surrounding AND
    """
    column = escape_identifier(field, quote)

    if _is_number(value):
        return f"{column} = {value}"
    if value is None:
        return f"{column} IS NULL"
    if not isinstance(value, str):
        return f"{column} = {escape_value(value)}"

    for operator in COMPARISON_OPERATORS:
        if value.startswith(operator):
            return f"{column} {operator} {escape_value(value[len(operator):])}"

    if value.startswith("(") and value.endswith(")"):
        members = ",".join(escape_value(member) for member in value[1:-1].split(","))
        return f"{column} IN ({members})"

    if ".." in value:
        low, high = value.split("..", 1)
        return f"({column} BETWEEN {escape_value(low)} AND {escape_value(high)})"

    if "*" in value or "?" in value:
        pattern = value.replace("*", "%").replace("?", "_")
        return f"{column} LIKE {escape_value(pattern)}"

    return f"{column} = {escape_value(value)}"


def compile_where(
    spec: Optional[Mapping[str, Any]],
    escape_value: ValueEscaper,
    quote: str = DEFAULT_QUOTE,
) -> str:
    """
    Compile a filter mapping into one conjunctive predicate.

    Returns an empty string for an empty (or missing) mapping; callers must
    then leave out the WHERE keyword entirely.
    """
    if not spec:
        return ""
    return " AND ".join(
        compile_condition(field, value, escape_value, quote)
        for field, value in spec.items()
    )


def compile_order(
    spec: Optional[Mapping[str, str]], quote: str = DEFAULT_QUOTE
) -> str:
    """
    Compile a field -> direction mapping into an ORDER BY fragment.

    Direction tokens are emitted verbatim, so they must only come from
    trusted call sites.

    Example:
        >>> compile_order({"id": "asc", "name": "desc"})
        'id asc,name desc'
    """
    if not spec:
        return ""
    return ",".join(
        f"{escape_identifier(field, quote)} {direction}"
        for field, direction in spec.items()
    )

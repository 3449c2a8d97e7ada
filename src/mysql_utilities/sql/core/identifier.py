"""
SQL identifier handling utilities.

Table and column names are emitted bare when they are already safe
identifiers and quoted otherwise, so generated statements stay readable
for ordinary names while still protecting unusual ones.
"""

import re

DEFAULT_QUOTE = "`"

SAFE_IDENTIFIER = re.compile(r"^[A-Za-z0-9_.]+$")


def escape_identifier(name: str, quote: str = DEFAULT_QUOTE) -> str:
    """
    Quote a SQL identifier (table or column name) only if it needs it.

    Args:
        name: The identifier to escape
        quote: Quoting character (backtick for MySQL)

    Returns:
        The name unchanged if it matches ``[A-Za-z0-9_.]+``, otherwise
        the name wrapped in ``quote`` with internal quotes doubled

    Examples:
        >>> escape_identifier("company_id")
        'company_id'
        >>> escape_identifier("db.users")
        'db.users'
        >>> escape_identifier("order items")
        '`order items`'
        >>> escape_identifier("年金计划号")
        '`年金计划号`'
    """
    if SAFE_IDENTIFIER.match(name):
        return name
    escaped = name.replace(quote, quote * 2)
    return f"{quote}{escaped}{quote}"

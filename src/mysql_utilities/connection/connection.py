"""
Connection assembly.

``upgrade`` builds a complete :class:`Connection` around an executor in one
step. Calling it again yields a new, independent object; the executor
itself is never modified.
"""

from typing import Optional

from mysql_utilities.config import Settings, get_settings

from .crud import CrudMixin
from .events import EventEmitter
from .executor import Executor
from .introspection import IntrospectionMixin
from .query import QueryConnection


class Connection(CrudMixin, IntrospectionMixin, QueryConnection):
    """Query, introspection and CRUD surface over one execution collaborator."""


def upgrade(
    executor: Executor,
    events: Optional[EventEmitter] = None,
    settings: Optional[Settings] = None,
    slow_threshold_ms: Optional[int] = None,
) -> Connection:
    """
    Build a Connection around ``executor``.

    Args:
        executor: External execution collaborator
        events: Emitter to publish on; a fresh one when omitted
        settings: Source of defaults; the cached settings when omitted
        slow_threshold_ms: Overrides ``settings.slow_threshold_ms``

    Returns:
        A fully formed Connection
    """
    settings = settings or get_settings()
    if slow_threshold_ms is None:
        slow_threshold_ms = settings.slow_threshold_ms
    return Connection(
        executor,
        events or EventEmitter(),
        slow_threshold_ms,
        identifier_quote=settings.identifier_quote,
    )

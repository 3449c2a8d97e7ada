"""
Side channel for connection diagnostics.

Events emitted by a connection:

- ``"error"`` (exc): every failure detected by the CRUD generator
- ``"query"`` (error, result, statement): after every statement
- ``"slow"`` (error, result, statement, elapsed_ms): statements at or over
  the connection's slow threshold

Listeners may be plain callables or coroutine functions; they run in
registration order and are awaited before the statement's caller resumes.
"""

import inspect
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

Listener = Callable[..., Any]


class EventEmitter:
    """Minimal named-event dispatcher."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def on(self, name: str, listener: Listener) -> Listener:
        """Register ``listener`` for ``name``; returns it so it can be used as a decorator."""
        self._listeners[name].append(listener)
        return listener

    def off(self, name: str, listener: Listener) -> None:
        if listener in self._listeners.get(name, []):
            self._listeners[name].remove(listener)

    def listeners(self, name: str) -> List[Listener]:
        return list(self._listeners.get(name, []))

    async def emit(self, name: str, *args: Any) -> bool:
        """Call every listener of ``name``; returns whether any was registered."""
        listeners = self.listeners(name)
        for listener in listeners:
            outcome = listener(*args)
            if inspect.isawaitable(outcome):
                await outcome
        return bool(listeners)

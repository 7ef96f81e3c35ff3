"""History backends: the browser history surface as a protocol.

The navigator only needs four things from the browser: the current
pathname, the stack length, ``pushState`` and popstate listeners. Any
object with that shape works, so a browser bridge (Pyodide, a webview)
and the in-memory ``MemoryHistory`` are interchangeable.

``MemoryHistory`` behaves like ``window.history``: pushing truncates the
forward stack, and only ``back``/``forward``/``go`` fire popstate.
"""

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

PopStateListener: TypeAlias = Callable[[], None]


@runtime_checkable
class History(Protocol):
    """Minimal browser history protocol."""

    @property
    def pathname(self) -> str: ...

    @property
    def length(self) -> int: ...

    def push_state(self, path: str) -> None: ...

    def add_popstate_listener(self, listener: PopStateListener) -> None: ...

    def remove_popstate_listener(self, listener: PopStateListener) -> None: ...


class MemoryHistory:
    """In-memory history stack.

    Usage::

        history = MemoryHistory("/news/7")
        history.push_state("/dashboard")
        history.back()          # fires popstate listeners
        history.pathname        # "/news/7"
    """

    __slots__ = ("_entries", "_index", "_listeners")

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[str] = [initial]
        self._index = 0
        self._listeners: list[PopStateListener] = []

    @property
    def pathname(self) -> str:
        return self._entries[self._index]

    @property
    def length(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def push_state(self, path: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(path)
        self._index += 1

    def add_popstate_listener(self, listener: PopStateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_popstate_listener(self, listener: PopStateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def go(self, delta: int) -> None:
        """Move *delta* entries; out-of-range moves are ignored like the browser does."""
        target = self._index + delta
        if delta == 0 or not 0 <= target < len(self._entries):
            return
        self._index = target
        for listener in list(self._listeners):
            listener()

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)


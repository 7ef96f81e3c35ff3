"""Navigation events.

Small opt-in event channel for navigation telemetry: redirects, gate
overrides, admin login/logout. Applications can register a sink to
forward events to logs, analytics, or tests.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any, TypeAlias

logger = logging.getLogger("visanav.events")


@dataclass(frozen=True, slots=True)
class NavigationEvent:
    """A structured navigation event."""

    name: str
    path: str
    timestamp: float = field(default_factory=time)
    source: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


NavigationEventSink: TypeAlias = Callable[[NavigationEvent], None]


_sink_lock = threading.Lock()
_sink: NavigationEventSink | None = None


def set_navigation_event_sink(sink: NavigationEventSink | None) -> None:
    """Set a process-wide sink for navigation events.

    Pass ``None`` to disable event delivery.
    """
    global _sink
    with _sink_lock:
        _sink = sink


def emit_navigation_event(
    name: str,
    path: str,
    *,
    source: str | None = None,
    details: dict[str, Any] | None = None,
) -> None:
    """Emit a best-effort navigation event to the configured sink."""
    with _sink_lock:
        sink = _sink
    if sink is None:
        return
    event = NavigationEvent(name=name, path=path, source=source, details=details or {})
    try:
        sink(event)
    except Exception:
        logger.exception("Navigation event sink failed for %s", name)

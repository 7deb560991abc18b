"""
In-memory event source.
"""

import logging
from typing import Any, Callable, Dict, List

from .base import InputSource

logger = logging.getLogger(__name__)


class EventSource(InputSource):
    """Keeps listeners per event type and calls them synchronously on dispatch."""

    def __init__(self):
        self._listeners: Dict[str, List[Callable[[Any], None]]] = {}

    def add_listener(self, event_type: str, callback: Callable[[Any], None]) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        # Same semantics as addEventListener: registering twice is a no-op
        if callback not in listeners:
            listeners.append(callback)

    def remove_listener(self, event_type: str, callback: Callable[[Any], None]) -> None:
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event_type: str, event: Any) -> int:
        """Deliver event to every listener of event_type; returns how many were called."""
        listeners = list(self._listeners.get(event_type, []))
        logger.debug("Dispatching %s %s to %s listener(s)", event_type, event, len(listeners))
        for callback in listeners:
            callback(event)
        return len(listeners)

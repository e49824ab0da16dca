"""
Minimal event emitter used by the rendering host collaborators.

Listeners are kept per event name in registration order, the same way
the sync manager keeps its callback lists.
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class EventEmitter:
    """Subscribe / unsubscribe / emit for named events."""

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {}

    def on(self, event: str, handler: Callable) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable) -> bool:
        """Detach one registration of `handler`. Returns False if it was not attached."""
        handlers = self._listeners.get(event, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._listeners[event]
        return True

    def emit(self, event: str, payload: Any = None) -> int:
        """Call every listener of `event` with `payload`. Returns the number of listeners called."""
        handlers = list(self._listeners.get(event, []))
        for handler in handlers:
            handler(payload)
        if handlers:
            logger.debug(f"Emitted '{event}' to {len(handlers)} listener(s)")
        return len(handlers)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

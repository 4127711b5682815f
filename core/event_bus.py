"""
Notification bus for the host object model.

Event types are "<canonical path>::<property>" strings. Delivery is
non-reentrant: an event raised while a callback runs is queued and delivered
after that callback returns, in the order it was raised.
"""

from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

import showlog

Callback = Callable[[Any], None]


class EventBus:
    """Publish/subscribe with a FIFO delivery queue."""

    def __init__(self):
        self._subscribers: Dict[str, List[Callback]] = defaultdict(list)
        self._pending: Deque[Tuple[str, Any, Optional[Callback]]] = deque()
        self._dispatching = False

    def subscribe(self, event_type: str, callback: Callback) -> None:
        self._subscribers[event_type].append(callback)
        showlog.verbose(f"[EVENT_BUS] + '{event_type}'")

    def unsubscribe(self, event_type: str, callback: Callback) -> None:
        """Remove callback; unknown callbacks are ignored."""
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)
            showlog.verbose(f"[EVENT_BUS] - '{event_type}'")
        if event_type in self._subscribers and not self._subscribers[event_type]:
            del self._subscribers[event_type]

    def publish(self, event_type: str, data: Any = None) -> None:
        """Deliver data to every subscriber of event_type."""
        self._enqueue(event_type, data, None)

    def send(self, event_type: str, callback: Callback, data: Any = None) -> None:
        """Deliver data to one callback only, queued behind pending events."""
        self._enqueue(event_type, data, callback)

    @property
    def dispatching(self) -> bool:
        """True while a callback is running."""
        return self._dispatching

    def subscriber_count(self, event_type: str) -> int:
        return len(self._subscribers.get(event_type, ()))

    # --------------------------------------------------------------
    # Delivery
    # --------------------------------------------------------------
    def _enqueue(self, event_type: str, data: Any, target: Optional[Callback]) -> None:
        self._pending.append((event_type, data, target))
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                self._deliver(*self._pending.popleft())
        finally:
            self._dispatching = False

    def _deliver(self, event_type: str, data: Any, target: Optional[Callback]) -> None:
        # copy: callbacks may unsubscribe while we iterate
        targets = [target] if target is not None else list(self._subscribers.get(event_type, ()))
        for callback in targets:
            try:
                callback(data)
            except Exception as e:
                showlog.error(f"[EVENT_BUS] Subscriber of '{event_type}' failed: {e}", exc=e)

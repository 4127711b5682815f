"""
Handles onto the host object model.

PropertyHandle is one observed property of one host object (read, write,
change callback). ObjectHandle is a navigable reference used to look at
other objects, such as the track that owns a device.
"""

import json
from typing import Any, Callable, Optional

import showlog
from system.live_object import LiveObjectModel, PropertyCallback
from system.track_path import owning_track_path


def payload_value(payload: Any, prop: str, default: Any = None) -> Any:
    """Pull prop out of a '{"prop": value}' payload (text or dict)."""
    if payload is None or payload == "":
        return default
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            showlog.warn(f"[LIVE] Unreadable payload for '{prop}': {payload[:60]!r}")
            return default
    if not isinstance(payload, dict):
        return default
    return payload.get(prop, default)


class PropertyHandle:
    """A single named attribute of a host object."""

    def __init__(self, model: LiveObjectModel, path: str, prop: str,
                 callback: Optional[PropertyCallback] = None):
        self.model = model
        self.path = model.canonical_path(path)
        self.property = prop
        self._unsubscribe: Optional[Callable[[], None]] = None
        if callback is not None:
            self.observe(callback)

    def observe(self, callback: PropertyCallback) -> None:
        """Start delivering change notifications to callback (one per handle)."""
        self.close()
        self._unsubscribe = self.model.observe(self.path, self.property, callback)

    def get(self) -> str:
        """Raw payload text, '' when the property is absent."""
        return self.model.get(self.path, self.property)

    def value(self, default: Any = None) -> Any:
        return payload_value(self.get(), self.property, default)

    def set(self, value: Any) -> None:
        self.model.set(self.path, self.property, value)

    @property
    def observing(self) -> bool:
        return self._unsubscribe is not None

    def close(self) -> None:
        """Stop receiving notifications."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __repr__(self):
        return f"PropertyHandle({self.path!r}, {self.property!r})"


class ObjectHandle:
    """Navigable reference to one host object."""

    def __init__(self, model: LiveObjectModel, path: Optional[str] = None):
        self.model = model
        self.path = ""
        if path:
            self.goto(path)

    def goto(self, path: str) -> int:
        """Point at path; returns the object id (0 if nothing is there)."""
        self.path = self.model.canonical_path(path)
        return self.id

    @property
    def id(self) -> int:
        return self.model.object_id(self.path) if self.path else 0

    def get(self, prop: str) -> str:
        return self.model.get(self.path, prop)

    def value(self, prop: str, default: Any = None) -> Any:
        return payload_value(self.get(prop), prop, default)

    def goto_owning_track(self) -> Optional[str]:
        """Move to the track enclosing the current object; None when there is none."""
        track = owning_track_path(self.path)
        if track is None or not self.model.exists(track):
            return None
        self.goto(track)
        return track

    def __repr__(self):
        return f"ObjectHandle({self.path!r}, id={self.id})"

# /build/system/live_object.py
# -------------------------------------------------------------------
# In-memory host object model (observable key-value store)
# -------------------------------------------------------------------
# - Objects are keyed by canonical path ("live_set tracks 0 devices 0")
# - Each object carries an id and a flat dict of properties
# - Path aliases ("this_device") resolve to a canonical path
#
# API:
#   add_object(path, **properties) -> int
#   alias(name, path) -> None
#   canonical_path(path) -> str
#   get(path, prop) -> str          # JSON payload text: {"prop": value}
#   read(path, prop, default=None)  # plain python value (copy)
#   set(path, prop, value) -> None  # stores + notifies observers
#   observe(path, prop, callback) -> unsubscribe()
#
# Notes:
# - Observers receive PropertyEvent("id", object_id) and then the
#   current value as soon as they register, like the host does.
# - Delivery goes through core.event_bus (non-reentrant, FIFO).
# -------------------------------------------------------------------

from __future__ import annotations
import copy, json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from core.event_bus import EventBus
import showlog


class LiveObjectError(KeyError):
    """Raised when a path does not name an object of the model."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown object"


@dataclass(frozen=True)
class PropertyEvent:
    """One change notification: property name + value at delivery time."""
    name: str
    value: Any


PropertyCallback = Callable[[PropertyEvent], None]


def _normalize(path: str) -> str:
    return " ".join(str(path).replace('"', "").split())


class LiveObjectModel:
    """Observable store of host objects addressed by path."""

    def __init__(self, bus: Optional[EventBus] = None):
        self.bus = bus or EventBus()
        self._objects: Dict[str, Dict[str, Any]] = {}
        self._ids: Dict[str, int] = {}
        self._aliases: Dict[str, str] = {}
        self._next_id = 1

    # --------------------------------------------------------------
    # Objects & paths
    # --------------------------------------------------------------
    def add_object(self, path: str, **properties) -> int:
        """Create (or extend) the object at path; returns its id."""
        key = _normalize(path)
        if key not in self._objects:
            self._objects[key] = {}
            self._ids[key] = self._next_id
            self._next_id += 1
            showlog.debug(f"[LIVE] Added object id={self._ids[key]} path='{key}'")
        self._objects[key].update(copy.deepcopy(properties))
        return self._ids[key]

    def remove_object(self, path: str) -> None:
        key = self.canonical_path(path)
        self._objects.pop(key, None)
        self._ids.pop(key, None)

    def alias(self, name: str, path: str) -> None:
        """Let paths starting with `name` resolve to `path`."""
        self._aliases[name] = _normalize(path)

    def canonical_path(self, path: str) -> str:
        """Resolve a leading alias token and normalize whitespace/quotes."""
        tokens = _normalize(path).split(" ")
        if tokens and tokens[0] in self._aliases:
            tokens = self._aliases[tokens[0]].split(" ") + tokens[1:]
        return " ".join(t for t in tokens if t)

    def exists(self, path: str) -> bool:
        return self.canonical_path(path) in self._objects

    def object_id(self, path: str) -> int:
        """Object id, 0 when nothing lives at path (the host's 'id 0')."""
        return self._ids.get(self.canonical_path(path), 0)

    def _require(self, path: str) -> Dict[str, Any]:
        key = self.canonical_path(path)
        try:
            return self._objects[key]
        except KeyError:
            raise LiveObjectError(f"No object at path '{key}'") from None

    # --------------------------------------------------------------
    # Properties
    # --------------------------------------------------------------
    def read(self, path: str, prop: str, default: Any = None) -> Any:
        obj = self._objects.get(self.canonical_path(path))
        if obj is None or prop not in obj:
            return default
        return copy.deepcopy(obj[prop])

    def get(self, path: str, prop: str) -> str:
        """
        JSON payload for one property, e.g.
        '{"routing_type": {"display_name": "No Input", "identifier": 9}}'.
        Missing objects/properties yield an empty string.
        """
        obj = self._objects.get(self.canonical_path(path))
        if obj is None or prop not in obj:
            return ""
        return json.dumps({prop: obj[prop]})

    def set(self, path: str, prop: str, value: Any) -> None:
        """Store value and notify observers of (path, prop)."""
        key = self.canonical_path(path)
        obj = self._require(key)
        obj[prop] = copy.deepcopy(value)
        showlog.debug(f"[LIVE] set {key} {prop}")
        self.bus.publish(self._event_type(key, prop), PropertyEvent(prop, copy.deepcopy(value)))

    def observe(self, path: str, prop: str, callback: PropertyCallback) -> Callable[[], None]:
        """
        Register callback for changes of prop on path.

        The callback first gets PropertyEvent("id", <object id>) and, when the
        property exists, PropertyEvent(prop, <current value>).
        """
        key = self.canonical_path(path)
        event_type = self._event_type(key, prop)
        self.bus.subscribe(event_type, callback)
        self.bus.send(event_type, callback, PropertyEvent("id", self._ids.get(key, 0)))
        obj = self._objects.get(key)
        if obj is not None and prop in obj:
            self.bus.send(event_type, callback, PropertyEvent(prop, copy.deepcopy(obj[prop])))

        def unsubscribe() -> None:
            self.bus.unsubscribe(event_type, callback)

        return unsubscribe

    def observer_count(self, path: str, prop: str) -> int:
        return self.bus.subscriber_count(self._event_type(self.canonical_path(path), prop))

    @staticmethod
    def _event_type(path: str, prop: str) -> str:
        return f"{path}::{prop}"

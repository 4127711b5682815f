"""
Routing entries and payload parsing.

The host describes every routing option as {"display_name": str,
"identifier": int}. Catalog payloads wrap a list of those under the
property name, state payloads wrap a single one.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import showlog
from system.live_api import payload_value


@dataclass(frozen=True)
class RoutingEntry:
    """One selectable routing option. Identifiers are opaque host ids."""

    display_name: str
    identifier: Any

    @classmethod
    def from_dict(cls, data: Any) -> Optional["RoutingEntry"]:
        if not isinstance(data, dict) or "identifier" not in data:
            return None
        name = data.get("display_name")
        return cls("" if name is None else str(name), data["identifier"])

    def to_dict(self) -> Dict[str, Any]:
        return {"display_name": self.display_name, "identifier": self.identifier}

    def same_as(self, other: Optional["RoutingEntry"]) -> bool:
        """Identity is the identifier; names may repeat."""
        return other is not None and self.identifier == other.identifier


def entries_from_list(items: Any, prop: str = "") -> List[RoutingEntry]:
    """Convert a host list of dicts, keeping host order; junk yields []."""
    if not isinstance(items, (list, tuple)):
        return []
    entries = []
    for item in items:
        entry = RoutingEntry.from_dict(item)
        if entry is None:
            showlog.warn(f"[ENTRIES] Skipping malformed {prop or 'routing'} entry: {item!r}")
            continue
        entries.append(entry)
    return entries


def parse_entries(payload: Any, prop: str) -> List[RoutingEntry]:
    """Catalog payload ('{"available_routing_types": [...]}') to entries."""
    return entries_from_list(payload_value(payload, prop), prop)


def parse_entry(payload: Any, prop: str) -> Optional[RoutingEntry]:
    """State payload ('{"routing_type": {...}}') to a single entry or None."""
    return RoutingEntry.from_dict(payload_value(payload, prop))


def labels(entries: List[RoutingEntry]) -> List[str]:
    return [entry.display_name for entry in entries]

"""
Routing state controller.

Owns the two writable routing handles (routing_type, routing_channel) and
applies menu indices against the catalog. The host is the source of truth:
a successful call writes exactly one handle and produces no UI output; the
menus follow from the host's notification.
"""

import math
import numbers
from typing import Any, List, Optional

import showlog
from routing.catalog import RoutingCatalog
from routing.entries import RoutingEntry
from routing.errors import InvalidIndexError, InvalidRoutingChannelError, InvalidRoutingTypeError
from system.live_api import PropertyHandle


def check_index(index: Any, command: str) -> None:
    """Reject bools, non-numbers and non-finite numbers."""
    if isinstance(index, bool) or not isinstance(index, numbers.Real) or not math.isfinite(index):
        raise InvalidIndexError(index, command)


def entry_at(entries: List[RoutingEntry], index) -> Optional[RoutingEntry]:
    """Catalog entry at a (checked) index; None when nothing is there."""
    if index < 0 or int(index) != index or index >= len(entries):
        return None
    return entries[int(index)]


class RoutingStateController:

    def __init__(self, catalog: RoutingCatalog, type_handle: PropertyHandle, channel_handle: PropertyHandle):
        self.catalog = catalog
        self.type_handle = type_handle
        self.channel_handle = channel_handle

    def set_type(self, index) -> RoutingEntry:
        """Write the routing type at index of the current type catalog."""
        check_index(index, "settype")
        entry = entry_at(self.catalog.types(), index)
        if entry is None:
            raise InvalidRoutingTypeError(index)
        self.apply_type(entry)
        return entry

    def set_channel(self, index) -> RoutingEntry:
        """Write the routing channel at index of the current channel catalog."""
        check_index(index, "setchannel")
        entry = entry_at(self.catalog.channels(), index)
        if entry is None:
            raise InvalidRoutingChannelError(index)
        self.apply_channel(entry)
        return entry

    def apply_type(self, entry: RoutingEntry) -> None:
        showlog.debug(f"[CTRL] routing_type -> '{entry.display_name}' ({entry.identifier})")
        self.type_handle.set(entry.to_dict())

    def apply_channel(self, entry: RoutingEntry) -> None:
        showlog.debug(f"[CTRL] routing_channel -> '{entry.display_name}' ({entry.identifier})")
        self.channel_handle.set(entry.to_dict())

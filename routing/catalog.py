"""
Routing catalog accessor.

Reads the two read-only catalogs of the routing object (available routing
types, available routing channels). Every call reads the host again; nothing
is cached, so routing decisions always see current host state.
"""

from typing import List, Optional

import config as cfg
from routing.entries import RoutingEntry, labels, parse_entries
from system.live_api import PropertyHandle


class RoutingCatalog:
    """Ordered (display name, identifier) lists for the type and channel axes."""

    def __init__(self, types_handle: PropertyHandle, channels_handle: PropertyHandle):
        self.types_handle = types_handle
        self.channels_handle = channels_handle

    def types(self) -> List[RoutingEntry]:
        return parse_entries(self.types_handle.get(), cfg.PROP_AVAILABLE_TYPES)

    def channels(self) -> List[RoutingEntry]:
        return parse_entries(self.channels_handle.get(), cfg.PROP_AVAILABLE_CHANNELS)

    def type_labels(self) -> List[str]:
        return labels(self.types())

    def channel_labels(self) -> List[str]:
        return labels(self.channels())

    def sentinel(self) -> Optional[RoutingEntry]:
        """Last type entry ('No Input' / 'No Output'), None for an empty catalog."""
        types = self.types()
        return types[-1] if types else None

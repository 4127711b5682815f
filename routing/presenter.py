"""
Dependent-list presenter.

Host notifications in, menu updates out. The channel menu depends on the
channel catalog:

    channels  first name   channel menu   enabled   extra
    0         -            ['-', '-']     no        type menu falls back to the last type
    1         ''           ['-', '-']     no
    1         'Track In'   [name, '-']    no
    2+        -            all names      yes

An empty channel catalog means the upstream source went away (a device was
removed, say) without any routing_type change, so the type menu is moved to
the sentinel ('No Input' / 'No Output') by hand.
"""

from typing import List, Optional

import config as cfg
import showlog
from routing.catalog import RoutingCatalog
from routing.entries import RoutingEntry, entries_from_list, labels, parse_entry
from routing.outlets import MenuOutlet
from system.live_api import PropertyHandle
from system.live_object import PropertyEvent


class DependentListPresenter:
    """Keeps the type/channel menus in step with host notifications."""

    def __init__(self, catalog: RoutingCatalog, type_outlet: MenuOutlet, channel_outlet: MenuOutlet,
                 type_handle: Optional[PropertyHandle] = None):
        self.catalog = catalog
        self.type_handle = type_handle
        self.type_outlet = type_outlet
        self.channel_outlet = channel_outlet

    # --------------------------------------------------------------
    # Host callbacks (one per observed handle)
    # --------------------------------------------------------------
    def on_types(self, event: PropertyEvent) -> None:
        # the host announces the object id first; only the property matters
        if event.name != cfg.PROP_AVAILABLE_TYPES or event.value is None:
            return
        types = entries_from_list(event.value, event.name)
        showlog.debug(f"[PRESENTER] {len(types)} routing types")
        self.type_outlet.update_option_list(labels(types))
        # a new option list resets the shown item; show the current type again
        current = self.current_type()
        if current is not None:
            self.type_outlet.select_by_label(current.display_name)

    def on_channels(self, event: PropertyEvent) -> None:
        if event.name != cfg.PROP_AVAILABLE_CHANNELS or event.value is None:
            return
        self.present_channels(entries_from_list(event.value, event.name))

    def on_routing_type(self, event: PropertyEvent) -> None:
        if event.name != cfg.PROP_ROUTING_TYPE:
            return
        entry = RoutingEntry.from_dict(event.value)
        if entry is not None:
            self.type_outlet.select_by_label(entry.display_name)

    def on_routing_channel(self, event: PropertyEvent) -> None:
        if event.name != cfg.PROP_ROUTING_CHANNEL:
            return
        entry = RoutingEntry.from_dict(event.value)
        if entry is not None:
            self.channel_outlet.select_by_label(entry.display_name)

    def current_type(self) -> Optional[RoutingEntry]:
        if self.type_handle is None:
            return None
        return parse_entry(self.type_handle.get(), cfg.PROP_ROUTING_TYPE)

    # --------------------------------------------------------------
    # Channel menu decision table
    # --------------------------------------------------------------
    def present_channels(self, channels: List[RoutingEntry]) -> None:
        placeholder = cfg.PLACEHOLDER_LABEL
        if not channels:
            types = self.catalog.types()
            if types:
                showlog.info(f"[PRESENTER] Source unavailable, showing '{types[-1].display_name}'")
                self.type_outlet.select_by_label(types[-1].display_name)
            self._disable_channels([placeholder, placeholder])
        elif len(channels) == 1:
            name = channels[0].display_name
            if name == "":
                self._disable_channels([placeholder, placeholder])
            else:
                # a single fixed channel (e.g. 'Track In')
                self._disable_channels([name, placeholder])
        else:
            self.channel_outlet.update_option_list(labels(channels))
            self.channel_outlet.set_enabled(True)
            self.channel_outlet.set_click_through(False)

    def _disable_channels(self, items: List[str]) -> None:
        self.channel_outlet.update_option_list(items)
        self.channel_outlet.set_click_through(True)
        self.channel_outlet.set_enabled(False)

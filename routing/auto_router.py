"""
This-track auto-router (MIDI inputs only).

Switches the device's MIDI input to the first routing type that the owning
track cannot reach through its own input list. Both lists enumerate sources
in the same order, so the first index where they disagree (or where the
track's list runs out) is the source that only this device can listen to.
"""

from typing import Any, Optional

import config as cfg
import showlog
from routing.catalog import RoutingCatalog
from routing.context import DeviceRoutingContext
from routing.controller import RoutingStateController
from routing.entries import entries_from_list, parse_entry
from system.live_api import ObjectHandle, PropertyHandle


def is_forced(value: Any) -> bool:
    """Loose '== 1' check: 1, 1.0, True and '1' force; anything else does not."""
    if isinstance(value, str):
        value = value.strip()
        return value == "1"
    return value == 1


class ThisTrackAutoRouter:

    def __init__(self, context: DeviceRoutingContext, catalog: RoutingCatalog,
                 controller: RoutingStateController, type_handle: PropertyHandle,
                 device: ObjectHandle):
        self.context = context
        self.catalog = catalog
        self.controller = controller
        self.type_handle = type_handle
        self.device = device

    def route(self, force: Any = 0) -> bool:
        """
        Route to this track. Without force, only when the input is the
        sentinel ('No Input'). Returns True when the routing type was written.
        """
        if not self.context.is_midi_input:
            return False

        current = parse_entry(self.type_handle.get(), cfg.PROP_ROUTING_TYPE)
        types = self.catalog.types()
        if current is None or not types:
            showlog.debug("[AUTO_ROUTE] No routing type/catalog yet; nothing to do")
            return False

        if not is_forced(force) and not types[-1].same_as(current):
            return False

        track_inputs = self._track_input_types()
        if track_inputs is None:
            return False

        for i, entry in enumerate(types):
            if i >= len(track_inputs) or not entry.same_as(track_inputs[i]):
                if entry.same_as(current):
                    showlog.debug(f"[AUTO_ROUTE] Already routed to '{entry.display_name}'")
                    return False
                showlog.info(f"[AUTO_ROUTE] MIDI input -> '{entry.display_name}'")
                self.controller.apply_type(entry)
                self.controller.set_channel(0)
                return True
        return False

    def _track_input_types(self) -> Optional[list]:
        """Input types of the owning track, None when routing there is impossible."""
        self.device.goto(cfg.DEVICE_PATH_ALIAS)
        track = self.device.goto_owning_track()
        if track is None:
            showlog.warn(f"[AUTO_ROUTE] No track owns '{self.device.path}'")
            return None
        if not self.device.value(cfg.PROP_HAS_MIDI_INPUT, False):
            showlog.debug(f"[AUTO_ROUTE] '{track}' has no MIDI input")
            return None
        return entries_from_list(self.device.value(cfg.PROP_TRACK_INPUT_TYPES, []),
                                 cfg.PROP_TRACK_INPUT_TYPES)

"""
IORouting: one device instance's routing menus.

Lifecycle:
    device = IORouting(model, ["ioRouting", "midi_inputs", 0], type_outlet, channel_outlet)
    device.init()                 # once, when the host says the device is ready
    device.set_type(2)            # menu index from the type menu
    device.set_channel(0)         # menu index from the channel menu
    device.route_to_this_track(1) # MIDI inputs only
    device.close()                # device removed

Commands never raise. Errors are reported through showlog and the command
returns False; the instance keeps running.
"""

from typing import Any, List, Optional, Sequence

import config as cfg
import showlog
from routing.auto_router import ThisTrackAutoRouter
from routing.catalog import RoutingCatalog
from routing.context import DeviceRoutingContext
from routing.controller import RoutingStateController
from routing.errors import (
    ArgumentError,
    InvalidIndexError,
    RoutingError,
    UninitializedError,
)
from routing.outlets import MenuOutlet
from routing.presenter import DependentListPresenter
from system.live_api import ObjectHandle, PropertyHandle
from system.live_object import LiveObjectModel

# Appended to error reports, keyed by command
_HINTS = {
    "settype": ("Make sure to call init once the device is ready, and set the routing type menu to\n"
                "  Parameter Visibility -> hidden\n  Initial Enable -> false"),
    "setchannel": ("Make sure to call init once the device is ready, and set the routing channel menu to\n"
                   "  Parameter Visibility -> hidden\n  Initial Enable -> false"),
    "routethistrack": "Make sure to call init once the device is ready.",
}
_INDEX_HINT = "Make sure to send the item index of the menu (zero-based)."


class IORouting:
    """Routing type/channel menus of one hosted device."""

    def __init__(self, model: LiveObjectModel, args: Sequence[Any],
                 type_outlet: MenuOutlet, channel_outlet: MenuOutlet):
        self.model = model
        self.args = list(args or [])
        self.type_outlet = type_outlet
        self.channel_outlet = channel_outlet

        self.context: Optional[DeviceRoutingContext] = None
        self.catalog: Optional[RoutingCatalog] = None
        self.controller: Optional[RoutingStateController] = None
        self.presenter: Optional[DependentListPresenter] = None
        self.auto_router: Optional[ThisTrackAutoRouter] = None
        self._handles: List[PropertyHandle] = []
        self.last_error: Optional[RoutingError] = None

    @property
    def initialized(self) -> bool:
        return self.controller is not None

    # --------------------------------------------------------------
    # Commands
    # --------------------------------------------------------------
    def init(self) -> bool:
        """Parse the startup arguments and observe the four routing handles."""
        try:
            context = DeviceRoutingContext.from_args(self.args)
        except ArgumentError as e:
            self._report("init", e)
            return False

        if self.initialized:
            showlog.warn("[IO_ROUTING] init called again; rebinding handles")
            self.close()

        self.context = context
        path = context.path
        types_handle = PropertyHandle(self.model, path, cfg.PROP_AVAILABLE_TYPES)
        channels_handle = PropertyHandle(self.model, path, cfg.PROP_AVAILABLE_CHANNELS)
        type_handle = PropertyHandle(self.model, path, cfg.PROP_ROUTING_TYPE)
        channel_handle = PropertyHandle(self.model, path, cfg.PROP_ROUTING_CHANNEL)
        self._handles = [types_handle, channels_handle, type_handle, channel_handle]

        self.catalog = RoutingCatalog(types_handle, channels_handle)
        self.presenter = DependentListPresenter(self.catalog, self.type_outlet, self.channel_outlet,
                                                type_handle)
        # the host answers each registration with the current value
        types_handle.observe(self.presenter.on_types)
        channels_handle.observe(self.presenter.on_channels)
        type_handle.observe(self.presenter.on_routing_type)
        channel_handle.observe(self.presenter.on_routing_channel)

        controller = RoutingStateController(self.catalog, type_handle, channel_handle)
        self.auto_router = ThisTrackAutoRouter(context, self.catalog, controller, type_handle,
                                               ObjectHandle(self.model))
        self.controller = controller
        showlog.info(f"[IO_ROUTING] Initialized {context.io_type} (offset {context.channel_offset})")
        return True

    def set_type(self, index: Any) -> bool:
        return self._run("settype", lambda: self.controller.set_type(index))

    def set_channel(self, index: Any) -> bool:
        return self._run("setchannel", lambda: self.controller.set_channel(index))

    def route_to_this_track(self, force: Any = 0) -> bool:
        """True when the routing type was changed."""
        # not an error on other axes, even before init
        if self.args[1:2] != [cfg.MIDI_INPUTS]:
            return False
        return self._run("routethistrack", lambda: self.auto_router.route(force), result=True)

    def close(self) -> None:
        """Tear down: stop observing the host. State is never persisted."""
        for handle in self._handles:
            handle.close()
        self._handles = []
        self.controller = None
        self.auto_router = None
        self.presenter = None
        self.catalog = None
        self.context = None

    # --------------------------------------------------------------
    # Internal helpers
    # --------------------------------------------------------------
    def _run(self, command: str, action, result: bool = False) -> bool:
        try:
            if not self.initialized:
                raise UninitializedError(command)
            outcome = action()
        except RoutingError as e:
            self._report(command, e)
            return False
        self.last_error = None
        return bool(outcome) if result else True

    def _report(self, command: str, err: RoutingError) -> None:
        self.last_error = err
        hint = ""
        if isinstance(err, UninitializedError):
            hint = _HINTS.get(command, "")
        elif type(err) is InvalidIndexError:
            hint = _INDEX_HINT
        showlog.error(f"[IO_ROUTING] {err}" + (f"\n{hint}" if hint else ""))

    def __repr__(self):
        state = f"{self.context.io_type}:{self.context.channel_offset}" if self.context else "uninitialized"
        return f"IORouting({state})"

"""
I/O routing menus for a hosted device.

Keeps a routing type menu and a dependent routing channel menu in step with
the host's routing object, and can auto-route MIDI input to the device's own
track.
"""

from .device import IORouting
from .context import DeviceRoutingContext
from .entries import RoutingEntry
from .errors import (
    ArgumentCountError,
    ArgumentError,
    InvalidIndexError,
    InvalidRoutingChannelError,
    InvalidRoutingTypeError,
    RoutingError,
    UninitializedError,
)
from .outlets import MenuOutlet, MessageOutlet, RecordingOutlet

__all__ = [
    "IORouting",
    "DeviceRoutingContext",
    "RoutingEntry",
    "RoutingError",
    "ArgumentError",
    "ArgumentCountError",
    "UninitializedError",
    "InvalidIndexError",
    "InvalidRoutingTypeError",
    "InvalidRoutingChannelError",
    "MenuOutlet",
    "MessageOutlet",
    "RecordingOutlet",
]

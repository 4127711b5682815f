"""Shared host fixtures for the routing tests."""

from __future__ import annotations

from typing import List, Optional

from routing.device import IORouting
from routing.outlets import RecordingOutlet
from system.live_object import LiveObjectModel

DEVICE_PATH = "live_set tracks 0 devices 0"
TRACK_PATH = "live_set tracks 0"


def entry(name: str, identifier: int) -> dict:
    return {"display_name": name, "identifier": identifier}


ALL_INS = entry("All Ins", 1)
KEYBOARD = entry("Computer Keyboard", 2)
THIS_TRACK = entry("1-MIDI", 3)
NO_INPUT = entry("No Input", 9)

TYPES = [ALL_INS, KEYBOARD, THIS_TRACK, NO_INPUT]
TRACK_INPUTS = [ALL_INS, KEYBOARD, NO_INPUT]

CHANNELS = [entry("All Channels", 100), entry("Ch. 1", 101), entry("Ch. 2", 102)]
BLANK_CHANNEL = [entry("", 0)]


def routing_path(io_type: str = "midi_inputs", offset: int = 0, device_path: str = DEVICE_PATH) -> str:
    return f"{device_path} {io_type} {offset}"


def make_model(types: Optional[List[dict]] = None,
               channels: Optional[List[dict]] = None,
               routing_type: Optional[dict] = None,
               routing_channel: Optional[dict] = None,
               track_inputs: Optional[List[dict]] = None,
               has_midi_input: bool = True,
               io_type: str = "midi_inputs",
               offset: int = 0,
               device_path: str = DEVICE_PATH,
               track_path: Optional[str] = TRACK_PATH) -> LiveObjectModel:
    """One track, one device on it, one routing object on the device."""
    types = TYPES if types is None else types
    channels = BLANK_CHANNEL if channels is None else channels
    model = LiveObjectModel()
    if track_path:
        model.add_object(track_path, has_midi_input=has_midi_input,
                         available_input_routing_types=TRACK_INPUTS if track_inputs is None else track_inputs)
    model.add_object(device_path)
    model.alias("this_device", device_path)
    model.add_object(routing_path(io_type, offset, device_path),
                     available_routing_types=types,
                     available_routing_channels=channels,
                     routing_type=routing_type if routing_type is not None else (types[-1] if types else None),
                     routing_channel=routing_channel if routing_channel is not None else (channels[0] if channels else None))
    return model


def make_device(model: LiveObjectModel, *args, init: bool = True):
    """IORouting with recording outlets; args default to ('ioRouting', 'midi_inputs')."""
    argv = ["ioRouting"] + list(args or ["midi_inputs"])
    type_outlet, channel_outlet = RecordingOutlet(), RecordingOutlet()
    device = IORouting(model, argv, type_outlet, channel_outlet)
    if init:
        device.init()
    return device, type_outlet, channel_outlet

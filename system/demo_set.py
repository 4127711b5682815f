"""
Demo Live set.

Builds a small host object model with one device on a MIDI track and a
routing object for each io type, so the routing menus can run without a
host. MIDI input routing types include the MIDI ports found on this machine
(via mido). Selecting a routing type refreshes the channel catalog, the way
the host does.
"""

from typing import Dict, List, Optional

import mido

import config as cfg
import showlog
from system.live_object import LiveObjectModel, PropertyEvent

DEVICE_PATH = "live_set tracks 0 devices 0"

# Identifiers are opaque to the routing code; these just have to be unique
_ID_ALL_INS = 1
_ID_COMPUTER_KEYBOARD = 2
_ID_FIRST_PORT = 100
_ID_THIS_TRACK = 10
_ID_OTHER_TRACK = 11
_ID_NO_INPUT = 99

_ID_EXT_IN = 20
_ID_RESAMPLING = 21
_ID_MASTER = 22
_ID_NO_OUTPUT = 98


def _entry(name: str, identifier: int) -> Dict:
    return {"display_name": name, "identifier": identifier}


def discover_midi_ports() -> List[str]:
    """Names of the MIDI input ports mido can see ([] when no backend is usable)."""
    try:
        names = list(mido.get_input_names())
    except Exception as e:
        showlog.warn(f"[DEMO_SET] MIDI port discovery failed: {e}")
        return []
    showlog.info(f"[DEMO_SET] {len(names)} MIDI input port(s) found")
    return names


def _midi_channels(base: int) -> List[Dict]:
    return [_entry("All Channels", base)] + [_entry(f"Ch. {n}", base + n) for n in range(1, 17)]


class DemoLiveSet:
    """A LiveObjectModel populated with tracks, a device and its routing objects."""

    def __init__(self, midi_ports: Optional[List[str]] = None, model: Optional[LiveObjectModel] = None):
        self.model = model or LiveObjectModel()
        self.midi_ports = list(midi_ports) if midi_ports is not None else discover_midi_ports()
        self._channel_tables: Dict[str, Dict[int, List[Dict]]] = {}
        self._unsubscribers = []
        self._build()

    # --------------------------------------------------------------
    # Construction
    # --------------------------------------------------------------
    def _build(self) -> None:
        model = self.model
        port_types = [_entry(name, _ID_FIRST_PORT + i) for i, name in enumerate(self.midi_ports)]
        shared_inputs = [_entry("All Ins", _ID_ALL_INS), _entry("Computer Keyboard", _ID_COMPUTER_KEYBOARD)] + port_types

        # the track cannot list itself as an input source; its own device can
        model.add_object("live_set tracks 0", name="1-MIDI", has_midi_input=True,
                         available_input_routing_types=shared_inputs + [
                             _entry("2-MIDI", _ID_OTHER_TRACK), _entry("No Input", _ID_NO_INPUT)])
        model.add_object("live_set tracks 1", name="2-MIDI", has_midi_input=True,
                         available_input_routing_types=shared_inputs + [
                             _entry("1-MIDI", _ID_THIS_TRACK), _entry("No Input", _ID_NO_INPUT)])
        model.add_object("live_set return_tracks 0", name="A-Reverb", has_midi_input=False,
                         available_input_routing_types=[])
        model.add_object("live_set master_track", name="Master", has_midi_input=False,
                         available_input_routing_types=[])
        model.add_object(DEVICE_PATH, name="I/O Routing")
        model.alias(cfg.DEVICE_PATH_ALIAS, DEVICE_PATH)

        no_channel = [_entry("", 0)]
        midi_in_types = shared_inputs + [
            _entry("1-MIDI", _ID_THIS_TRACK), _entry("2-MIDI", _ID_OTHER_TRACK), _entry("No Input", _ID_NO_INPUT)]
        midi_in_channels = {t["identifier"]: _midi_channels(1000 + t["identifier"] * 20) for t in midi_in_types}
        midi_in_channels[_ID_THIS_TRACK] = [_entry("Track In", 5000)]
        midi_in_channels[_ID_OTHER_TRACK] = [_entry("Track In", 5001), _entry("Post FX", 5002)]
        midi_in_channels[_ID_NO_INPUT] = no_channel
        self._add_routing(cfg.MIDI_INPUTS, midi_in_types, midi_in_channels, _ID_NO_INPUT)

        midi_out_types = port_types + [_entry("2-MIDI", _ID_OTHER_TRACK), _entry("No Output", _ID_NO_OUTPUT)]
        midi_out_channels = {t["identifier"]: _midi_channels(3000 + t["identifier"] * 20)[1:] for t in midi_out_types}
        midi_out_channels[_ID_NO_OUTPUT] = no_channel
        self._add_routing(cfg.MIDI_OUTPUTS, midi_out_types, midi_out_channels, _ID_NO_OUTPUT)

        audio_in_types = [_entry("Ext. In", _ID_EXT_IN), _entry("Resampling", _ID_RESAMPLING),
                          _entry("2-MIDI", _ID_OTHER_TRACK), _entry("No Input", _ID_NO_INPUT)]
        audio_in_channels = {
            _ID_EXT_IN: [_entry(f"{n}/{n + 1}", 6000 + n) for n in range(1, 8, 2)],
            _ID_RESAMPLING: [_entry("Post FX", 6100)],
            _ID_OTHER_TRACK: [_entry("Pre FX", 6200), _entry("Post FX", 6201), _entry("Post Mixer", 6202)],
            _ID_NO_INPUT: no_channel,
        }
        self._add_routing(cfg.AUDIO_INPUTS, audio_in_types, audio_in_channels, _ID_NO_INPUT)

        audio_out_types = [_entry("Master", _ID_MASTER), _entry("2-MIDI", _ID_OTHER_TRACK),
                           _entry("No Output", _ID_NO_OUTPUT)]
        audio_out_channels = {
            _ID_MASTER: [_entry("Track In", 7000)],
            _ID_OTHER_TRACK: [_entry("Track In", 7100), _entry("Post FX", 7101)],
            _ID_NO_OUTPUT: no_channel,
        }
        self._add_routing(cfg.AUDIO_OUTPUTS, audio_out_types, audio_out_channels, _ID_NO_OUTPUT)

    def _add_routing(self, io_type: str, types: List[Dict], channels: Dict[int, List[Dict]],
                     initial: int) -> None:
        path = self.routing_path(io_type)
        current = next(t for t in types if t["identifier"] == initial)
        self.model.add_object(path,
                              available_routing_types=types,
                              available_routing_channels=channels[initial],
                              routing_type=current,
                              routing_channel=channels[initial][0])
        self._channel_tables[path] = channels
        self._unsubscribers.append(
            self.model.observe(path, cfg.PROP_ROUTING_TYPE,
                               lambda event, p=path: self._on_routing_type(p, event)))

    # --------------------------------------------------------------
    # Host behaviour
    # --------------------------------------------------------------
    def _on_routing_type(self, path: str, event: PropertyEvent) -> None:
        """A new routing type brings its own channel catalog."""
        if event.name != cfg.PROP_ROUTING_TYPE or not isinstance(event.value, dict):
            return
        available = {t["identifier"] for t in self.model.read(path, cfg.PROP_AVAILABLE_TYPES, [])}
        identifier = event.value.get("identifier")
        channels = self._channel_tables[path].get(identifier, []) if identifier in available else []
        if channels == self.model.read(path, cfg.PROP_AVAILABLE_CHANNELS):
            return
        self.model.set(path, cfg.PROP_AVAILABLE_CHANNELS, channels)
        if channels:
            self.model.set(path, cfg.PROP_ROUTING_CHANNEL, channels[0])

    def routing_path(self, io_type: str, offset: int = 0) -> str:
        return f"{DEVICE_PATH} {io_type} {offset}"

    def disable_type(self, io_type: str, identifier: int, offset: int = 0) -> bool:
        """
        Remove a routing source, as when the device behind it is deleted.
        When it was the selected source the channel catalog empties while
        routing_type keeps its stale value.
        """
        path = self.routing_path(io_type, offset)
        types = self.model.read(path, cfg.PROP_AVAILABLE_TYPES, [])
        remaining = [t for t in types if t["identifier"] != identifier]
        if len(remaining) == len(types):
            return False
        showlog.info(f"[DEMO_SET] Disabling routing source {identifier} on {io_type}")
        self.model.set(path, cfg.PROP_AVAILABLE_TYPES, remaining)
        current = self.model.read(path, cfg.PROP_ROUTING_TYPE, {})
        if current.get("identifier") == identifier:
            self.model.set(path, cfg.PROP_AVAILABLE_CHANNELS, [])
        return True

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

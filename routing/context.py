"""
Device routing context.

Which axis (midi/audio, in/out) and which channel pair one device instance
governs. Built once from the startup arguments and never changed.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import config as cfg
from routing.errors import ArgumentCountError, ArgumentError


@dataclass(frozen=True)
class DeviceRoutingContext:
    io_type: str
    channel_offset: int = 0

    @property
    def path(self) -> str:
        """Host path of the routing object, e.g. 'this_device midi_inputs 0'."""
        return f"{cfg.DEVICE_PATH_ALIAS} {self.io_type} {self.channel_offset}"

    @property
    def is_midi_input(self) -> bool:
        return self.io_type == cfg.MIDI_INPUTS

    @classmethod
    def from_args(cls, args: Sequence[Any]) -> "DeviceRoutingContext":
        """
        Parse startup arguments laid out like the host's: [script, io_type, (offset)].

        Raises:
            ArgumentCountError: fewer than two or more than three arguments
            ArgumentError: unknown io type or bad channel offset
        """
        args = list(args or [])
        if len(args) < 2 or len(args) > 3:
            script = args[0] if args else "ioRouting"
            raise ArgumentCountError(len(args), f"{script} {cfg.USAGE}")

        io_type = str(args[1])
        if io_type not in cfg.IO_TYPES:
            raise ArgumentError(f"unknown ioType '{io_type}'; expected one of {', '.join(cfg.IO_TYPES)}")

        offset = 0
        if len(args) == 3:
            offset = _parse_offset(args[2])
        return cls(io_type, offset)


def _parse_offset(value: Any) -> int:
    if isinstance(value, bool):
        raise ArgumentError(f"invalid channelOffset: {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int) or value < 0:
        raise ArgumentError(f"invalid channelOffset: {value!r}; expected a zero-based integer")
    return value

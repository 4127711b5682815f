"""
Command queue processing.

Drains inbound commands for an IORouting device and dispatches them by name.
Commands arrive either as tuples ("settype", 2) or as host message text
("settype 2"); numeric atoms in text are converted to numbers.
"""

import queue
from typing import Any, Callable, Dict, List, Optional, Tuple

import showlog
from routing.device import IORouting


def parse_atom(text: str) -> Any:
    """'2' -> 2, '2.5' -> 2.5, anything else stays text."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def parse_message(msg: str) -> Tuple[str, List[Any]]:
    parts = str(msg).split()
    if not parts:
        return "", []
    return parts[0], [parse_atom(p) for p in parts[1:]]


class CommandQueueProcessor:
    """Processes commands from the application queue."""

    def __init__(self, msg_queue: queue.Queue, device: IORouting):
        """
        Initialize command queue processor.

        Args:
            msg_queue: The application command queue
            device: Routing device the commands are for
        """
        self.msg_queue = msg_queue
        self.device = device
        self.handlers: Dict[str, Callable[..., Any]] = {
            "init": lambda *args: device.init(),
            "settype": lambda *args: device.set_type(args[0] if args else None),
            "setchannel": lambda *args: device.set_channel(args[0] if args else None),
            "routethistrack": lambda *args: device.route_to_this_track(args[0] if args else 0),
        }
        # Extra handlers set by the application (e.g. demo-only keys)
        self.on_unknown: Optional[Callable[[str, List[Any]], None]] = None

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        self.handlers[name] = handler

    def process_all(self) -> int:
        """Process every queued command; returns how many were handled."""
        count = 0
        try:
            while True:
                msg = self.msg_queue.get_nowait()
                self.process_message(msg)
                count += 1
        except queue.Empty:
            pass
        return count

    def process_message(self, msg) -> Any:
        """
        Process a single command.

        Args:
            msg: ("name", *args) tuple or "name arg ..." text
        """
        if isinstance(msg, tuple):
            if not msg:
                return None
            name, args = str(msg[0]), list(msg[1:])
        else:
            name, args = parse_message(msg)

        handler = self.handlers.get(name)
        if handler is None:
            if self.on_unknown:
                return self.on_unknown(name, args)
            showlog.warn(f"[CMD_QUEUE] Unknown command: {msg!r}")
            return None

        showlog.debug(f"[CMD_QUEUE] {name} {args}")
        return handler(*args)

"""I/O routing exception hierarchy.

Shared by the controller, the auto-router and the device façade so every
module raises and catches the same types. None of them is fatal: the device
reports them through showlog and keeps running.
"""

from typing import Any


class RoutingError(Exception):
    """Base for all routing errors."""


class ArgumentError(RoutingError):
    """Startup arguments are unusable; the device stays uninitialized."""


class ArgumentCountError(ArgumentError):
    """Wrong number of startup arguments."""

    def __init__(self, count: int, usage: str = "") -> None:
        self.count = count
        self.usage = usage
        message = f"invalid number of arguments ({count})."
        if usage:
            message += f" usage: {usage}"
        super().__init__(message)


class UninitializedError(RoutingError):
    """A command arrived before a successful init()."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Called {command} before init.")


class InvalidIndexError(RoutingError):
    """Menu index is not a finite number, or points at no catalog entry."""

    def __init__(self, index: Any, command: str = "") -> None:
        self.index = index
        self.command = command
        where = f" for {command}" if command else ""
        super().__init__(f"Invalid argument{where}: {index!r}")


class InvalidRoutingTypeError(InvalidIndexError):
    """Index passed the number check but there is no routing type at it."""

    def __init__(self, index: Any, command: str = "settype") -> None:
        super().__init__(index, command)
        self.args = (f"Invalid Routing Type: {index!r}",)


class InvalidRoutingChannelError(InvalidIndexError):
    """Index passed the number check but there is no routing channel at it."""

    def __init__(self, index: Any, command: str = "setchannel") -> None:
        super().__init__(index, command)
        self.args = (f"Invalid Routing Channel: {index!r}",)

"""
Menu outlets.

The routing core talks to each of its two menus (routing type, routing
channel) through a MenuOutlet. MessageOutlet turns those calls into the
host's menu messages; widgets.menu_widget.MenuWidget draws them with pygame.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence


class MenuOutlet(ABC):
    """UI side of one routing menu."""

    @abstractmethod
    def update_option_list(self, labels: Sequence[str]) -> None:
        """Replace the menu items."""

    @abstractmethod
    def select_by_label(self, label: str) -> None:
        """Show the item whose label equals label, without emitting a selection."""

    @abstractmethod
    def set_enabled(self, enabled: bool) -> None:
        """Draw the menu active or greyed out."""

    @abstractmethod
    def set_click_through(self, ignore: bool) -> None:
        """True: the menu ignores mouse clicks."""


class MessageOutlet(MenuOutlet):
    """
    Emits host menu messages through send(*message):

        ("_parameter_range", [labels...])
        ("setsymbol", label)
        ("active", 0|1)
        ("ignoreclick", 0|1)
    """

    def __init__(self, send: Callable[..., None]):
        self._send = send

    def update_option_list(self, labels: Sequence[str]) -> None:
        self._send("_parameter_range", list(labels))

    def select_by_label(self, label: str) -> None:
        self._send("setsymbol", label)

    def set_enabled(self, enabled: bool) -> None:
        self._send("active", int(bool(enabled)))

    def set_click_through(self, ignore: bool) -> None:
        self._send("ignoreclick", int(bool(ignore)))


class RecordingOutlet(MessageOutlet):
    """MessageOutlet that keeps what it sent (headless runs and tests)."""

    def __init__(self):
        self.messages: List[tuple] = []
        super().__init__(lambda *message: self.messages.append(message))

    def last(self, name: str):
        """Argument of the latest message called name, None if never sent."""
        for message in reversed(self.messages):
            if message[0] == name:
                return message[1]
        return None

    def clear(self) -> None:
        self.messages.clear()

"""
Routing menu event handler.

Turns clicks on the two routing menus into queued device commands.
"""

import pygame

import config as cfg


class MenuEventHandler:
    """Handles mouse/key events for the routing menus."""

    def __init__(self, msg_queue, type_menu, channel_menu):
        """
        Initialize menu event handler.

        Args:
            msg_queue: Application command queue
            type_menu: MenuWidget for routing types
            channel_menu: MenuWidget for routing channels
        """
        self.msg_queue = msg_queue
        self.menus = [(type_menu, "settype"), (channel_menu, "setchannel")]

    def handle_event(self, event: pygame.event.Event):
        """
        Handle one pygame event.

        Args:
            event: Pygame event
        """
        if event.type == pygame.MOUSEBUTTONDOWN and hasattr(event, "pos"):
            # an open list lies on top of everything else
            ordered = sorted(self.menus, key=lambda pair: not pair[0].open)
            for menu, command in ordered:
                was_open = menu.open
                index = menu.handle_click(event.pos)
                if index is not None:
                    self.msg_queue.put((command, index))
                    return
                if was_open or menu.open:
                    return
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_r:
                self.msg_queue.put(("routethistrack", 1))
            elif event.key == pygame.K_d:
                self.msg_queue.put(("disable", cfg.MIDI_INPUTS))

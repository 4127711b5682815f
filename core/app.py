"""
Demo application class.

Runs one IORouting device against the demo Live set, with its two menus
drawn by pygame.
"""

import queue
from typing import List, Optional

import pygame

import config as cfg
import showlog
from handlers.menu_handler import MenuEventHandler
from managers.command_queue import CommandQueueProcessor
from routing.device import IORouting
from system.demo_set import DemoLiveSet
from widgets.menu_widget import MenuWidget
from .loop import EventLoop


class RoutingApp:
    """Demo application coordinator."""

    def __init__(self, args: List[str], live_set: Optional[DemoLiveSet] = None):
        """
        Args:
            args: startup arguments, [script, io_type, (offset)]
            live_set: host stand-in (built on initialize() when omitted)
        """
        self.args = list(args)
        self.live_set = live_set
        self.screen: Optional[pygame.Surface] = None
        self.msg_queue: queue.Queue = queue.Queue()
        self.event_loop: Optional[EventLoop] = None
        self.type_menu: Optional[MenuWidget] = None
        self.channel_menu: Optional[MenuWidget] = None
        self.device: Optional[IORouting] = None
        self.msg_processor: Optional[CommandQueueProcessor] = None

    def initialize(self):
        """Initialize display, host stand-in, device and event handling."""
        self._init_display()
        if self.live_set is None:
            self.live_set = DemoLiveSet()
        self._init_menus()

        self.device = IORouting(self.live_set.model, self.args, self.type_menu, self.channel_menu)
        self.msg_processor = CommandQueueProcessor(self.msg_queue, self.device)
        self.msg_processor.register("disable", self._disable_selected_source)

        self.event_loop = EventLoop()
        handler = MenuEventHandler(self.msg_queue, self.type_menu, self.channel_menu)
        self.event_loop.add_handler(handler.handle_event)

        # the host's "device ready" moment
        self.msg_queue.put(("init",))
        showlog.info("[APP] Demo ready: click menus, R = route to this track, D = disable source")

    def _init_display(self):
        pygame.init()
        self.screen = pygame.display.set_mode((cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT))
        pygame.display.set_caption(f"{cfg.WINDOW_TITLE} - {' '.join(str(a) for a in self.args[1:])}")
        showlog.init(self.screen)

    def _init_menus(self):
        x = cfg.MENU_SPACING
        y = cfg.MENU_SPACING
        self.type_menu = MenuWidget("type", pygame.Rect(x, y, cfg.MENU_WIDTH, cfg.MENU_HEIGHT))
        x += cfg.MENU_WIDTH + cfg.MENU_SPACING
        self.channel_menu = MenuWidget("channel", pygame.Rect(x, y, cfg.MENU_WIDTH, cfg.MENU_HEIGHT))

    def _disable_selected_source(self, *args):
        """Demo key D: remove the source shown in the type menu from the host."""
        if not self.device.initialized:
            return False
        label = self.type_menu.label()
        for entry in self.device.catalog.types()[:-1]:
            if entry.display_name == label:
                return self.live_set.disable_type(self.device.context.io_type, entry.identifier,
                                                  self.device.context.channel_offset)
        showlog.warn(f"[APP] '{label}' cannot be disabled")
        return False

    def update(self):
        self.msg_processor.process_all()

    def render(self):
        self.screen.fill(pygame.Color(cfg.BACKGROUND_COLOR))
        # open lists last so they sit on top
        for menu in sorted((self.type_menu, self.channel_menu), key=lambda m: m.open):
            menu.draw(self.screen)
        showlog.draw_bar(self.screen, self.event_loop.get_fps())
        pygame.display.flip()

    def run(self):
        self.event_loop.run(self.update, self.render, cfg.FPS)

    def cleanup(self):
        if self.device:
            self.device.close()
        if self.live_set:
            self.live_set.close()
        showlog.flush()
        pygame.quit()

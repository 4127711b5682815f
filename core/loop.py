"""
Demo frame loop.

One pass per frame: pygame events go to the registered handlers, queued
device commands are drained, then the screen is redrawn.
"""

from typing import Callable, List, Optional

import pygame

import showlog

EventHandler = Callable[[pygame.event.Event], None]


class EventLoop:
    """Frame loop of the routing demo. Quit, Escape and stop() end it."""

    def __init__(self):
        self.handlers: List[EventHandler] = []
        self.clock: Optional[pygame.time.Clock] = None
        self.running = False
        self.frames = 0

    def add_handler(self, handler: EventHandler):
        self.handlers.append(handler)

    def _dispatch(self, event: pygame.event.Event) -> None:
        quit_key = event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
        if event.type == pygame.QUIT or quit_key:
            self.stop()
            return
        for handler in self.handlers:
            handler(event)

    def run(self, update: Callable[[], None], render: Callable[[], None], fps: int = 30,
            max_frames: Optional[int] = None):
        """
        Loop until stopped (or max_frames frames have run).

        Args:
            update: drains queued commands, once per frame
            render: redraws the screen, once per frame
            fps: frame rate cap
        """
        self.clock = pygame.time.Clock()
        self.running = True
        showlog.debug(f"[LOOP] Running at {fps} fps")
        while self.running:
            for event in pygame.event.get():
                self._dispatch(event)
            if not self.running:
                break
            update()
            render()
            self.clock.tick(fps)
            self.frames += 1
            if max_frames is not None and self.frames >= max_frames:
                self.stop()

    def stop(self):
        self.running = False

    def get_fps(self) -> float:
        return self.clock.get_fps() if self.clock else 0.0

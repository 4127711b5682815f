"""
Core runtime module.

Event delivery for the host model and the demo's pygame loop.
"""

from .event_bus import EventBus
from .loop import EventLoop

__all__ = ["EventBus", "EventLoop"]

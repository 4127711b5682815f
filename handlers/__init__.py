"""
Event handlers.

Pygame event handling for the routing demo.
"""

from .menu_handler import MenuEventHandler

__all__ = ["MenuEventHandler"]

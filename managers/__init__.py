"""
Manager modules.

Command dispatch for routing devices.
"""

from .command_queue import CommandQueueProcessor

__all__ = ["CommandQueueProcessor"]

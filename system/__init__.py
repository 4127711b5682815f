"""
Host-side object model.

In-memory stand-in for the host's observable objects, handles onto it and
path helpers.
"""

from .live_object import LiveObjectModel, LiveObjectError, PropertyEvent
from .live_api import ObjectHandle, PropertyHandle

__all__ = ["LiveObjectModel", "LiveObjectError", "PropertyEvent", "ObjectHandle", "PropertyHandle"]

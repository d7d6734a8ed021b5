"""
Internal utilities for valuebridge.
"""

from .listener_list import Listener, ListenerList

__all__ = [
    "Listener",
    "ListenerList",
]

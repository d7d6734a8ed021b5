"""
Subscription handles returned by listen() and listen_to().
"""

import logging

from .listenable import Listenable
from .util.listener_list import Listener

logger = logging.getLogger(__name__)


class Subscription:
    """
    Disposer for exactly one listener registration.

    Calling the subscription (or dispose()) removes the listener it was
    created with from the listenable it was registered on. Later calls do
    nothing. It can also be used as a context manager, disposing on exit:

        with holder.listen(print):
            holder(1)  # prints 1
        holder(2)      # prints nothing
    """

    __slots__ = ("_listenable", "_listener", "_active")

    def __init__(self, listenable: Listenable, listener: Listener, active: bool = True):
        self._listenable = listenable
        self._listener = listener
        self._active = active

    @property
    def active(self) -> bool:
        return self._active

    def dispose(self) -> None:
        if not self._active:
            return
        self._active = False
        self._listenable.remove_listener(self._listener)
        logger.debug("Disposed subscription on %r", self._listenable)

    def __call__(self) -> None:
        self.dispose()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()
        return False

    def __repr__(self) -> str:
        state = "active" if self._active else "disposed"
        return f"Subscription({self._listenable!r}, {state})"

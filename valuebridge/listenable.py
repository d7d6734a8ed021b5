"""
valuebridge Listenable - Change Notification Primitives
=======================================================

This module provides the payload-free notification sources everything else in
valuebridge is built on:

- Listenable: anything listeners can be attached to and detached from
- ChangeNotifier: a Listenable that owns its listeners and fires them
- MergedListenable: a read-only fan-in over several Listenables

Listeners are zero-argument callables. They are matched by equality on
removal, so a bound method can be removed by passing the same bound method
again.

Example:
    ```python
    from valuebridge import ChangeNotifier

    first = ChangeNotifier()
    second = ChangeNotifier()
    either = first + second

    either.add_listener(lambda: print("something changed"))
    first.notify_listeners()   # something changed
    second.notify_listeners()  # something changed
    ```
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from .util.listener_list import Listener, ListenerList

logger = logging.getLogger(__name__)


def _check_listener(listener: Listener) -> None:
    if not callable(listener):
        raise TypeError(f"Listener must be callable, got {type(listener).__name__}")


class Listenable(ABC):
    """
    A source of "something changed" notifications.

    Subclasses decide where listeners live. The + operator merges two
    listenables into one that fires whenever either fires.
    """

    @abstractmethod
    def add_listener(self, listener: Listener) -> None:
        """Register listener to be called on every notification."""

    @abstractmethod
    def remove_listener(self, listener: Listener) -> None:
        """Remove one registration of listener. Unknown listeners are ignored."""

    def __add__(self, other: "Listenable") -> "MergedListenable":
        """
        Merge operator: a + b -> Listenable firing when a or b fires.

        Two separate firings stay separate, nothing is coalesced.
        """
        if not isinstance(other, Listenable):
            return NotImplemented
        return merge([self, other])


class ChangeNotifier(Listenable):
    """
    A Listenable that stores its own listeners and fires them on demand.

    Notification is synchronous and runs listeners in registration order.
    Listeners may add or remove listeners (themselves included) while being
    notified; see ListenerList for how that affects the running pass.

    Once disposed, a notifier drops its listeners and ignores every further
    add, remove and notify call.
    """

    def __init__(self):
        self._listeners = ListenerList()
        self._disposed = False

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_listener(self, listener: Listener) -> None:
        _check_listener(listener)
        if self._disposed:
            logger.debug("Ignoring add_listener on disposed %r", self)
            return
        self._listeners.add(listener)
        logger.debug("Added listener %r to %r", listener, self)

    def remove_listener(self, listener: Listener) -> None:
        if self._disposed:
            return
        if self._listeners.remove(listener):
            logger.debug("Removed listener %r from %r", listener, self)

    def notify_listeners(self) -> None:
        """
        Call every registered listener.

        Exceptions raised by a listener propagate to the caller and end the
        pass; listeners after it are not called.
        """
        if self._disposed:
            logger.debug("Ignoring notify_listeners on disposed %r", self)
            return
        self._listeners.notify_all()

    def dispose(self) -> None:
        """Drop all listeners and stop accepting new ones. Safe to repeat."""
        if self._disposed:
            return
        self._listeners.clear()
        self._disposed = True
        logger.debug("Disposed %r", self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(listeners={len(self._listeners)})"


class MergedListenable(Listenable):
    """
    A read-only Listenable that fires whenever any of its sources fires.

    It keeps no listener list of its own. Adding a listener registers it on
    every source and removing it removes it from every source, so each
    source firing reaches the listener exactly once.
    """

    __slots__ = ("_sources",)

    def __init__(self, sources: List[Listenable]):
        self._sources = tuple(sources)

    @property
    def sources(self) -> Tuple[Listenable, ...]:
        return self._sources

    def add_listener(self, listener: Listener) -> None:
        _check_listener(listener)
        for source in self._sources:
            source.add_listener(listener)

    def remove_listener(self, listener: Listener) -> None:
        for source in self._sources:
            source.remove_listener(listener)

    def __repr__(self) -> str:
        inner = ", ".join(repr(source) for source in self._sources)
        return f"MergedListenable({inner})"


def merge(listenables: Iterable[Optional[Listenable]]) -> MergedListenable:
    """
    Fan several listenables into one.

    None entries are skipped so optional sources can be passed straight
    through.

    Raises:
        ValueError: If no listenable is left after skipping None.
        TypeError: If an entry is not a Listenable.
    """
    sources = []
    for listenable in listenables:
        if listenable is None:
            continue
        if not isinstance(listenable, Listenable):
            raise TypeError(f"Cannot merge {type(listenable).__name__}")
        sources.append(listenable)

    if not sources:
        raise ValueError("At least one listenable must be provided for merging")

    logger.debug("Merging %d listenables", len(sources))
    return MergedListenable(sources)

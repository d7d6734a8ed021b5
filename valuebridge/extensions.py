"""
valuebridge Extensions - Shorthand Operations on Listenables and Values
=======================================================================

Module-level functions that take the object they act on as the first
argument:

- combine(a, b): one Listenable firing whenever a or b fires
- assign(holder, value): set and return the holder, for chaining
- update(holder, fn): replace the value with fn(value)
- listen(holder, on_change): value-aware subscription with a disposer
- listen_to(target, source): one-way mirror from source into target

All of them run synchronously on the calling thread. Exceptions raised by
caller-supplied functions propagate unchanged.
"""

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from .listenable import ChangeNotifier, Listenable, merge
from .subscription import Subscription

if TYPE_CHECKING:
    from .value import ObservableValue, ValueListenable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def combine(a: Listenable, b: Listenable) -> Listenable:
    """
    Merge two listenables.

    A listener on the result is called once each time a fires and once each
    time b fires. Same as a + b.
    """
    return merge([a, b])


def assign(holder: "ObservableValue[T]", value: T) -> "ObservableValue[T]":
    holder.value = value
    return holder


def update(
    holder: "ObservableValue[T]", fn: Callable[[T], T]
) -> "ObservableValue[T]":
    """
    Replace the held value with fn(current value) and return the holder.

    If fn raises, the holder keeps its value and nothing is notified.
    """
    holder.value = fn(holder.value)
    return holder


def listen(
    holder: "ValueListenable[T]",
    on_change: Callable[[T], None],
    fire_immediately: bool = False,
) -> Subscription:
    """
    Call on_change with the holder's value every time it notifies.

    The value is read from the holder when the notification arrives, so a
    listener always sees the latest value even if an earlier listener
    assigned a new one in the meantime.

    Args:
        holder: The value to watch
        on_change: Called with the current value
        fire_immediately: Also call on_change once right now, before registering

    Returns:
        Subscription removing exactly this listener; safe to call repeatedly.
        On a disposed holder nothing is called or registered and the
        Subscription comes back already inactive.

    Raises:
        TypeError: If on_change is not callable
    """
    if not callable(on_change):
        raise TypeError("on_change must be callable")

    def handle_change():
        on_change(holder.value)

    if isinstance(holder, ChangeNotifier) and holder.disposed:
        logger.debug("Ignoring listen on disposed %r", holder)
        return Subscription(holder, handle_change, active=False)

    if fire_immediately:
        handle_change()

    holder.add_listener(handle_change)
    return Subscription(holder, handle_change)


def listen_to(
    target: "ObservableValue[T]",
    source: "ValueListenable[T]",
    fire_immediately: bool = False,
) -> Subscription:
    """
    Mirror source into target: every change of source is assigned to target.

    The returned Subscription detaches the mirror; once disposed, source
    changes no longer reach target. Every source change is assigned, even
    when target already holds an equal value. A mirror ignores notifications
    that arrive while it is still assigning, so two holders can mirror each
    other (or a holder itself) without recursing.

    Args:
        target: Receives the values
        source: Value being watched
        fire_immediately: Copy the current source value into target right away
    """
    mirroring = False

    def mirror(value: T) -> None:
        nonlocal mirroring
        # Echo of our own assignment
        if mirroring:
            return
        mirroring = True
        try:
            assign(target, value)
        finally:
            mirroring = False

    return listen(source, mirror, fire_immediately=fire_immediately)

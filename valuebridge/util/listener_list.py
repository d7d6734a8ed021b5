"""
Copy-on-Write Listener List
===========================

This module provides ListenerList, the registration-ordered listener storage
behind every ChangeNotifier.

Mutations never touch the list a notification pass is walking. Adding or
removing a listener builds a new backing list and swaps it in, so a pass keeps
iterating the snapshot it started with:

- listeners added during a pass are not called by that pass
- listeners removed during a pass are skipped for the rest of that pass
"""

from typing import Callable, List

Listener = Callable[[], None]


class _Registration:
    """One registration of a listener."""

    __slots__ = ("listener", "active")

    def __init__(self, listener: Listener):
        self.listener = listener
        self.active = True


class ListenerList:
    """
    Ordered listener storage with copy-on-write mutation.

    The same listener may be registered several times. It is then called
    once per registration, and each remove() drops the earliest one.
    """

    __slots__ = ("_registrations",)

    def __init__(self):
        self._registrations: List[_Registration] = []

    def add(self, listener: Listener) -> None:
        """Append listener, copying the backing list."""
        self._registrations = self._registrations + [_Registration(listener)]

    def remove(self, listener: Listener) -> bool:
        """
        Remove the earliest registration equal to listener.

        Returns False when nothing matched, which is not an error.
        """
        for index, registration in enumerate(self._registrations):
            if registration.listener == listener:
                registration.active = False
                self._registrations = (
                    self._registrations[:index] + self._registrations[index + 1 :]
                )
                return True
        return False

    def clear(self) -> None:
        for registration in self._registrations:
            registration.active = False
        self._registrations = []

    def notify_all(self) -> None:
        """Call every listener in registration order."""
        for registration in self._registrations:
            # Removed mid-pass
            if registration.active:
                registration.listener()

    def __contains__(self, listener: object) -> bool:
        return any(r.listener == listener for r in self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)

    def __bool__(self) -> bool:
        return bool(self._registrations)

"""
valuebridge ObservableValue - Mutable Values That Notify
========================================================

ObservableValue holds a single value and notifies its listeners every time
the value is assigned. Listeners are the same zero-argument callables every
Listenable takes; they read the new value back from the holder.

The call/update/listen sugar lives on the class as thin wrappers over the
functions in valuebridge.extensions:

    ```python
    from valuebridge import ObservableValue

    count = ObservableValue(0)
    unsubscribe = count.listen(lambda value: print(f"count={value}"))

    count(1)                         # count=1
    count.update(lambda c: c + 10)   # count=11
    unsubscribe()
    count(99)                        # silent
    ```
"""

from abc import abstractmethod
from typing import Callable, Generic, TypeVar

from . import extensions
from .listenable import ChangeNotifier, Listenable
from .subscription import Subscription

T = TypeVar("T")


class ValueListenable(Listenable, Generic[T]):
    """A Listenable that also exposes a current value."""

    @property
    @abstractmethod
    def value(self) -> T:
        """The current value."""


class ObservableValue(ChangeNotifier, ValueListenable[T]):
    """
    A ChangeNotifier carrying a value.

    Every assignment notifies listeners, including assigning a value equal
    to the current one. Pass distinct=True to skip notification when the
    new value compares equal (==) to the old one.

    After dispose() the holder still stores new values but notifies no one.
    """

    def __init__(self, value: T, distinct: bool = False):
        super().__init__()
        self._value = value
        self._distinct = distinct

    @property
    def distinct(self) -> bool:
        return self._distinct

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._distinct and self._value == new_value:
            return
        self._value = new_value
        self.notify_listeners()

    def get(self) -> T:
        """Explicit getter (alias for value property)."""
        return self._value

    def set(self, new_value: T) -> None:
        """Explicit setter (alias for value property)."""
        self.value = new_value

    def __call__(self, new_value: T) -> "ObservableValue[T]":
        """Assign using call syntax: holder(5). Returns the holder."""
        return extensions.assign(self, new_value)

    def update(self, fn: Callable[[T], T]) -> "ObservableValue[T]":
        return extensions.update(self, fn)

    def listen(
        self, on_change: Callable[[T], None], fire_immediately: bool = False
    ) -> Subscription:
        return extensions.listen(self, on_change, fire_immediately=fire_immediately)

    def listen_to(
        self, source: ValueListenable[T], fire_immediately: bool = False
    ) -> Subscription:
        """Mirror source into this holder. See extensions.listen_to."""
        return extensions.listen_to(self, source, fire_immediately=fire_immediately)

    def __repr__(self) -> str:
        state = "disposed" if self.disposed else f"listeners={len(self._listeners)}"
        return f"ObservableValue({self._value!r}, {state})"

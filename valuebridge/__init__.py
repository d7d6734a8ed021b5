"""
valuebridge - Observable Values and Listenable Plumbing

Small synchronous building blocks for change notification: notifiers,
observable values, merged listenables, and shorthand for assigning,
transforming, subscribing to and mirroring values.
"""

from .extensions import assign, combine, listen, listen_to, update
from .listenable import ChangeNotifier, Listenable, MergedListenable, merge
from .subscription import Subscription
from .value import ObservableValue, ValueListenable

__all__ = [
    # Primitives
    "Listenable",
    "ChangeNotifier",
    "MergedListenable",
    "ValueListenable",
    "ObservableValue",
    "Subscription",
    "merge",
    # Shorthand operations
    "combine",
    "assign",
    "update",
    "listen",
    "listen_to",
]

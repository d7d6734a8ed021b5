"""
Shared pytest fixtures and configuration for valuebridge tests.
"""

import pytest

from valuebridge import ChangeNotifier, ObservableValue


@pytest.fixture
def holder():
    """Provide a fresh ObservableValue starting at 0."""
    return ObservableValue(0)


@pytest.fixture
def notifier():
    """Provide a fresh ChangeNotifier."""
    return ChangeNotifier()


@pytest.fixture
def log():
    """Provide an empty list for recording callback arguments."""
    return []

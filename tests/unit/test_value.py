"""Unit tests for ObservableValue."""

import pytest

from valuebridge import ObservableValue, ValueListenable


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_stores_initial_value():
    """The constructor value is readable through value and get()"""
    obs = ObservableValue("initial")

    assert obs.value == "initial"
    assert obs.get() == "initial"
    assert isinstance(obs, ValueListenable)


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_assignment_notifies_listeners(holder):
    """Setting value, set() and calling the holder each notify once"""
    calls = []
    holder.add_listener(lambda: calls.append(holder.value))

    holder.value = 1
    holder.set(2)
    holder(3)

    assert calls == [1, 2, 3]


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_notifies_on_equal_value_by_default(holder):
    """Assigning the current value again still notifies"""
    calls = []
    holder.add_listener(lambda: calls.append(holder.value))

    holder.value = 0

    assert calls == [0]


@pytest.mark.unit
@pytest.mark.observable
def test_distinct_observable_value_skips_equal_values():
    """distinct=True suppresses notification when the value does not change"""
    obs = ObservableValue(0, distinct=True)
    calls = []
    obs.add_listener(lambda: calls.append(obs.value))

    obs.value = 0
    obs.value = 1
    obs.value = 1

    assert calls == [1]
    assert obs.distinct


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_call_returns_holder_for_chaining(holder):
    """holder(v) returns the holder itself"""
    assert holder(5) is holder
    assert holder(6)(7).value == 7


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_update_applies_function(holder):
    """update(fn) stores fn(old value) and returns the holder"""
    holder(10)

    result = holder.update(lambda value: value * 2)

    assert result is holder
    assert holder.value == 20


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_listen_method_returns_subscription(holder, log):
    """listen() on the holder receives values until disposed"""
    subscription = holder.listen(log.append)

    holder(1)
    subscription()
    holder(2)

    assert log == [1]
    assert not subscription.active


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_listen_to_method_mirrors_source(holder):
    """listen_to() on the holder copies values from the source"""
    source = ObservableValue("a")

    holder.listen_to(source, fire_immediately=True)
    assert holder.value == "a"

    source("b")
    assert holder.value == "b"


@pytest.mark.unit
@pytest.mark.observable
def test_disposed_observable_value_stores_but_does_not_notify(holder, log):
    """A disposed holder keeps accepting values without notifying anyone"""
    holder.listen(log.append)
    holder.dispose()

    holder(42)

    assert holder.value == 42
    assert log == []


@pytest.mark.unit
@pytest.mark.observable
def test_observable_value_repr_shows_value_and_state():
    obs = ObservableValue([1, 2])
    assert repr(obs) == "ObservableValue([1, 2], listeners=0)"

    obs.dispose()
    assert repr(obs) == "ObservableValue([1, 2], disposed)"

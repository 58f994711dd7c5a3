import pytest

from delaycontrol.control_input import ControlInput


def test_when_none_is_written_its_value_should_be_zero():
    cv = ControlInput()
    cv.update(10.0)
    cv.update(None)
    assert cv.value() == pytest.approx(0.0)


def test_when_some_is_being_written_its_value_should_eventually_reach_it():
    cv = ControlInput()
    value = cv.value()
    reached = False
    for _ in range(20):
        cv.update(1.0)
        new_value = cv.value()
        assert new_value > value
        value = new_value
        if value == pytest.approx(1.0):
            reached = True
            break
    assert reached, f"Control has not reached the target {value}"


def test_when_some_is_written_after_none_it_reports_as_plugged_for_one_cycle():
    control = ControlInput()
    control.update(None)
    control.update(10.0)
    assert control.was_plugged
    control.update(None)
    assert not control.was_plugged


def test_unplugging_is_reported_for_one_cycle():
    control = ControlInput()
    control.update(1.0)
    control.update(None)
    assert control.was_unplugged
    assert not control.is_plugged
    control.update(None)
    assert not control.was_unplugged


def test_value_raw_returns_last_written():
    control = ControlInput()
    control.update(0.3)
    control.update(0.7)
    assert control.value_raw() == pytest.approx(0.7)


def test_rising_edge_is_triggered_once():
    control = ControlInput()
    control.update(0.5)
    control.update(1.0)
    assert control.triggered()
    control.update(1.0)
    assert not control.triggered()


def test_slow_rise_is_not_triggered():
    control = ControlInput()
    for value in (0.8, 0.85, 0.88, 0.9):
        control.update(value)
    control.update(0.95)
    assert not control.triggered()


def test_value_near_top_snaps_to_five():
    control = ControlInput()
    for _ in range(4):
        control.update(4.98)
    assert control.last_value_above_noise == pytest.approx(4.98)
    control.update(4.98)
    assert control.last_value_above_noise == 5.0
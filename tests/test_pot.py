import pytest

from delaycontrol.pot import Pot


def test_when_some_is_being_written_its_value_should_eventually_reach_it():
    pot = Pot()
    value = pot.value()
    reached = False
    for _ in range(32):
        pot.update(1.0)
        new_value = pot.value()
        assert new_value > value
        value = new_value
        if value == pytest.approx(1.0):
            reached = True
            break
    assert reached, f"Pot has not reached the target {value}"


def test_when_pot_moves_near_zero_it_snaps_to_it_despite_not_traveling_enough_distance():
    pot = Pot()
    for _ in range(32):
        pot.update(0.004)
    for _ in range(32):
        pot.update(0.008)
    for _ in range(32):
        pot.update(0.0)
    assert pot.last_value_above_noise == pytest.approx(0.0)


def test_when_pot_moves_near_full_it_snaps_to_it_despite_not_traveling_enough_distance():
    pot = Pot()
    for _ in range(32):
        pot.update(0.999)
    for _ in range(32):
        pot.update(1.0)
    assert pot.last_value_above_noise == pytest.approx(1.0)


def test_still_pot_counts_cycles_since_movement():
    pot = Pot()
    for _ in range(3):
        pot.update(0.0)
    assert pot.last_activation_movement == 3
    assert not pot.activation_movement()


def test_moved_pot_reports_activation():
    pot = Pot()
    pot.update(0.0)
    pot.update(1.0)
    assert pot.activation_movement()
    assert pot.last_activation_movement == 0
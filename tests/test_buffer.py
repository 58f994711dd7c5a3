import pytest

from delaycontrol.buffer import Buffer


def test_when_reads_it_returns_average():
    buffer = Buffer(4)
    for value in (4.0, 8.0, 16.0, 32.0):
        buffer.write(value)
    assert buffer.read() == pytest.approx(15.0)


def test_when_reads_raw_it_returns_last():
    buffer = Buffer(4)
    buffer.write(1.0)
    buffer.write(2.0)
    assert buffer.read_raw() == pytest.approx(2.0)


def test_read_previous_raw_returns_second_newest():
    buffer = Buffer(4)
    buffer.write(1.0)
    buffer.write(2.0)
    buffer.write(3.0)
    assert buffer.read_previous_raw() == pytest.approx(2.0)


def test_when_measures_traveled_it_returns_distance_from_oldest():
    buffer = Buffer(4)
    for value in (1.0, 2.0, 3.0, 4.0):
        buffer.write(value)
    assert buffer.traveled() == pytest.approx(3.0)

    for value in (4.0, 3.0, 2.0, 1.0):
        buffer.write(value)
    assert buffer.traveled() == pytest.approx(-3.0)


def test_when_reset_it_returns_zero():
    buffer = Buffer(4)
    for value in (4.0, 8.0, 16.0, 32.0):
        buffer.write(value)
    buffer.reset()
    assert buffer.read() == 0.0
    assert buffer.read_raw() == 0.0


def test_writes_wrap_around():
    buffer = Buffer(2)
    buffer.write(1.0)
    buffer.write(2.0)
    buffer.write(3.0)
    assert buffer.read_raw() == pytest.approx(3.0)
    assert buffer.read() == pytest.approx(2.5)


def test_size_one_is_allowed():
    buffer = Buffer(1)
    buffer.write(7.0)
    assert buffer.read() == pytest.approx(7.0)
    assert len(buffer) == 1


@pytest.mark.parametrize("size", [0, 3, 6, 12])
def test_size_must_be_power_of_two(size):
    with pytest.raises(ValueError):
        Buffer(size)
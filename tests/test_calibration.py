import pytest

from delaycontrol.calibration import Calibration


def test_default_calibration_is_identity():
    calibration = Calibration()
    assert calibration.apply(1.7) == pytest.approx(1.7)


class TestWithOctave2AboveOctave1:
    def test_when_sets_proper_octaves_it_calibrates_properly(self):
        calibration = Calibration.try_new(1.1, 2.3)
        assert calibration is not None
        assert calibration.apply(1.1) == pytest.approx(1.0)
        assert calibration.apply(2.3) == pytest.approx(2.0)

    def test_when_sets_second_octave_too_close_it_fails(self):
        assert Calibration.try_new(1.1, 1.3) is None

    def test_when_sets_second_octave_too_far_it_fails(self):
        assert Calibration.try_new(1.3, 3.3) is None


class TestWithOctave2BelowOctave1:
    def test_when_sets_proper_octaves_it_sets_offset_and_scale_accordingly(self):
        calibration = Calibration.try_new(2.3, 1.1)
        assert calibration is not None
        assert calibration.apply(1.1) == pytest.approx(1.0)
        assert calibration.apply(2.3) == pytest.approx(2.0)

    def test_when_sets_second_octave_too_close_it_fails(self):
        assert Calibration.try_new(1.3, 1.1) is None

    def test_when_sets_second_octave_too_far_it_fails(self):
        assert Calibration.try_new(3.3, 1.3) is None


def test_order_of_octaves_does_not_matter():
    assert Calibration.try_new(1.1, 2.3) == Calibration.try_new(2.3, 1.1)
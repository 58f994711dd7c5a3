from delaycontrol.detector import IntervalDetector, TapClockDetector


def _tick(detector, times):
    for _ in range(times):
        detector.tick()


def test_when_triggered_in_exact_interval_it_detects_tempo():
    detector = IntervalDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    assert detector.tempo == 2000


def test_when_triggered_in_rough_interval_within_toleration_it_detects_tempo():
    detector = IntervalDetector()
    detector.trigger()
    _tick(detector, 1990)
    detector.trigger()
    _tick(detector, 2059)
    detector.trigger()
    _tick(detector, 2000)
    detector.trigger()
    assert detector.tempo == 2000


def test_when_triggered_too_fast_it_does_not_detect_tempo():
    detector = IntervalDetector()
    for _ in range(4):
        _tick(detector, 20)
        detector.trigger()
    assert detector.tempo is None


def test_when_triggered_in_unequal_interval_it_does_not_detect_tempo():
    detector = IntervalDetector()
    detector.trigger()
    _tick(detector, 2000)
    detector.trigger()
    _tick(detector, 2000)
    detector.trigger()
    _tick(detector, 1083)
    detector.trigger()
    assert detector.tempo is None


def test_just_detected_lasts_until_next_tick():
    detector = IntervalDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    assert (detector.tempo, detector.just_detected) == (2000, True)
    detector.tick()
    assert (detector.tempo, detector.just_detected) == (2000, False)


def test_reset_forgets_tempo():
    detector = IntervalDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    detector.reset()
    assert detector.tempo is None
    assert detector.trigger_age == [0, 0, 0]
    assert not detector.just_detected


def test_tap_clock_detector_delegates_detection():
    detector = TapClockDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    assert detector.detected_tempo() == 2000
    assert detector.just_detected()
    detector.tick()
    assert not detector.just_detected()


def test_tap_clock_detector_marks_first_beat_after_detection():
    detector = TapClockDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    _tick(detector, 1999)
    assert not detector.first_beat_after_detection()
    detector.tick()
    assert detector.first_beat_after_detection()
    detector.tick()
    assert not detector.first_beat_after_detection()


def test_tap_clock_detector_reset():
    detector = TapClockDetector()
    for _ in range(4):
        _tick(detector, 2000)
        detector.trigger()
    detector.reset()
    assert detector.detected_tempo() is None
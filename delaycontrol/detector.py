"""Detection of tempo from triggers forming a steady clock."""

from __future__ import annotations

from dataclasses import dataclass, field

_U32_MAX = 0xFFFF_FFFF
_MIN_INTERVAL = 100


def _within_toleration(distance: int, value: int) -> bool:
    tolerance = distance // 10
    return distance - tolerance <= value < distance + tolerance


@dataclass
class IntervalDetector:
    """Detect clock tempo in a signal.

    Call ``tick`` for every sample and ``trigger`` for those with a rising
    edge. ``tempo`` holds the detected interval until the next trigger.
    """

    trigger_age: list[int] = field(default_factory=lambda: [0, 0, 0])
    tempo: int | None = None
    just_detected: bool = False
    first_beat_after_detection: bool = False

    def trigger(self) -> None:
        """Register a rising edge and re-evaluate the tempo."""
        minus_3, minus_2, minus_1 = self.trigger_age
        distance = minus_1
        if (
            distance > _MIN_INTERVAL
            and _within_toleration(distance, minus_2 - minus_1)
            and _within_toleration(distance, minus_3 - minus_2)
        ):
            self.tempo = distance
            self.just_detected = True
        else:
            self.tempo = None
        self.trigger_age = [minus_2, minus_1, 0]

    def reset(self) -> None:
        """Forget all triggers and the detected tempo."""
        self.trigger_age = [0, 0, 0]
        self.tempo = None
        self.just_detected = False

    def tick(self) -> None:
        """Advance by one sample."""
        self.trigger_age = [min(age + 1, _U32_MAX) for age in self.trigger_age]
        self.just_detected = False
        if self.tempo is not None:
            self.first_beat_after_detection = self.trigger_age[2] == self.tempo


class TapClockDetector:
    """Momentary detector of tapped tempo or of a clock on a control input.

    To keep a detected tempo, it has to be read and stored elsewhere.
    """

    def __init__(self) -> None:
        self._detector = IntervalDetector()

    def trigger(self) -> None:
        self._detector.trigger()

    def just_detected(self) -> bool:
        return self._detector.just_detected

    def tick(self) -> None:
        self._detector.tick()

    def reset(self) -> None:
        self._detector.reset()

    def detected_tempo(self) -> int | None:
        return self._detector.tempo

    def first_beat_after_detection(self) -> bool:
        return self._detector.first_beat_after_detection
"""Calibration of control inputs to a precise 1V/oct response."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MIN_OCTAVE_DISTANCE = 0.5
_MAX_OCTAVE_DISTANCE = 1.9


def _fract(x: float) -> float:
    return x - math.trunc(x)


@dataclass(frozen=True)
class Calibration:
    """Offset and scaling that map a measured octave range onto 1V/oct.

    The input given to it must already be scaled to the volt range of the
    hardware input.
    """

    offset: float = 0.0
    scaling: float = 1.0

    @classmethod
    def try_new(cls, octave_1: float, octave_2: float) -> Calibration | None:
        """Build a calibration from two readings one octave apart.

        Returns ``None`` when the readings are too close or too far apart
        to be a plausible octave.
        """
        bottom, top = sorted((octave_1, octave_2))
        distance = top - bottom
        if not _MIN_OCTAVE_DISTANCE <= distance <= _MAX_OCTAVE_DISTANCE:
            return None

        scaling = 1.0 / distance
        scaled_bottom_fract = _fract(bottom * scaling)
        if scaled_bottom_fract > 0.5:
            offset = 1.0 - scaled_bottom_fract
        else:
            offset = -scaled_bottom_fract
        return cls(offset=offset, scaling=scaling)

    def apply(self, value: float) -> float:
        """Return the calibrated value."""
        return value * self.scaling + self.offset
"""Quantization of the position pot into even blocks."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum


class Quantization(Enum):
    """Division of a beat into 1/6 notes, 1/8 notes, both, or none."""

    SIX = "six"
    EIGHT = "eight"
    BOTH = "both"
    NONE = "none"

    @classmethod
    def from_flags(cls, six: bool, eight: bool) -> Quantization:
        if six and eight:
            return cls.BOTH
        if six:
            return cls.SIX
        if eight:
            return cls.EIGHT
        return cls.NONE


def _even_steps(count: int) -> tuple[tuple[float, ...], tuple[float, ...]]:
    step = 1.0 / count
    thresholds = tuple(k * step for k in range(1, count))
    values = tuple(k * step for k in range(count))
    return thresholds, values


_SIXTH = 1.0 / 6.0
_EIGHTH = 1.0 / 8.0
_TWELFTH = 1.0 / 12.0

# Each beat divided into 1/6 or 1/8 notes; LCM(6, 8) = 24, so the combined
# grid alternates between the nearest eighths and sixths.
_LEVELS = {
    Quantization.SIX: _even_steps(6),
    Quantization.EIGHT: _even_steps(8),
    Quantization.BOTH: (
        tuple(k * _TWELFTH for k in range(1, 12)),
        (
            0.0,
            1.0 * _EIGHTH,
            1.0 * _SIXTH,
            2.0 * _EIGHTH,
            2.0 * _SIXTH,
            3.0 * _EIGHTH,
            0.5,
            5.0 * _EIGHTH,
            4.0 * _SIXTH,
            6.0 * _EIGHTH,
            5.0 * _SIXTH,
            7.0 * _EIGHTH,
        ),
    ),
}


def quantize(x: float, quantization: Quantization) -> float:
    """Snap ``x`` in range 0.0 to 1.0 down to the quantization grid."""
    if quantization is Quantization.NONE:
        return x
    thresholds, values = _LEVELS[quantization]
    return values[bisect_right(thresholds, x)]
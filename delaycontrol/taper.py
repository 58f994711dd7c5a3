"""Logarithmic taper curves for pots."""

from __future__ import annotations

import math

_LOG = (
    0.0,
    0.005,
    0.019_996_643,
    0.040_958_643,
    0.062_983_93,
    0.086_186_11,
    0.110_698_28,
    0.136_677_15,
    0.164_309_44,
    0.19382,
    0.225_483,
    0.259_637_3,
    0.296_708_64,
    0.337_242_2,
    0.381_951_87,
    0.431_798_22,
    0.488_116_62,
    0.552_841_96,
    0.628_932_1,
    0.721_246_36,
    0.838_632,
    1.0,
)
_LAST = len(_LOG) - 1


def log(position: float) -> float:
    """Map a linear position 0.0 to 1.0 onto a logarithmic curve."""
    if position < 0.0:
        return 0.0
    if position > 1.0:
        return 1.0

    array_position = position * _LAST
    index_a = int(array_position)
    index_b = min(index_a + 1, _LAST)
    remainder = array_position - math.trunc(array_position)

    value = _LOG[index_a]
    return value + (_LOG[index_b] - value) * remainder


def reverse_log(position: float) -> float:
    """Map a linear position onto the mirrored logarithmic curve."""
    return 1.0 - log(1.0 - position)
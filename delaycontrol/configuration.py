"""Niche configuration of the module, set through the configuration menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Index -> speed while rewinding.
_REWIND_SPEEDS = (
    0.125,  # One fifth slowed down
    0.25,  # One octave slowed down
    0.9999,  # Same speed backwards, slightly less to avoid bumps
    1.4999,  # One octave up backwards, slightly less to avoid bumps
)

# Index -> speed while fast forwarding.
_FAST_FORWARD_SPEEDS = (
    -0.25,  # Fifth up
    -0.5,  # Octave up
    -1.4999,  # Two octaves up
    -1.9999,  # Just fast as hell
)


class DisplayPage(Enum):
    """Page shown on the display when nothing else demands attention."""

    HEADS = "heads"
    POSITION = "position"

    def is_heads(self) -> bool:
        return self is DisplayPage.HEADS

    def is_position(self) -> bool:
        return self is DisplayPage.POSITION


@dataclass
class Configuration:
    """Tweaks of the default module behaviour.

    ``rewind_speed`` holds, for every head, a pair of indices selecting the
    rewind and the fast-forward speed.
    """

    rewind_speed: tuple[tuple[int, int], ...] = ((0, 0), (1, 1), (2, 2), (3, 3))
    default_display_page: DisplayPage = DisplayPage.POSITION
    position_reset_mapping: int | None = None
    pause_resume_mapping: int | None = None
    tap_interval_denominator: int = 1

    def rewind_speeds(self) -> tuple[tuple[float, float], ...]:
        """Return the (rewind, fast-forward) speeds selected for each head."""
        return tuple(
            (_REWIND_SPEEDS[rewind], _FAST_FORWARD_SPEEDS[fast_forward])
            for rewind, fast_forward in self.rewind_speed
        )
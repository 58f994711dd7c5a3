"""Control voltage input state tracked over time."""

from __future__ import annotations

from .buffer import Buffer


class ControlInput:
    """Detects plugging of a control input, smooths it and spots triggers."""

    def __init__(self) -> None:
        self.is_plugged = False
        self.was_plugged = False
        self.was_unplugged = False
        self.last_value_above_noise = 0.0
        self._buffer = Buffer(4)

    def update(self, value: float | None) -> None:
        """Feed a new reading; ``None`` means nothing is plugged in."""
        previously_plugged = self.is_plugged
        if value is None:
            self.is_plugged = False
            self._buffer.reset()
        else:
            self.is_plugged = True
            self._buffer.write(value)
        self.was_plugged = not previously_plugged and self.is_plugged
        self.was_unplugged = previously_plugged and not self.is_plugged

        smoothed = self._buffer.read()
        if abs(self.last_value_above_noise - smoothed) > 0.01:
            self.last_value_above_noise = smoothed
        elif smoothed < -4.97:
            self.last_value_above_noise = -5.0
        elif smoothed > 4.97:
            self.last_value_above_noise = 5.0

    def value(self) -> float:
        """Return the smoothed value."""
        return self._buffer.read()

    def value_raw(self) -> float:
        """Return the most recent unsmoothed value."""
        return self._buffer.read_raw()

    def triggered(self) -> bool:
        """Return whether a rising edge has just crossed the trigger threshold."""
        return (
            self._buffer.read_previous_raw() <= 0.9
            and self._buffer.read_raw() > 0.9
            and self._buffer.traveled() > 0.3
        )
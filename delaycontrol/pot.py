"""Potentiometer state tracked over time."""

from .buffer import Buffer

_U32_MAX = 0xFFFF_FFFF


class Pot:
    """Smooths a potentiometer's value and detects its movement."""

    def __init__(self) -> None:
        self._buffer = Buffer(32)
        self.last_activation_movement = 0
        self.last_value_above_noise = 0.0

    def update(self, value: float) -> None:
        """Feed a new raw reading of the pot."""
        self._buffer.write(value)

        if abs(self._buffer.traveled()) > 0.02:
            self.last_activation_movement = 0
        else:
            self.last_activation_movement = min(
                self.last_activation_movement + 1, _U32_MAX
            )

        smoothed = self._buffer.read()
        if abs(self.last_value_above_noise - smoothed) > 0.002:
            self.last_value_above_noise = smoothed
        elif smoothed < 0.0001:
            self.last_value_above_noise = 0.0
        elif smoothed > 0.9999:
            self.last_value_above_noise = 1.0

    def value(self) -> float:
        """Return the smoothed value."""
        return self._buffer.read()

    def activation_movement(self) -> bool:
        """Return whether the pot has just been moved noticeably."""
        return self.last_activation_movement == 0
"""Trigger output that stays up for a moment after being fired."""

_U32_MAX = 0xFFFF_FFFF
_HIGH_CYCLES = 10


class Trigger:
    """Trigger output kept up long enough for other modules to detect it."""

    def __init__(self) -> None:
        self._since = 0

    def trigger(self) -> None:
        self._since = 0

    def tick(self) -> None:
        self._since = min(self._since + 1, _U32_MAX)

    def triggered(self) -> bool:
        return self._since < _HIGH_CYCLES
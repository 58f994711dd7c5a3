"""LED that stays lit for a moment after being triggered."""

_U32_MAX = 0xFFFF_FFFF
_LIT_CYCLES = 20


class Led:
    """LED blink triggered by a control loop that remains lit for a while."""

    def __init__(self) -> None:
        self._since = 0

    def trigger(self) -> None:
        self._since = 0

    def tick(self) -> None:
        self._since = min(self._since + 1, _U32_MAX)

    def triggered(self) -> bool:
        return self._since < _LIT_CYCLES
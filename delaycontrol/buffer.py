"""Ring buffer used for smoothing input values and measuring their travel."""


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


class Buffer:
    """Fixed-size ring buffer meant for smoothing and history tracking.

    It suits short buffers, such as smoothing pots or control voltage over
    up to a few dozen samples.
    """

    def __init__(self, size: int) -> None:
        if not _is_power_of_two(size):
            raise ValueError(f"buffer size must be a power of 2, got {size}")
        self._values = [0.0] * size
        self._pointer = 0
        self._mask = size - 1

    def __len__(self) -> int:
        return len(self._values)

    def write(self, value: float) -> None:
        """Store a new sample, overwriting the oldest one."""
        self._values[self._pointer] = value
        self._pointer = (self._pointer + 1) & self._mask

    def read(self) -> float:
        """Return the average of all samples in the buffer."""
        return sum(self._values) / len(self._values)

    def read_raw(self) -> float:
        """Return the most recently written sample."""
        return self._values[(self._pointer - 1) & self._mask]

    def read_previous_raw(self) -> float:
        """Return the sample written just before the most recent one."""
        return self._values[(self._pointer - 2) & self._mask]

    def reset(self) -> None:
        """Set every sample to zero."""
        self._values = [0.0] * len(self._values)

    def traveled(self) -> float:
        """Return the difference between the newest and the oldest sample."""
        newest = self._values[(self._pointer - 1) & self._mask]
        oldest = self._values[self._pointer]
        return newest - oldest
"""Queue of control inputs waiting for mapping or calibration.

Only one such action can happen at a time, but requests for several
control inputs may wait in line.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

_CAPACITY = 8


class ActionKind(Enum):
    CALIBRATE = "calibrate"
    MAP = "map"


@dataclass(frozen=True)
class ControlAction:
    """A pending calibration or mapping of one control input."""

    kind: ActionKind
    control: int

    @classmethod
    def calibrate(cls, control: int) -> ControlAction:
        return cls(ActionKind.CALIBRATE, control)

    @classmethod
    def map(cls, control: int) -> ControlAction:
        return cls(ActionKind.MAP, control)


class Queue:
    """First-in first-out queue of control actions.

    The capacity covers every possible action; anything pushed beyond it
    is dropped.
    """

    def __init__(self) -> None:
        self._actions: deque[ControlAction] = deque()

    def push(self, action: ControlAction) -> None:
        if len(self._actions) < _CAPACITY:
            self._actions.append(action)

    def pop(self) -> ControlAction | None:
        """Remove and return the oldest action, or ``None`` when empty."""
        return self._actions.popleft() if self._actions else None

    def remove_control(self, control: int) -> None:
        """Drop every action concerning the given control input."""
        self._actions = deque(a for a in self._actions if a.control != control)

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, action: object) -> bool:
        return action in self._actions
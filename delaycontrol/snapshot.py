"""Raw state of all hardware peripherals at one moment."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SnapshotHead:
    """Raw pot readings of one head."""

    position: float = 0.0
    volume: float = 0.0
    feedback: float = 0.0
    pan: float = 0.0


def _default_heads() -> list[SnapshotHead]:
    return [SnapshotHead() for _ in range(4)]


def _default_controls() -> list[float | None]:
    return [None] * 4


@dataclass
class Snapshot:
    """Current state of all peripherals.

    Detection of a plugged control input and button debouncing are done by
    the caller; everything else is passed raw.
    """

    pre_amp: float = 0.0
    drive: float = 0.0
    bias: float = 0.0
    dry_wet: float = 0.0
    wow_flut: float = 0.0
    speed: float = 0.0
    tone: float = 0.0
    head: list[SnapshotHead] = field(default_factory=_default_heads)
    control: list[float | None] = field(default_factory=_default_controls)
    button: bool = False
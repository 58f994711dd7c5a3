"""Stateful processing of all input peripherals."""

from __future__ import annotations

from dataclasses import dataclass, field

from .button import Button
from .control_input import ControlInput
from .pot import Pot
from .snapshot import Snapshot


@dataclass
class Head:
    """Pots belonging to one head."""

    position: Pot = field(default_factory=Pot)
    volume: Pot = field(default_factory=Pot)
    feedback: Pot = field(default_factory=Pot)
    pan: Pot = field(default_factory=Pot)

    def pots(self) -> tuple[Pot, Pot, Pot, Pot]:
        return (self.position, self.volume, self.feedback, self.pan)


@dataclass
class Inputs:
    """Turns raw snapshots into abstracted peripherals.

    The peripherals provide smoothing, click detection and similar features.
    Their attributes are meant to be read only.
    """

    pre_amp: Pot = field(default_factory=Pot)
    drive: Pot = field(default_factory=Pot)
    bias: Pot = field(default_factory=Pot)
    dry_wet: Pot = field(default_factory=Pot)
    wow_flut: Pot = field(default_factory=Pot)
    speed: Pot = field(default_factory=Pot)
    tone: Pot = field(default_factory=Pot)
    head: list[Head] = field(default_factory=lambda: [Head() for _ in range(4)])
    control: list[ControlInput] = field(
        default_factory=lambda: [ControlInput() for _ in range(4)]
    )
    button: Button = field(default_factory=Button)

    def _main_pots(self) -> tuple[Pot, ...]:
        return (
            self.pre_amp,
            self.drive,
            self.bias,
            self.dry_wet,
            self.wow_flut,
            self.speed,
            self.tone,
        )

    def update(self, snapshot: Snapshot) -> None:
        """Feed a new snapshot to every peripheral."""
        self.pre_amp.update(snapshot.pre_amp)
        self.drive.update(snapshot.drive)
        self.bias.update(snapshot.bias)
        self.dry_wet.update(snapshot.dry_wet)
        self.wow_flut.update(snapshot.wow_flut)
        self.speed.update(snapshot.speed)
        self.tone.update(snapshot.tone)
        for head, raw in zip(self.head, snapshot.head):
            head.position.update(raw.position)
            head.volume.update(raw.volume)
            head.feedback.update(raw.feedback)
            head.pan.update(raw.pan)
        for control, raw_value in zip(self.control, snapshot.control):
            control.update(raw_value)
        self.button.update(snapshot.button)

    def latest_pot_activity(self) -> int:
        """Return the number of cycles since any pot was last moved."""
        head_pots = (pot for head in self.head for pot in head.pots())
        return min(
            pot.last_activation_movement
            for pot in (*self._main_pots(), *head_pots)
        )
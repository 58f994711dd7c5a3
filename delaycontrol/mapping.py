"""Identifiers of attributes that control inputs can be mapped to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AttributeKind(Enum):
    """Kinds of attributes controlled through pots."""

    PRE_AMP = "pre_amp"
    DRIVE = "drive"
    BIAS = "bias"
    DRY_WET = "dry_wet"
    WOW_FLUT = "wow_flut"
    SPEED = "speed"
    TONE = "tone"
    POSITION = "position"
    VOLUME = "volume"
    FEEDBACK = "feedback"
    PAN = "pan"
    NONE = "none"


_PER_HEAD = frozenset(
    {AttributeKind.POSITION, AttributeKind.VOLUME, AttributeKind.FEEDBACK, AttributeKind.PAN}
)


@dataclass(frozen=True)
class AttributeIdentifier:
    """Unique identifier of an attribute; per-head kinds carry the head index."""

    kind: AttributeKind = AttributeKind.NONE
    head: int | None = None

    def __post_init__(self) -> None:
        if self.kind in _PER_HEAD:
            if self.head is None:
                raise ValueError(f"{self.kind.value} requires a head index")
        elif self.head is not None:
            raise ValueError(f"{self.kind.value} does not take a head index")

    def is_none(self) -> bool:
        return self.kind is AttributeKind.NONE
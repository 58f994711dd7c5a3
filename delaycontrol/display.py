"""State machine of the eight display LEDs.

The display holds screens in slots ordered by priority. The first occupied
slot is shown. Screens age with every tick, run their animations and may
expire.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

_LED_COUNT = 8
_F32_EPSILON = 1.192_092_9e-07

_FAILURE_PRIORITY = 0
_DIALOG_PRIORITY = 1
_ALT_MENU_PRIORITY = 2
_CLIPPING_PRIORITY = 3
_ATTRIBUTE_PRIORITY = 4
_BUFFER_RESET_PRIORITY = 5
_PAUSED_PRIORITY = 6
_FALLBACK_PRIORITY = 7

Leds = tuple[bool, ...]


class PreAmpMode(Enum):
    PRE_AMP = "pre_amp"
    OSCILLATOR = "oscillator"


class SpeedRange(Enum):
    LONG = "long"
    SHORT = "short"
    AUDIO = "audio"


class FilterPlacementScreen(Enum):
    INPUT = "input"
    FEEDBACK = "feedback"
    BOTH = "both"


class HysteresisRange(Enum):
    UNLIMITED = "unlimited"
    LIMITED = "limited"


class WowFlutterPlacementScreen(Enum):
    INPUT = "input"
    READ = "read"
    BOTH = "both"


AltMenu = Union[
    PreAmpMode,
    SpeedRange,
    FilterPlacementScreen,
    HysteresisRange,
    WowFlutterPlacementScreen,
]


class AttributeScreenKind(Enum):
    HEADS_OVERVIEW = "heads_overview"
    POSITION = "position"
    OCTAVE_OFFSET = "octave_offset"
    OSCILLATOR_TONE = "oscillator_tone"
    PRE_AMP = "pre_amp"
    DRIVE = "drive"
    BIAS = "bias"
    DRY_WET = "dry_wet"
    WOW = "wow"
    FLUTTER = "flutter"
    SPEED = "speed"
    TONE = "tone"
    VOLUME = "volume"
    FEEDBACK = "feedback"
    PAN = "pan"


_PER_HEAD_KINDS = frozenset(
    {AttributeScreenKind.VOLUME, AttributeScreenKind.FEEDBACK, AttributeScreenKind.PAN}
)


@dataclass(frozen=True)
class AttributeScreen:
    """Visualisation of one attribute.

    ``value`` is the phase of the attribute, or the index for ``POSITION``
    and ``OCTAVE_OFFSET``. ``head`` is set for per-head kinds and
    ``overview`` holds the (top, bottom) rows of ``HEADS_OVERVIEW``.
    """

    kind: AttributeScreenKind
    value: float = 0.0
    head: int | None = None
    overview: tuple[tuple[bool, ...], tuple[bool, ...]] | None = None

    def same_type(self, other: AttributeScreen) -> bool:
        """Return whether both screens show the same attribute."""
        if self.kind is not other.kind:
            return False
        if self.kind in _PER_HEAD_KINDS:
            return self.head == other.head
        return True


@dataclass(frozen=True)
class CalibrationScreen:
    """Asking for the first (``octave`` 0) or second (1) calibration octave."""

    control: int
    octave: int
    cycles: int = 0


@dataclass(frozen=True)
class MappingScreen:
    control: int
    cycles: int = 0


@dataclass(frozen=True)
class ConfigurationIdle:
    cycles: int = 0


@dataclass(frozen=True)
class DefaultScreen:
    selection: int


@dataclass(frozen=True)
class ControlMapping:
    mapping: int | None


@dataclass(frozen=True)
class TapIntervalDenominator:
    denominator: int


DialogContent = Union[
    CalibrationScreen,
    MappingScreen,
    ConfigurationIdle,
    DefaultScreen,
    ControlMapping,
    TapIntervalDenominator,
]


@dataclass(frozen=True)
class DialogScreen:
    """A dialog awaiting user input: calibration, mapping or configuration."""

    content: DialogContent

    @classmethod
    def configuration(cls) -> DialogScreen:
        return cls(ConfigurationIdle(0))

    @classmethod
    def calibration_1(cls, control: int) -> DialogScreen:
        return cls(CalibrationScreen(control, 0, 0))

    @classmethod
    def calibration_2(cls, control: int) -> DialogScreen:
        return cls(CalibrationScreen(control, 1, 0))

    @classmethod
    def mapping(cls, control: int) -> DialogScreen:
        return cls(MappingScreen(control, 0))


@dataclass(frozen=True)
class FailureScreen:
    cycles: int = 0


@dataclass(frozen=True)
class AltAttributeScreen:
    age: int
    menu: AltMenu


@dataclass(frozen=True)
class AttributeDisplay:
    age: int
    attribute: AttributeScreen


@dataclass(frozen=True)
class ClippingScreen:
    age: int = 0


@dataclass(frozen=True)
class PausedScreen:
    cycles: int = 0


@dataclass(frozen=True)
class BufferResetScreen:
    progress: int


Screen = Union[
    DialogScreen,
    FailureScreen,
    AltAttributeScreen,
    AttributeDisplay,
    ClippingScreen,
    PausedScreen,
    BufferResetScreen,
]


class Display:
    """Prioritised screens of the display; the first occupied slot is shown."""

    def __init__(self) -> None:
        self.prioritized: list[Screen | None] = [None] * _LED_COUNT
        self.prioritized[_FALLBACK_PRIORITY] = AttributeDisplay(
            0, AttributeScreen(AttributeScreenKind.POSITION, 0)
        )

    def tick(self) -> None:
        """Advance every screen by one cycle, dropping expired ones."""
        self.prioritized = [
            None if screen is None else ticked(screen) for screen in self.prioritized
        ]

    def active_screen(self) -> Screen:
        """Return the screen with the highest priority."""
        for screen in self.prioritized:
            if screen is not None:
                return screen
        raise LookupError("no screen is active")

    def set_failure(self) -> None:
        self.prioritized[_FAILURE_PRIORITY] = FailureScreen(0)

    def set_dialog(self, dialog: DialogScreen) -> None:
        self.prioritized[_DIALOG_PRIORITY] = dialog

    def reset_dialog(self) -> None:
        self.prioritized[_DIALOG_PRIORITY] = None

    def set_alt_menu(self, alt_menu: AltMenu) -> None:
        self.prioritized[_ALT_MENU_PRIORITY] = AltAttributeScreen(0, alt_menu)

    def set_clipping(self) -> None:
        """Start the clipping animation unless it is already running."""
        if not isinstance(self.prioritized[_CLIPPING_PRIORITY], ClippingScreen):
            self.prioritized[_CLIPPING_PRIORITY] = ClippingScreen(0)

    def force_attribute(self, attribute: AttributeScreen) -> None:
        """Show the attribute, replacing whatever attribute was shown."""
        self.prioritized[_ATTRIBUTE_PRIORITY] = AttributeDisplay(0, attribute)

    def update_attribute(self, attribute: AttributeScreen) -> None:
        """Refresh the shown attribute if it is of the same type, keeping its age."""
        current = self.prioritized[_ATTRIBUTE_PRIORITY]
        if isinstance(current, AttributeDisplay) and current.attribute.same_type(
            attribute
        ):
            self.prioritized[_ATTRIBUTE_PRIORITY] = AttributeDisplay(
                current.age, attribute
            )

    def set_buffer_reset(self, progress: int) -> None:
        self.prioritized[_BUFFER_RESET_PRIORITY] = BufferResetScreen(progress)

    def reset_buffer_reset(self) -> None:
        self.prioritized[_BUFFER_RESET_PRIORITY] = None

    def set_paused(self) -> None:
        """Start the paused animation unless it is already running."""
        if not isinstance(self.prioritized[_PAUSED_PRIORITY], PausedScreen):
            self.prioritized[_PAUSED_PRIORITY] = PausedScreen(0)

    def reset_paused(self) -> None:
        self.prioritized[_PAUSED_PRIORITY] = None

    def set_fallback_attribute(self, attribute: AttributeScreen) -> None:
        self.prioritized[_FALLBACK_PRIORITY] = AttributeDisplay(0, attribute)


# Ticking


def ticked(screen: Screen) -> Screen | None:
    """Return the screen advanced by one cycle, or ``None`` once it expires."""
    match screen:
        case FailureScreen(cycles=cycles):
            return None if cycles > 480 else FailureScreen(cycles + 1)
        case DialogScreen(content=content):
            return DialogScreen(_ticked_dialog(content))
        case AltAttributeScreen(age=age, menu=menu):
            return None if age > 1000 else AltAttributeScreen(age + 1, menu)
        case AttributeDisplay(age=age, attribute=attribute):
            if age > 2000 and attribute.kind is not AttributeScreenKind.POSITION:
                return None
            return AttributeDisplay(age + 1, attribute)
        case ClippingScreen(age=age):
            return None if age > 120 else ClippingScreen(age + 1)
        case PausedScreen(cycles=cycles):
            return PausedScreen(0 if cycles > 240 * 8 else cycles + 1)
        case BufferResetScreen():
            return screen
    raise TypeError(f"unknown screen {screen!r}")


def _wrapped(cycles: int, limit: int) -> int:
    return 0 if cycles > limit else cycles + 1


def _ticked_dialog(content: DialogContent) -> DialogContent:
    match content:
        case ConfigurationIdle(cycles=cycles):
            return ConfigurationIdle(_wrapped(cycles, 1000))
        case CalibrationScreen(cycles=cycles):
            return replace(content, cycles=_wrapped(cycles, 240 * 6))
        case MappingScreen(cycles=cycles):
            return replace(content, cycles=_wrapped(cycles, 240 * 4))
    return content


# Rendering


def _pattern(bits: str) -> Leds:
    return tuple(bit == "1" for bit in bits)


def _only(*indices: int) -> Leds:
    return tuple(i in indices for i in range(_LED_COUNT))


_ALL_ON = (True,) * _LED_COUNT
_ALL_OFF = (False,) * _LED_COUNT


def _to_index(x: float) -> int:
    """Truncate towards zero, saturating negative values at zero."""
    return max(0, int(x))


def _interleave(leds: list[bool]) -> Leds:
    return (leds[1], leds[3], leds[5], leds[7], leds[0], leds[2], leds[4], leds[6])


def leds(screen: Screen) -> Leds:
    """Return the state of the eight LEDs for the given screen."""
    match screen:
        case FailureScreen(cycles=cycles):
            return _leds_for_failure(cycles)
        case DialogScreen(content=content):
            return _leds_for_dialog(content)
        case AltAttributeScreen(menu=menu):
            return _ALT_MENU_LEDS[menu]
        case AttributeDisplay(attribute=attribute):
            return _leds_for_attribute(attribute)
        case ClippingScreen(age=age):
            return _leds_for_clipping(age)
        case PausedScreen(cycles=cycles):
            return _leds_for_paused(cycles)
        case BufferResetScreen(progress=progress):
            return _leds_for_buffer_reset(progress)
    raise TypeError(f"unknown screen {screen!r}")


def _leds_for_failure(cycles: int) -> Leds:
    interval_on = 80
    interval_off = interval_on * 2
    if cycles < interval_on:
        return _ALL_ON
    if cycles < interval_on + interval_off:
        return _ALL_OFF
    if cycles < interval_on + interval_off + interval_on:
        return _ALL_ON
    return _ALL_OFF


def _leds_for_dialog(content: DialogContent) -> Leds:
    match content:
        case CalibrationScreen(control=control, octave=octave, cycles=cycles):
            return _leds_for_calibration(control, cycles, octave)
        case MappingScreen(control=control, cycles=cycles):
            return _leds_for_mapping(control, cycles)
        case ConfigurationIdle(cycles=cycles):
            return _pattern("10100101") if cycles < 500 else _pattern("01011010")
        case DefaultScreen(selection=selection):
            return _only(selection)
        case ControlMapping(mapping=mapping):
            return _ALL_OFF if mapping is None else _only(mapping, mapping + 4)
        case TapIntervalDenominator(denominator=denominator):
            return _only(_denominator_index(denominator))
    raise TypeError(f"unknown dialog {content!r}")


def _denominator_index(denominator: int) -> int:
    indices = {16: 0, 8: 1, 4: 2, 1: 3}
    try:
        return indices[denominator]
    except KeyError:
        raise ValueError(f"unsupported tap interval denominator {denominator}") from None


def _leds_for_calibration(control: int, cycles: int, octave: int) -> Leds:
    interval = 240
    lit = [False] * _LED_COUNT
    lit[4 + control] = True
    blink_on = cycles < interval or interval * 2 <= cycles < interval * 3
    lit[octave * 2] = blink_on
    lit[octave * 2 + 1] = blink_on
    return tuple(lit)


def _leds_for_mapping(control: int, cycles: int) -> Leds:
    interval = 240
    return _only(4 + control, min(cycles // interval, 3))


_ALT_MENU_LEDS: dict[AltMenu, Leds] = {
    PreAmpMode.PRE_AMP: _pattern("11001100"),
    PreAmpMode.OSCILLATOR: _pattern("00110011"),
    SpeedRange.LONG: _pattern("11111111"),
    SpeedRange.SHORT: _pattern("00110011"),
    SpeedRange.AUDIO: _pattern("00010001"),
    FilterPlacementScreen.INPUT: _pattern("10001000"),
    FilterPlacementScreen.FEEDBACK: _pattern("01110111"),
    FilterPlacementScreen.BOTH: _pattern("11111111"),
    HysteresisRange.UNLIMITED: _pattern("01011010"),
    HysteresisRange.LIMITED: _pattern("00001111"),
    WowFlutterPlacementScreen.INPUT: _pattern("10001000"),
    WowFlutterPlacementScreen.READ: _pattern("01110111"),
    WowFlutterPlacementScreen.BOTH: _pattern("11111111"),
}


def _leds_for_attribute(attribute: AttributeScreen) -> Leds:
    kind = attribute.kind
    value = attribute.value
    if kind is AttributeScreenKind.HEADS_OVERVIEW:
        if attribute.overview is None:
            raise ValueError("heads overview requires its overview rows")
        top, bottom = attribute.overview
        return tuple(top) + tuple(bottom)
    if kind is AttributeScreenKind.POSITION:
        return _position_to_leds(int(value))
    if kind is AttributeScreenKind.OCTAVE_OFFSET:
        offset = int(value)
        if not 0 <= offset < 4:
            raise ValueError("the range of octave offset is limited to 4")
        return _only(offset, offset + 4)
    if kind in (
        AttributeScreenKind.OSCILLATOR_TONE,
        AttributeScreenKind.PRE_AMP,
        AttributeScreenKind.DRIVE,
        AttributeScreenKind.BIAS,
    ):
        return _phase_to_leds(value)
    if kind is AttributeScreenKind.DRY_WET:
        return _dry_wet_to_leds(value)
    if kind is AttributeScreenKind.WOW:
        return _wow_to_leds(value)
    if kind is AttributeScreenKind.FLUTTER:
        return _flutter_to_leds(value)
    if kind is AttributeScreenKind.SPEED:
        return _speed_to_leds(value)
    if kind is AttributeScreenKind.TONE:
        return _tone_to_leds(value)
    head = attribute.head
    if head is None:
        raise ValueError(f"{kind.value} requires a head index")
    if kind is AttributeScreenKind.VOLUME:
        return _volume_to_leds(head, value)
    if kind is AttributeScreenKind.FEEDBACK:
        return _feedback_to_leds(head, value)
    return _pan_to_leds(head, value)


def _position_to_leds(position: int) -> Leds:
    return _only(position if position < 4 else 7 - (position - 4))


def _phase_to_leds(phase: float) -> Leds:
    count = min(_to_index(phase * 7.9) + 1, _LED_COUNT)
    return _interleave([i < count for i in range(_LED_COUNT)])


def _dry_wet_to_leds(phase: float) -> Leds:
    wet_len = min(_to_index(phase * 4.9), 4)
    dry_len = 4 - wet_len
    return tuple(
        i < dry_len or i >= _LED_COUNT - wet_len for i in range(_LED_COUNT)
    )


def _flutter_to_leds(phase: float) -> Leds:
    if phase <= 0.1:
        return _ALL_OFF
    count = min(_to_index(phase * 3.9) + 1, _LED_COUNT)
    return tuple(i < count for i in range(_LED_COUNT))


def _wow_to_leds(phase: float) -> Leds:
    if phase <= 0.1:
        return _ALL_OFF
    count = min(_to_index(phase * 3.9) + 1, _LED_COUNT)
    return tuple(i >= _LED_COUNT - count for i in range(_LED_COUNT))


def _speed_to_leds(phase: float) -> Leds:
    count = min(_to_index(phase * 7.9) + 1, _LED_COUNT)
    return _interleave([i >= _LED_COUNT - count for i in range(_LED_COUNT)])


def _tone_to_leds(phase: float) -> Leds:
    lit = [True] * _LED_COUNT
    if phase < 0.4:
        count = min(_to_index((1.0 - phase / 0.4) * 7.9) + 1, _LED_COUNT)
        for i in range(count):
            lit[_LED_COUNT - 1 - i] = False
    elif phase > 0.6:
        count = min(_to_index((phase - 0.6) / 0.4 * 7.9) + 1, _LED_COUNT)
        for i in range(count):
            lit[i] = False
    return tuple(lit)


def _volume_to_leds(head: int, phase: float) -> Leds:
    lit = [False] * _LED_COUNT
    lit[head] = True
    if phase >= _F32_EPSILON:
        for i in range(min(_to_index(phase * 3.9) + 1, 4)):
            lit[4 + i] = True
    return tuple(lit)


def _feedback_to_leds(head: int, phase: float) -> Leds:
    lit = [False] * _LED_COUNT
    lit[4 + head] = True
    if phase >= _F32_EPSILON:
        for i in range(min(_to_index(phase * 3.9) + 1, 4)):
            lit[i] = True
    return tuple(lit)


def _pan_to_leds(head: int, phase: float) -> Leds:
    lit = [False, False, False, False, True, True, True, True]
    lit[head] = True
    if phase < 0.4:
        count = min(_to_index((1.0 - phase / 0.4) * 2.9) + 1, 4)
        for i in range(count):
            lit[_LED_COUNT - 1 - i] = False
    elif phase > 0.6:
        count = min(_to_index((phase - 0.6) / 0.4 * 2.9) + 1, 4)
        for i in range(count):
            lit[4 + i] = False
    return tuple(lit)


def _leds_for_paused(cycles: int) -> Leds:
    segment = cycles // 240
    return _only(1, 2, 5, 6) if segment in (0, 2) else _ALL_OFF


def _leds_for_buffer_reset(progress: int) -> Leds:
    if progress < 4:
        return tuple(i >= progress for i in range(_LED_COUNT))
    return tuple(4 <= i < 4 + _LED_COUNT - progress for i in range(_LED_COUNT))


def _leds_for_clipping(age: int) -> Leds:
    if age < 40:
        return _pattern("11001100")
    if age < 80:
        return _pattern("11101110")
    return _ALL_ON
# delaycontrol

Building blocks for the user interface of a multi-head tape-delay module.
They turn raw readings of pots, control-voltage inputs and a button into
smoothed values, detect tapped or clocked tempo, compute 1V/oct calibration
of control inputs, queue pending mapping and calibration actions, and keep
the state of the eight display LEDs.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `delaycontrol.buffer` – `Buffer`, a power-of-two ring buffer with
  `write`, `read` (average), `read_raw`, `read_previous_raw`, `reset` and
  `traveled` (newest minus oldest sample). A size that is not a power of two
  raises `ValueError`.
- `delaycontrol.pot` – `Pot`, smoothing over 32 samples, with
  `activation_movement()` telling whether the pot was just moved and
  `last_value_above_noise` snapping to 0.0 and 1.0 near the ends.
- `delaycontrol.button` – `Button`, tracking `pressed`, `clicked` and the
  number of cycles it has been `held`.
- `delaycontrol.control_input` – `ControlInput`, detecting plugging
  (`is_plugged`, `was_plugged`, `was_unplugged`) and rising-edge triggers.
  Feeding `None` means nothing is plugged in.
- `delaycontrol.snapshot` – `Snapshot` and `SnapshotHead`, the raw state of
  all peripherals for one control cycle.
- `delaycontrol.inputs` – `Inputs` and `Head`, holding every peripheral and
  updating them from a `Snapshot`; `latest_pot_activity()` returns the cycles
  since any pot last moved.
- `delaycontrol.calibration` – `Calibration.try_new(octave_1, octave_2)`
  returns offset and scaling for two readings one octave apart, or `None`
  when they are less than 0.5 or more than 1.9 apart.
- `delaycontrol.configuration` – `Configuration` and `DisplayPage`;
  `rewind_speeds()` maps the per-head index pairs to rewind and fast-forward
  speeds.
- `delaycontrol.mapping` – `AttributeKind` and `AttributeIdentifier`, naming
  the attribute a control input is mapped to. Per-head kinds require a head
  index; others reject one.
- `delaycontrol.detector` – `IntervalDetector` and its wrapper
  `TapClockDetector`, recognising three equal intervals (within 10 %, longer
  than 100 cycles) as a tempo.
- `delaycontrol.led` and `delaycontrol.trigger` – `Led` stays lit for 20
  ticks after `trigger()`, `Trigger` stays up for 10.
- `delaycontrol.quantization` – `Quantization` and `quantize`, snapping a
  position to sixths, eighths or both.
- `delaycontrol.taper` – `log` and `reverse_log` taper curves.
- `delaycontrol.action` – `ControlAction` (`calibrate` / `map`) and `Queue`,
  a first-in first-out queue holding up to eight actions, with
  `remove_control` to drop everything concerning one input.
- `delaycontrol.display` – `Display` with eight priority slots (failure,
  dialog, alternative menu, clipping, attribute, buffer reset, paused,
  fallback) and the screen types; `leds(screen)` renders a screen to eight
  booleans and `ticked(screen)` advances its animation or expires it.

## Examples

```python
from delaycontrol.pot import Pot

pot = Pot()
for _ in range(32):
    pot.update(1.0)
print(pot.value())  # 1.0 once the smoothing buffer is full
```

```python
from delaycontrol.calibration import Calibration

calibration = Calibration.try_new(1.1, 2.3)
print(calibration.apply(1.1), calibration.apply(2.3))  # about 1.0 and 2.0
```

```python
from delaycontrol.detector import TapClockDetector

detector = TapClockDetector()
for _ in range(4):
    for _ in range(2000):
        detector.tick()
    detector.trigger()
print(detector.detected_tempo())  # 2000
```

```python
from delaycontrol.display import Display, leds

display = Display()
print(leds(display.active_screen()))  # first LED lit: position 0
```

## What the package does not do

The pieces here are independent. The package has no central state machine
that feeds `Inputs` into mapping, calibration and configuration menus, does
not turn inputs into attributes for an audio processor, and has no way of
persisting mapping, calibration or configuration across restarts. Wiring the
pieces together and storing settings is left to the caller.
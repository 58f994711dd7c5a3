"""Building blocks for the user interface of a tape-delay module.

Input smoothing, calibration, tempo detection, action queueing and
display state.
"""

__version__ = "0.1.0"
"""
Conversion between servo pulse widths and signed angles.

The controller expresses a servo position as a pulse width in microseconds,
bounded by a calibrated [us_min, us_max] pair. Callers work in whole degrees
in [-90, 90], with us_min at -90 and us_max at +90.
"""

import math

from pantilthat import labels
from pantilthat.constants import ANGLE_MAX, ANGLE_MIN, ANGLE_SPAN
from pantilthat.exceptions import RangeError


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3).

    The built-in round() rounds halves to even and would make the two
    conversion directions disagree.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _check_pulse_range(us_min: int, us_max: int) -> None:
    if us_max <= us_min:
        raise RangeError(labels.ERR_PULSE_RANGE_EMPTY.format(us_min=us_min, us_max=us_max))


def pulse_to_degrees(us: int, us_min: int, us_max: int) -> int:
    """Convert a pulse width to an angle.

    Args:
        us: Pulse width in microseconds as reported by the device.
        us_min: Calibrated pulse width at -90 degrees.
        us_max: Calibrated pulse width at +90 degrees.

    Returns:
        int: Angle in degrees within [-90, 90].

    Raises:
        RangeError: If us lies outside [us_min, us_max] or the range is empty.
    """
    _check_pulse_range(us_min, us_max)
    if us < us_min or us > us_max:
        raise RangeError(labels.ERR_PULSE_OUT_OF_RANGE.format(us=us, us_min=us_min, us_max=us_max))

    angle = (us - us_min) / (us_max - us_min) * ANGLE_SPAN
    return round_half_away(angle) + ANGLE_MIN


def degrees_to_pulse(angle: int, us_min: int, us_max: int) -> int:
    """Convert an angle to a pulse width.

    Args:
        angle: Angle in degrees within [-90, 90], whole degrees only.
        us_min: Calibrated pulse width at -90 degrees.
        us_max: Calibrated pulse width at +90 degrees.

    Returns:
        int: Pulse width in microseconds within [us_min, us_max].

    Raises:
        RangeError: If angle lies outside [-90, 90], is not an integer or the range is empty.
    """
    _check_pulse_range(us_min, us_max)
    if isinstance(angle, bool) or not isinstance(angle, int):
        raise RangeError(labels.ERR_ANGLE_NOT_INTEGER.format(angle=angle))
    if angle < ANGLE_MIN or angle > ANGLE_MAX:
        raise RangeError(labels.ERR_ANGLE_OUT_OF_RANGE.format(angle=angle, angle_min=ANGLE_MIN, angle_max=ANGLE_MAX))

    shifted = angle - ANGLE_MIN
    us = (us_max - us_min) / ANGLE_SPAN * shifted
    return us_min + round_half_away(us)


__all__ = [
    'round_half_away',
    'pulse_to_degrees',
    'degrees_to_pulse',
]

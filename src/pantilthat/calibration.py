"""Per-servo pulse width calibration."""

from dataclasses import dataclass
from typing import Dict

from pantilthat import labels
from pantilthat.configuration import PanTiltParameters, ServoIndex
from pantilthat.constants import PULSE_WIDTH_LIMIT
from pantilthat.exceptions import RangeError


@dataclass(frozen=True)
class CalibrationBounds:
    """Pulse widths (microseconds) at the -90 and +90 degree end stops."""

    min_pulse: int
    max_pulse: int


class CalibrationStore:
    """Holds the calibration bounds of both servos.

    Every update is checked against the opposing bound, so a stored pair
    always satisfies min_pulse < max_pulse.
    """

    def __init__(self, bounds: Dict[ServoIndex, CalibrationBounds]):
        self._bounds: Dict[ServoIndex, CalibrationBounds] = {}
        for servo, servo_bounds in bounds.items():
            self._validate(servo, servo_bounds.min_pulse, servo_bounds.max_pulse)
            self._bounds[servo] = servo_bounds

    @classmethod
    def from_parameters(cls, parameters: PanTiltParameters) -> "CalibrationStore":
        return cls(
            {
                ServoIndex.ONE: CalibrationBounds(parameters.servo1_min, parameters.servo1_max),
                ServoIndex.TWO: CalibrationBounds(parameters.servo2_min, parameters.servo2_max),
            }
        )

    @staticmethod
    def _validate(servo: ServoIndex, min_pulse: int, max_pulse: int) -> None:
        """Validate a calibration pair.

        Raises:
            RangeError: If a value does not fit a 16-bit register or min >= max.
        """
        for value in (min_pulse, max_pulse):
            if not 0 <= value <= PULSE_WIDTH_LIMIT:
                raise RangeError(
                    labels.ERR_PULSE_WIDTH_LIMIT.format(servo=int(servo), value=value, limit=PULSE_WIDTH_LIMIT)
                )

        if min_pulse >= max_pulse:
            raise RangeError(
                labels.ERR_CALIBRATION_ORDER.format(servo=int(servo), min_pulse=min_pulse, max_pulse=max_pulse)
            )

    def get(self, index) -> CalibrationBounds:
        return self._bounds[ServoIndex.validate(index)]

    def set_min(self, index, value: int) -> None:
        servo = ServoIndex.validate(index)
        current = self._bounds[servo]
        self._validate(servo, value, current.max_pulse)
        self._bounds[servo] = CalibrationBounds(value, current.max_pulse)

    def set_max(self, index, value: int) -> None:
        servo = ServoIndex.validate(index)
        current = self._bounds[servo]
        self._validate(servo, current.min_pulse, value)
        self._bounds[servo] = CalibrationBounds(current.min_pulse, value)


__all__ = [
    'CalibrationBounds',
    'CalibrationStore',
]

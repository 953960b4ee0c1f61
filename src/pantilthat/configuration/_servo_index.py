from enum import IntEnum

from pantilthat import labels
from pantilthat.exceptions import InvalidIndexError


class ServoIndex(IntEnum):
    """The two servo channels of the pan-tilt controller."""

    ONE = 1
    TWO = 2

    @staticmethod
    def validate(index) -> "ServoIndex":
        """
        Turn a caller-supplied index into a ServoIndex.

        Args:
            index: 1 or 2 (or a ServoIndex).

        Returns:
            ServoIndex: The matching servo.

        Raises:
            InvalidIndexError: For anything that is not exactly 1 or 2.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(labels.ERR_INVALID_SERVO_INDEX.format(index=index))
        try:
            return ServoIndex(index)
        except ValueError:
            raise InvalidIndexError(labels.ERR_INVALID_SERVO_INDEX.format(index=index)) from None

"""Register layout of the pan-tilt controller."""

from pantilthat.configuration import ServoIndex
from pantilthat.constants import CONFIG_SERVO1_ENABLE, CONFIG_SERVO2_ENABLE, REG_SERVO1, REG_SERVO2

SERVO_REGISTERS = {
    ServoIndex.ONE: REG_SERVO1,
    ServoIndex.TWO: REG_SERVO2,
}


def build_config_byte(enable_servo1: bool, enable_servo2: bool) -> int:
    """Pack the enable flags into the config register value.

    Bit 0 enables servo 1, bit 1 enables servo 2. Bits 2-7 belong to the
    lighting and are always left at 0.
    """
    config = 0
    if enable_servo1:
        config |= CONFIG_SERVO1_ENABLE
    if enable_servo2:
        config |= CONFIG_SERVO2_ENABLE
    return config


def servo_register(index) -> int:
    """Word register holding the pulse width of the given servo."""
    return SERVO_REGISTERS[ServoIndex.validate(index)]


__all__ = [
    'SERVO_REGISTERS',
    'build_config_byte',
    'servo_register',
]

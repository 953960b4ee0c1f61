import pytest

from pantilthat import InvalidIndexError, ServoIndex, build_config_byte
from pantilthat.registers import servo_register


@pytest.mark.parametrize(
    'servo1, servo2, expected',
    [
        (False, False, 0x00),
        (True, False, 0x01),
        (False, True, 0x02),
        (True, True, 0x03),
    ],
)
def test_config_byte(servo1, servo2, expected):
    assert build_config_byte(servo1, servo2) == expected


def test_servo_registers():
    assert servo_register(1) == 0x01
    assert servo_register(ServoIndex.TWO) == 0x03


@pytest.mark.parametrize('index', [0, 3, -1, True, '1', 1.0, None])
def test_invalid_servo_index(index):
    with pytest.raises(InvalidIndexError):
        ServoIndex.validate(index)

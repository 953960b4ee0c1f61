from dataclasses import dataclass
from typing import Optional

from pantilthat.constants import (
    DEFAULT_I2C_ADDRESS,
    DEFAULT_I2C_PORT,
    DEFAULT_I2C_RETRIES,
    DEFAULT_I2C_RETRY_DELAY,
    DEFAULT_IDLE_TIMEOUT,
    DEFAULT_MAX_PULSE,
    DEFAULT_MIN_PULSE,
)


@dataclass
class PanTiltParameters:
    """Construction-time settings of a pan-tilt controller.

    Zero or None in a calibration, timeout or address field means
    "use the default". A negative idle_timeout switches the idle
    auto-disable off.
    """

    servo1_min: Optional[int] = None
    servo1_max: Optional[int] = None
    servo2_min: Optional[int] = None
    servo2_max: Optional[int] = None
    idle_timeout: Optional[float] = None
    address: Optional[int] = None
    port: int = DEFAULT_I2C_PORT
    i2c_retries: int = DEFAULT_I2C_RETRIES
    i2c_retry_delay: float = DEFAULT_I2C_RETRY_DELAY

    def __post_init__(self):
        if not self.servo1_min:
            self.servo1_min = DEFAULT_MIN_PULSE
        if not self.servo1_max:
            self.servo1_max = DEFAULT_MAX_PULSE
        if not self.servo2_min:
            self.servo2_min = DEFAULT_MIN_PULSE
        if not self.servo2_max:
            self.servo2_max = DEFAULT_MAX_PULSE
        if not self.idle_timeout:
            self.idle_timeout = DEFAULT_IDLE_TIMEOUT
        if not self.address:
            self.address = DEFAULT_I2C_ADDRESS

    @property
    def idle_enabled(self) -> bool:
        return self.idle_timeout >= 0

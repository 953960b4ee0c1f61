"""Bus transport for the pan-tilt controller."""

from pantilthat.hardware.i2c_device import I2cDevice

__all__ = ["I2cDevice"]

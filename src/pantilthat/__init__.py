"""Driver for a two-axis I2C pan-tilt servo controller."""

from pantilthat.calibration import CalibrationBounds, CalibrationStore
from pantilthat.configuration import ConfigProvider, PanTiltParameters, ServoIndex
from pantilthat.conversion import degrees_to_pulse, pulse_to_degrees
from pantilthat.exceptions import ConfigurationError, InvalidIndexError, PanTiltError, RangeError, TransportError
from pantilthat.hardware import I2cDevice
from pantilthat.pantilt import PanTilt
from pantilthat.registers import build_config_byte

__version__ = '0.1.0'

__all__ = [
    'CalibrationBounds',
    'CalibrationStore',
    'ConfigProvider',
    'PanTiltParameters',
    'ServoIndex',
    'degrees_to_pulse',
    'pulse_to_degrees',
    'ConfigurationError',
    'InvalidIndexError',
    'PanTiltError',
    'RangeError',
    'TransportError',
    'I2cDevice',
    'PanTilt',
    'build_config_byte',
]

"""Exceptions raised by the pan-tilt driver."""


class PanTiltError(Exception):
    """Base class for every error raised by this package."""


class InvalidIndexError(PanTiltError, IndexError):
    """A servo index other than 1 or 2 was given."""


class RangeError(PanTiltError, ValueError):
    """An angle, pulse width or calibration bound is outside its domain."""


class TransportError(PanTiltError, OSError):
    """The I2C bus transaction failed."""


class ConfigurationError(PanTiltError):
    """The configuration file could not be read."""


__all__ = [
    'PanTiltError',
    'InvalidIndexError',
    'RangeError',
    'TransportError',
    'ConfigurationError',
]

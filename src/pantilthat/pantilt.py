"""
Pan-tilt controller: angle control of two servos behind an I2C register map.

Each servo is either disabled or enabled. A servo becomes enabled through
enable_servo() or implicitly on its first write_angle(), and becomes
disabled through enable_servo(index, False), after idle_timeout seconds
without an enable or write, or on shutdown(). The enable flags are mirrored in the
config register; when that write fails the in-memory flag has already
changed.
"""

import threading
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Union

from pantilthat import labels
from pantilthat.calibration import CalibrationBounds, CalibrationStore
from pantilthat.configuration import ConfigProvider, PanTiltParameters, ServoIndex
from pantilthat.constants import REG_CONFIG
from pantilthat.conversion import degrees_to_pulse, pulse_to_degrees
from pantilthat.hardware import I2cDevice
from pantilthat.logger import Logger
from pantilthat.registers import build_config_byte, servo_register

log = Logger().setup_logger('Controller')


class PanTilt:
    """Drives the pan (servo 1) and tilt (servo 2) axes.

    Attributes
    ----------
    parameters : PanTiltParameters
        Settings the controller was built with
    transport
        Object providing write_byte_data, write_word_data and
        read_word_data for the device; I2cDevice unless given
    """

    def __init__(self, transport=None, parameters: Optional[PanTiltParameters] = None, **overrides):
        """Initialize the controller.

        Parameters
        ----------
        transport : optional
            Register transport, an I2cDevice is opened from the parameters when omitted
        parameters : PanTiltParameters, optional
            Construction settings, defaults when omitted
        **overrides
            PanTiltParameters fields replacing those of ``parameters``
        """
        if parameters is None:
            parameters = PanTiltParameters(**overrides)
        elif overrides:
            parameters = replace(parameters, **overrides)
        self.parameters = parameters

        self._calibration = CalibrationStore.from_parameters(parameters)
        self._enabled: Dict[ServoIndex, bool] = {ServoIndex.ONE: False, ServoIndex.TWO: False}
        self._idle_timers: Dict[ServoIndex, threading.Timer] = {}
        self._lock = threading.RLock()
        self._is_shut_down = False

        if transport is None:
            transport = I2cDevice(
                parameters.address,
                port=parameters.port,
                retries=parameters.i2c_retries,
                retry_delay=parameters.i2c_retry_delay,
            )
        self.transport = transport

        log.debug(
            labels.PANTILT_CREATED.format(
                address=parameters.address,
                s1_min=parameters.servo1_min,
                s1_max=parameters.servo1_max,
                s2_min=parameters.servo2_min,
                s2_max=parameters.servo2_max,
            )
        )

    @classmethod
    def from_config(cls, path: Optional[Union[str, Path]] = None, transport=None, **overrides) -> "PanTilt":
        """Build a controller from the JSON configuration file."""
        parameters = ConfigProvider(path).get_parameters(**overrides)
        return cls(transport=transport, parameters=parameters)

    def __enter__(self) -> "PanTilt":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()

    # -----------------------------
    # Enable state
    # -----------------------------
    def enable_servo(self, index, state: bool = True) -> None:
        """Switch a servo on or off and write the config register."""
        servo = ServoIndex.validate(index)
        with self._lock:
            self._enabled[servo] = bool(state)
            if state:
                self._is_shut_down = False
                self._arm_idle_timer(servo)
            else:
                self._cancel_idle_timer(servo)
            self._write_config()
        if state:
            log.info(labels.PANTILT_SERVO_ENABLED.format(servo=int(servo)))
        else:
            log.info(labels.PANTILT_SERVO_DISABLED.format(servo=int(servo)))

    def disable_servo(self, index) -> None:
        self.enable_servo(index, False)

    def is_enabled(self, index) -> bool:
        return self._enabled[ServoIndex.validate(index)]

    def _write_config(self) -> None:
        config = build_config_byte(self._enabled[ServoIndex.ONE], self._enabled[ServoIndex.TWO])
        log.debug(labels.PANTILT_WRITING_CONFIG.format(config=config))
        self.transport.write_byte_data(REG_CONFIG, config)

    # -----------------------------
    # Calibration
    # -----------------------------
    def set_calibration_min(self, index, value: int) -> None:
        """Set the pulse width at -90 degrees. No device I/O."""
        with self._lock:
            self._calibration.set_min(index, value)

    def set_calibration_max(self, index, value: int) -> None:
        """Set the pulse width at +90 degrees. No device I/O."""
        with self._lock:
            self._calibration.set_max(index, value)

    def get_calibration(self, index) -> CalibrationBounds:
        return self._calibration.get(index)

    # -----------------------------
    # Angles
    # -----------------------------
    def read_angle(self, index) -> int:
        """Read the servo register and convert it to degrees.

        Raises
        ------
        RangeError
            The device reports a pulse width outside the calibrated bounds
        TransportError
            The bus read failed
        """
        servo = ServoIndex.validate(index)
        with self._lock:
            pulse = self.transport.read_word_data(servo_register(servo))
            bounds = self._calibration.get(servo)
        log.debug(labels.PANTILT_READ_PULSE.format(pulse=pulse, servo=int(servo)))
        return pulse_to_degrees(pulse, bounds.min_pulse, bounds.max_pulse)

    def write_angle(self, index, angle: int) -> None:
        """Move a servo to an angle in [-90, 90], enabling it first if needed.

        The enable happens before the angle is converted, so a rejected angle
        still leaves a previously disabled servo enabled.
        """
        servo = ServoIndex.validate(index)
        with self._lock:
            if not self._enabled[servo]:
                self.enable_servo(servo, True)

            bounds = self._calibration.get(servo)
            pulse = degrees_to_pulse(angle, bounds.min_pulse, bounds.max_pulse)

            log.debug(labels.PANTILT_WRITING_PULSE.format(pulse=pulse, servo=int(servo)))
            self.transport.write_word_data(servo_register(servo), pulse)
            self._arm_idle_timer(servo)

    def pan(self, angle: int) -> None:
        self.write_angle(ServoIndex.ONE, angle)

    def tilt(self, angle: int) -> None:
        self.write_angle(ServoIndex.TWO, angle)

    def get_pan(self) -> int:
        return self.read_angle(ServoIndex.ONE)

    def get_tilt(self) -> int:
        return self.read_angle(ServoIndex.TWO)

    # -----------------------------
    # Idle handling
    # -----------------------------
    def _arm_idle_timer(self, servo: ServoIndex) -> None:
        if not self.parameters.idle_enabled:
            return
        self._cancel_idle_timer(servo)
        timer = threading.Timer(self.parameters.idle_timeout, self._on_idle_timeout, args=(servo,))
        timer.daemon = True
        self._idle_timers[servo] = timer
        timer.start()

    def _cancel_idle_timer(self, servo: ServoIndex) -> None:
        timer = self._idle_timers.pop(servo, None)
        if timer is not None:
            timer.cancel()

    def _on_idle_timeout(self, servo: ServoIndex) -> None:
        with self._lock:
            # a newer write or a disable replaced this timer while it waited for the lock
            if self._idle_timers.get(servo) is not threading.current_thread():
                return
            del self._idle_timers[servo]

            log.info(labels.PANTILT_IDLE_TIMEOUT.format(servo=int(servo), timeout=self.parameters.idle_timeout))
            try:
                self.enable_servo(servo, False)
            except Exception as e:
                log.warning(labels.PANTILT_IDLE_DISABLE_FAILED.format(servo=int(servo), error=e))

    # -----------------------------
    # Shutdown
    # -----------------------------
    def shutdown(self) -> None:
        """Disable both servos and release the transport. Never raises."""
        with self._lock:
            if self._is_shut_down:
                return
            self._is_shut_down = True

            log.info(labels.PANTILT_SHUTDOWN)
            for servo in list(self._idle_timers):
                self._cancel_idle_timer(servo)

            self._enabled[ServoIndex.ONE] = False
            self._enabled[ServoIndex.TWO] = False
            try:
                self._write_config()
            except Exception as e:
                log.warning(labels.PANTILT_SHUTDOWN_FAILED.format(error=e))

            self._release_transport()

    def close(self) -> None:
        """Release the transport without touching the config register.

        Servos keep whatever state the device holds; idle timers are cancelled,
        so an enabled servo stays enabled. Never raises.
        """
        with self._lock:
            for servo in list(self._idle_timers):
                self._cancel_idle_timer(servo)
            self._release_transport()

    def _release_transport(self) -> None:
        close = getattr(self.transport, 'close', None)
        if close is not None:
            try:
                close()
            except Exception as e:
                log.warning(labels.PANTILT_SHUTDOWN_FAILED.format(error=e))


__all__ = [
    'PanTilt',
]

"""I2C device helper wrapping smbus2 interactions."""

from time import sleep
from typing import Callable, Optional

import smbus2  # type: ignore

from pantilthat import labels
from pantilthat.constants import DEFAULT_I2C_PORT, DEFAULT_I2C_RETRIES, DEFAULT_I2C_RETRY_DELAY
from pantilthat.exceptions import TransportError
from pantilthat.logger import Logger

log = Logger().setup_logger('I2C')


class I2cDevice:
    """Provides register read/write helpers for one I2C device address.

    Every transaction is retried up to ``retries`` more times, ``retry_delay``
    seconds apart, before the failure is raised as TransportError.
    """

    def __init__(
        self,
        addr: int,
        port: int = DEFAULT_I2C_PORT,
        retries: int = DEFAULT_I2C_RETRIES,
        retry_delay: float = DEFAULT_I2C_RETRY_DELAY,
    ):
        """
        Initialize an I2C device helper.

        Args:
            addr: I2C device address (typically 0x00–0x7F).
            port: I2C bus number (default 1 on Raspberry Pi).
            retries: Extra attempts after a failed transaction.
            retry_delay: Seconds to wait between attempts.
        """
        self.addr = addr
        self.port = port
        self.retries = max(0, retries)
        self.retry_delay = retry_delay
        self._bus: Optional[smbus2.SMBus] = None

    @property
    def bus(self) -> smbus2.SMBus:
        """The SMBus handle, opened on first use."""
        if self._bus is None:
            log.debug(labels.I2C_OPENING_BUS.format(port=self.port, address=self.addr))
            self._bus = smbus2.SMBus(self.port)
        return self._bus

    def close(self) -> None:
        if self._bus is not None:
            log.debug(labels.I2C_CLOSING_BUS.format(port=self.port))
            try:
                self._bus.close()
            finally:
                self._bus = None

    def write_byte_data(self, register: int, value: int) -> None:
        """Write one byte to a register."""
        self._transaction('write byte', register, lambda: self.bus.write_byte_data(self.addr, register, value))

    def write_word_data(self, register: int, value: int) -> None:
        """Write a 16-bit word to a register."""
        self._transaction('write word', register, lambda: self.bus.write_word_data(self.addr, register, value))

    def read_word_data(self, register: int) -> int:
        """Read a 16-bit word from a register."""
        return self._transaction('read word', register, lambda: self.bus.read_word_data(self.addr, register))

    def _transaction(self, operation: str, register: int, action: Callable):
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return action()
            except OSError as e:
                if attempt == attempts:
                    raise TransportError(
                        labels.ERR_TRANSPORT_FAILED.format(
                            operation=operation, register=register, address=self.addr, error=e
                        )
                    ) from e
                log.debug(
                    labels.I2C_RETRYING.format(
                        operation=operation, register=register, attempt=attempt, attempts=attempts, error=e
                    )
                )
                sleep(self.retry_delay)

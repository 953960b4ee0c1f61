import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import jmespath  # http://jmespath.org/tutorial.html

from pantilthat import labels
from pantilthat.configuration._parameters import PanTiltParameters
from pantilthat.constants import CONFIG_FILE_NAME, CONFIG_PATH_ENV
from pantilthat.exceptions import ConfigurationError
from pantilthat.logger import Logger

log = Logger().setup_logger('Configuration')


def default_config_path() -> Path:
    """Location of the configuration file: $PANTILTHAT_CONFIG or ~/pantilthat.json."""
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_FILE_NAME


class ConfigProvider:
    """Reads pan-tilt settings from a JSON document with jmespath lookups."""

    PANTILT_ADDRESS = 'pantilt.address'
    PANTILT_PORT = 'pantilt.port'
    PANTILT_IDLE_TIMEOUT = 'pantilt.idle_timeout'
    PANTILT_I2C_RETRIES = 'pantilt.i2c.retries'
    PANTILT_I2C_RETRY_DELAY = 'pantilt.i2c.retry_delay'

    PANTILT_SERVO1_MIN_PULSE = 'pantilt.servos.servo1.min_pulse'
    PANTILT_SERVO1_MAX_PULSE = 'pantilt.servos.servo1.max_pulse'
    PANTILT_SERVO2_MIN_PULSE = 'pantilt.servos.servo2.min_pulse'
    PANTILT_SERVO2_MAX_PULSE = 'pantilt.servos.servo2.max_pulse'

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else default_config_path()
        self.values: dict = {}
        self.load_config()

    def load_config(self) -> None:
        """Load the JSON file; a missing file leaves every value unset."""
        if not self.path.exists():
            log.debug(labels.CONFIG_NOT_FOUND.format(path=self.path))
            self.values = {}
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as json_file:
                self.values = json.load(json_file)
        except (OSError, ValueError) as e:
            raise ConfigurationError(labels.ERR_CONFIG_UNREADABLE.format(path=self.path, error=e)) from e

        log.info(labels.CONFIG_LOADED.format(path=self.path))

    def get(self, search_pattern: str) -> Any:
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return value

    def get_address(self) -> Optional[int]:
        return self._get_int(self.PANTILT_ADDRESS)

    def get_parameters(self, **overrides) -> PanTiltParameters:
        """Build controller parameters from the file, then apply non-None overrides."""
        values = {
            'servo1_min': self._get_int(self.PANTILT_SERVO1_MIN_PULSE),
            'servo1_max': self._get_int(self.PANTILT_SERVO1_MAX_PULSE),
            'servo2_min': self._get_int(self.PANTILT_SERVO2_MIN_PULSE),
            'servo2_max': self._get_int(self.PANTILT_SERVO2_MAX_PULSE),
            'idle_timeout': self._get_float(self.PANTILT_IDLE_TIMEOUT),
            'address': self.get_address(),
            'port': self._get_int(self.PANTILT_PORT),
            'i2c_retries': self._get_int(self.PANTILT_I2C_RETRIES),
            'i2c_retry_delay': self._get_float(self.PANTILT_I2C_RETRY_DELAY),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        # port and retry fields have real defaults on the dataclass, don't pass None through
        return PanTiltParameters(**{key: value for key, value in values.items() if value is not None})

    def _get_int(self, search_pattern: str) -> Optional[int]:
        value = self.get(search_pattern)
        if value is None:
            return None
        try:
            if isinstance(value, str):
                return int(value, 0)
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_VALUE.format(key=search_pattern, value=value)) from e

    def _get_float(self, search_pattern: str) -> Optional[float]:
        value = self.get(search_pattern)
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_VALUE.format(key=search_pattern, value=value)) from e

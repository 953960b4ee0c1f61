from ._config_provider import ConfigProvider, default_config_path
from ._parameters import PanTiltParameters
from ._servo_index import ServoIndex

__all__ = ["ConfigProvider", "PanTiltParameters", "ServoIndex", "default_config_path"]

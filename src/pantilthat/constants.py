### Register Map ###
# Byte addresses on the pan-tilt controller
REG_CONFIG = 0x00
REG_SERVO1 = 0x01
REG_SERVO2 = 0x03
REG_WS2812 = 0x05  # lighting, not driven
REG_UPDATE = 0x4E  # commit trigger, never written

# Config byte bits
CONFIG_SERVO1_ENABLE = 0x01
CONFIG_SERVO2_ENABLE = 0x02

### Device Defaults ###
DEFAULT_I2C_ADDRESS = 0x15
DEFAULT_I2C_PORT = 1

# Calibration, microseconds
DEFAULT_MIN_PULSE = 575
DEFAULT_MAX_PULSE = 2325
PULSE_WIDTH_LIMIT = 0xFFFF

# Seconds without a write before a servo is switched off
DEFAULT_IDLE_TIMEOUT = 2

# ===============================
# I2C Retry Policy
# ===============================
DEFAULT_I2C_RETRIES = 10
DEFAULT_I2C_RETRY_DELAY = 0.01  # seconds

# ===============================
# Angle Domain
# ===============================
ANGLE_MIN = -90
ANGLE_MAX = 90
ANGLE_SPAN = ANGLE_MAX - ANGLE_MIN

### Configuration File ###
CONFIG_FILE_NAME = 'pantilthat.json'
CONFIG_PATH_ENV = 'PANTILTHAT_CONFIG'


__all__ = [
    'REG_CONFIG',
    'REG_SERVO1',
    'REG_SERVO2',
    'REG_WS2812',
    'REG_UPDATE',
    'CONFIG_SERVO1_ENABLE',
    'CONFIG_SERVO2_ENABLE',
    'DEFAULT_I2C_ADDRESS',
    'DEFAULT_I2C_PORT',
    'DEFAULT_MIN_PULSE',
    'DEFAULT_MAX_PULSE',
    'PULSE_WIDTH_LIMIT',
    'DEFAULT_IDLE_TIMEOUT',
    'DEFAULT_I2C_RETRIES',
    'DEFAULT_I2C_RETRY_DELAY',
    'ANGLE_MIN',
    'ANGLE_MAX',
    'ANGLE_SPAN',
    'CONFIG_FILE_NAME',
    'CONFIG_PATH_ENV',
]

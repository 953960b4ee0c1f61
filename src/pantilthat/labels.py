"""
User-facing strings for the pan-tilt driver.

Log lines and exception messages are kept here so the wording stays
consistent between the library and the command line.
"""

# Validation errors
ERR_INVALID_SERVO_INDEX = "Servo index out of range: {index!r} (expected 1 or 2)"
ERR_ANGLE_OUT_OF_RANGE = "Angle outside range: {angle} vs [{angle_min}, {angle_max}]"
ERR_ANGLE_NOT_INTEGER = "Angle must be a whole number of degrees: {angle!r}"
ERR_PULSE_OUT_OF_RANGE = "Pulse time outside expected range: {us} vs [{us_min}, {us_max}]"
ERR_PULSE_RANGE_EMPTY = "Invalid pulse range: min_pulse ({us_min}) must be lower than max_pulse ({us_max})"
ERR_PULSE_WIDTH_LIMIT = "Invalid pulse width for servo {servo}: {value} must be between 0 and {limit} microseconds"
ERR_CALIBRATION_ORDER = (
    "Invalid calibration for servo {servo}: min_pulse ({min_pulse}) must be lower than max_pulse ({max_pulse})"
)

# Transport
ERR_TRANSPORT_FAILED = "I2C {operation} on register 0x{register:02X} of device 0x{address:02X} failed: {error}"
I2C_RETRYING = "I2C {operation} on register 0x{register:02X} failed (attempt {attempt}/{attempts}): {error}"
I2C_OPENING_BUS = "Opening I2C bus {port} for device 0x{address:02X}"
I2C_CLOSING_BUS = "Closing I2C bus {port}"

# Configuration
ERR_CONFIG_UNREADABLE = "Configuration file {path} is not readable or not valid JSON: {error}"
ERR_CONFIG_INVALID_VALUE = "Configuration value {key} is invalid: {value!r}"
CONFIG_LOADED = "Loaded configuration from {path}"
CONFIG_NOT_FOUND = "No configuration file at {path}, using defaults"

# Controller
PANTILT_CREATED = "Pan-tilt controller on address 0x{address:02X}, servo1 [{s1_min}, {s1_max}], servo2 [{s2_min}, {s2_max}]"
PANTILT_SERVO_ENABLED = "Servo {servo} enabled"
PANTILT_SERVO_DISABLED = "Servo {servo} disabled"
PANTILT_WRITING_CONFIG = "Writing config byte 0x{config:02X}"
PANTILT_WRITING_PULSE = "Writing {pulse} to servo {servo}"
PANTILT_READ_PULSE = "Read {pulse} from servo {servo}"
PANTILT_IDLE_TIMEOUT = "Servo {servo} idle for {timeout}s, disabling"
PANTILT_IDLE_DISABLE_FAILED = "Could not disable idle servo {servo}: {error}"
PANTILT_SHUTDOWN = "Shutting down pan-tilt controller"
PANTILT_SHUTDOWN_FAILED = "Could not disable servos cleanly: {error}"

# Command line
CLI_DESCRIPTION = 'Pan-tilt servo controller'
CLI_ANGLE = "{axis}: {angle}"
CLI_ERROR = "{error}"
CLI_TERMINATED_CTRL_C = 'Terminated due Control+C was pressed'

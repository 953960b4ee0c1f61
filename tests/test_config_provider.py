import json

import pytest

from pantilthat import ConfigProvider, ConfigurationError
from pantilthat.configuration import default_config_path


def write_config(path, data):
    path.write_text(json.dumps(data))
    return path


def test_missing_file_gives_defaults(tmp_path):
    parameters = ConfigProvider(tmp_path / 'missing.json').get_parameters()

    assert parameters.address == 0x15
    assert parameters.port == 1
    assert parameters.servo1_min == 575
    assert parameters.servo2_max == 2325
    assert parameters.idle_timeout == 2
    assert parameters.i2c_retries == 10


def test_values_are_read_from_file(tmp_path):
    path = write_config(
        tmp_path / 'pantilthat.json',
        {
            'pantilt': {
                'address': '0x16',
                'port': 0,
                'idle_timeout': 5,
                'i2c': {'retries': 3, 'retry_delay': 0.5},
                'servos': {
                    'servo1': {'min_pulse': 600, 'max_pulse': 2400},
                    'servo2': {'min_pulse': 700, 'max_pulse': 2200},
                },
            }
        },
    )

    parameters = ConfigProvider(path).get_parameters()

    assert parameters.address == 0x16
    assert parameters.port == 0
    assert parameters.idle_timeout == 5
    assert parameters.i2c_retries == 3
    assert parameters.i2c_retry_delay == 0.5
    assert (parameters.servo1_min, parameters.servo1_max) == (600, 2400)
    assert (parameters.servo2_min, parameters.servo2_max) == (700, 2200)


def test_overrides_win_over_file(tmp_path):
    path = write_config(tmp_path / 'pantilthat.json', {'pantilt': {'address': 22}})

    parameters = ConfigProvider(path).get_parameters(address=0x30, port=None)

    assert parameters.address == 0x30
    assert parameters.port == 1


def test_invalid_json(tmp_path):
    path = tmp_path / 'pantilthat.json'
    path.write_text('{not json')

    with pytest.raises(ConfigurationError):
        ConfigProvider(path)


def test_invalid_value(tmp_path):
    path = write_config(tmp_path / 'pantilthat.json', {'pantilt': {'address': 'sixteen'}})

    with pytest.raises(ConfigurationError):
        ConfigProvider(path).get_parameters()


def test_environment_selects_file(tmp_path, monkeypatch):
    path = write_config(tmp_path / 'other.json', {'pantilt': {'address': '0x17'}})
    monkeypatch.setenv('PANTILTHAT_CONFIG', str(path))

    assert default_config_path() == path
    assert ConfigProvider().get_address() == 0x17

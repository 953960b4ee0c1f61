import json

import pytest

from pantilthat.__main__ import build_parser, main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / 'pantilthat.json'
    path.write_text(json.dumps({'pantilt': {'idle_timeout': -1}}))
    return str(path)


def test_pan_moves_and_shuts_down(config_path, transport):
    assert main(['--config', config_path, 'pan', '30'], transport=transport) == 0

    assert transport.operations == [
        ('write_byte', 0x00, 0x01),
        ('write_word', 0x01, 1742),
        ('write_byte', 0x00, 0x00),
    ]


def test_keep_enabled_skips_shutdown(config_path, transport):
    assert main(['--config', config_path, '--keep-enabled', 'tilt', '-20'], transport=transport) == 0

    assert transport.operations[-1][0] == 'write_word'
    assert transport.operations[-1][1] == 0x03
    assert not transport.closed


def test_get_prints_angle(config_path, transport, capsys):
    transport.words[0x01] = 1450

    assert main(['--config', config_path, 'get', 'pan'], transport=transport) == 0

    assert capsys.readouterr().out.strip() == 'pan: 0'
    assert transport.operations == [('read_word', 0x01)]
    assert transport.closed


def test_enable_keeps_servo_on(config_path, transport):
    assert main(['--config', config_path, '--keep-enabled', 'enable', '2'], transport=transport) == 0
    assert transport.operations == [('write_byte', 0x00, 0x02)]


def test_out_of_range_angle_fails(config_path, transport):
    assert main(['--config', config_path, 'pan', '120'], transport=transport) == 1
    assert transport.operations[-1] == ('write_byte', 0x00, 0x00)


def test_address_accepts_hex():
    args = build_parser().parse_args(['--address', '0x16', 'disable', '1'])

    assert args.address == 0x16
    assert args.servo == 1


def test_servo_choice_is_validated():
    with pytest.raises(SystemExit):
        build_parser().parse_args(['enable', '3'])


def test_enable_without_keep_enabled_stays_on(config_path, transport):
    assert main(['--config', config_path, 'enable', '2'], transport=transport) == 0

    assert transport.operations == [('write_byte', 0x00, 0x02)]
    assert transport.closed


def test_disable_writes_config_once(config_path, transport):
    assert main(['--config', config_path, 'disable', '1'], transport=transport) == 0

    assert transport.operations == [('write_byte', 0x00, 0x00)]


def test_failed_read_does_not_disable_servos(config_path, transport):
    transport.words[0x03] = 100

    assert main(['--config', config_path, 'get', 'tilt'], transport=transport) == 1
    assert transport.operations == [('read_word', 0x03)]

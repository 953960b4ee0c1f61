"""Angle and pulse width conversion, no hardware involved."""

import pytest

from pantilthat import RangeError, degrees_to_pulse, pulse_to_degrees
from pantilthat.conversion import round_half_away

US_MIN = 575
US_MAX = 2325


def test_end_stops_map_to_limits():
    assert pulse_to_degrees(US_MIN, US_MIN, US_MAX) == -90
    assert pulse_to_degrees(US_MAX, US_MIN, US_MAX) == 90
    assert degrees_to_pulse(-90, US_MIN, US_MAX) == US_MIN
    assert degrees_to_pulse(90, US_MIN, US_MAX) == US_MAX


def test_centre():
    assert degrees_to_pulse(0, US_MIN, US_MAX) == 1450
    assert pulse_to_degrees(1450, US_MIN, US_MAX) == 0


def test_pulse_below_calibration_is_rejected():
    with pytest.raises(RangeError):
        pulse_to_degrees(100, US_MIN, US_MAX)


def test_pulse_above_calibration_is_rejected():
    with pytest.raises(RangeError):
        pulse_to_degrees(US_MAX + 1, US_MIN, US_MAX)


@pytest.mark.parametrize('angle', [-91, 91, 180])
def test_angle_outside_domain_is_rejected(angle):
    with pytest.raises(RangeError):
        degrees_to_pulse(angle, US_MIN, US_MAX)


@pytest.mark.parametrize('us_min, us_max', [(2325, 575), (1000, 1000)])
def test_empty_pulse_range_is_rejected(us_min, us_max):
    with pytest.raises(RangeError):
        degrees_to_pulse(0, us_min, us_max)
    with pytest.raises(RangeError):
        pulse_to_degrees(us_min, us_min, us_max)


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(0.0) == 0


def test_degrees_to_pulse_rounds_instead_of_truncating():
    # 1750 / 180 * 91 = 884.72
    assert degrees_to_pulse(1, US_MIN, US_MAX) == 1460


def test_pulse_to_degrees_rounds_halves_up():
    # 32 / 256 * 180 = 22.5 exactly
    assert pulse_to_degrees(32, 0, 256) == -67


def test_angle_round_trip_is_exact_with_default_calibration():
    for angle in range(-90, 91):
        us = degrees_to_pulse(angle, US_MIN, US_MAX)
        assert US_MIN <= us <= US_MAX
        assert pulse_to_degrees(us, US_MIN, US_MAX) == angle


def test_angle_round_trip_on_narrow_calibration_is_within_one_degree():
    us_min, us_max = 575, 700
    for angle in range(-90, 91):
        us = degrees_to_pulse(angle, us_min, us_max)
        assert abs(pulse_to_degrees(us, us_min, us_max) - angle) <= 1


def test_pulse_round_trip_stays_within_half_a_degree_step():
    tolerance = (US_MAX - US_MIN) / 360 + 0.5
    for us in range(US_MIN, US_MAX + 1):
        back = degrees_to_pulse(pulse_to_degrees(us, US_MIN, US_MAX), US_MIN, US_MAX)
        assert abs(back - us) <= tolerance


@pytest.mark.parametrize('angle', [45.7, 0.0, True, '10', None])
def test_angle_must_be_whole_degrees(angle):
    with pytest.raises(RangeError):
        degrees_to_pulse(angle, US_MIN, US_MAX)

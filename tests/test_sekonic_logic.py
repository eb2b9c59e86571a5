"""Tests for the Sekonic light meter readout parser and formatter."""

import math

import pytest

from exposure_logic import adjust_exposure_time
from sekonic_logic import (
    STANDARD_SHUTTER_SPEEDS,
    format_sekonic_exposure_time,
    parse_sekonic_exposure_time,
)


class TestParseSekonicExposureTime:
    def test_below_one_second(self):
        assert parse_sekonic_exposure_time("15") == 1 / 15

    def test_above_one_second(self):
        assert parse_sekonic_exposure_time("15s") == 15

    def test_above_one_minute(self):
        assert parse_sekonic_exposure_time("15m") == 15 * 60

    def test_ev_fraction_below_one_second(self):
        expected = adjust_exposure_time(1 / 15, 0.5)
        assert parse_sekonic_exposure_time("15 5") == expected

    def test_ev_fraction_above_one_second(self):
        expected = adjust_exposure_time(15, 0.5)
        assert parse_sekonic_exposure_time("15s 5") == expected

    def test_ev_fraction_above_one_minute(self):
        expected = adjust_exposure_time(15 * 60, 0.5)
        assert parse_sekonic_exposure_time("15m 5") == expected

    def test_ev_fraction_without_space(self):
        assert parse_sekonic_exposure_time("15s5") == adjust_exposure_time(15, 0.5)
        assert parse_sekonic_exposure_time("2m3") == adjust_exposure_time(120, 0.3)

    def test_decimal_seconds(self):
        assert parse_sekonic_exposure_time("15.5s") == 15.5

    def test_decimal_minutes(self):
        assert parse_sekonic_exposure_time("15.5m") == 60 * 15.5

    def test_decimal_below_one_second(self):
        assert parse_sekonic_exposure_time("0.3s") == 0.3

    def test_decimal_below_one_minute(self):
        assert parse_sekonic_exposure_time("0.3m") == 18

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_sekonic_exposure_time("  500 3\n") == adjust_exposure_time(1 / 500, 0.3)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "abc",
            "15x",
            "1/60",
            "15.5",
            "15.55s",
            "15 55",
            "15s 55",
            "m",
            "0",
            "١٥",
            "５００s",
        ],
    )
    def test_unparseable_returns_none(self, text):
        assert parse_sekonic_exposure_time(text) is None


class TestFormatSekonicExposureTime:
    def test_below_one_second_without_fraction(self):
        assert format_sekonic_exposure_time(1 / 60) == "60"

    def test_below_one_second_with_fraction(self):
        """1/500 + 0.2 EV."""
        assert format_sekonic_exposure_time(0.00174) == "500 2"

    def test_above_one_second_without_fraction(self):
        assert format_sekonic_exposure_time(5) == "5s"

    def test_above_one_second_with_fraction(self):
        assert format_sekonic_exposure_time(5.8) == "5s 2"

    def test_above_one_minute_without_fraction(self):
        assert format_sekonic_exposure_time(120) == "2m"

    def test_above_one_minute_with_fraction(self):
        assert format_sekonic_exposure_time(130) == "2m 1"

    def test_exactly_one_second_uses_seconds(self):
        assert format_sekonic_exposure_time(1) == "1s"

    def test_exactly_one_minute_uses_minutes(self):
        assert format_sekonic_exposure_time(60) == "1m"

    def test_fastest_speed(self):
        assert format_sekonic_exposure_time(1 / 8000) == "8000"
        assert format_sekonic_exposure_time(0.0001) == "8000 3"

    def test_half_second(self):
        assert format_sekonic_exposure_time(0.5) == "2"

    def test_between_half_and_one_second_falls_back_to_slowest_speed(self):
        assert format_sekonic_exposure_time(0.7) == "2 -5"

    @pytest.mark.parametrize("speed", STANDARD_SHUTTER_SPEEDS)
    def test_standard_speeds_have_no_suffix(self, speed):
        assert format_sekonic_exposure_time(1 / speed) == str(speed)

    @pytest.mark.parametrize("exposure_time", [0, -1, math.nan, math.inf])
    def test_rejects_invalid_time(self, exposure_time):
        with pytest.raises(ValueError):
            format_sekonic_exposure_time(exposure_time)


class TestReadoutRoundTrip:
    @pytest.mark.parametrize("label", ["500", "60", "2", "1s", "15s", "2m", "30m"])
    def test_round_values(self, label):
        assert format_sekonic_exposure_time(parse_sekonic_exposure_time(label)) == label

    @pytest.mark.parametrize("label", ["5s 2", "4s 3", "2m 1"])
    def test_values_with_fraction(self, label):
        assert format_sekonic_exposure_time(parse_sekonic_exposure_time(label)) == label

    @pytest.mark.parametrize("exposure_time", [1 / 8000, 1 / 500, 1 / 60, 1 / 2, 1, 15, 60, 120, 1800])
    def test_formatted_round_times_parse_back(self, exposure_time):
        assert parse_sekonic_exposure_time(format_sekonic_exposure_time(exposure_time)) == exposure_time

"""
Tests for duration text formatting and parsing.
"""

import pytest
from datetime import timedelta

from flight_catalog.utils.timespan import format_timespan, parse_timespan


class TestFormatTimespan:
    """Test formatting of durations."""

    def test_hours_minutes_seconds(self):
        assert format_timespan(timedelta(hours=2)) == "02:00:00"
        assert format_timespan(timedelta(hours=8, minutes=30, seconds=5)) == "08:30:05"

    def test_zero(self):
        assert format_timespan(timedelta(0)) == "00:00:00"

    def test_days_prefix(self):
        assert format_timespan(timedelta(days=1, hours=1, minutes=45)) == "1.01:45:00"

    def test_fraction_uses_seven_digits(self):
        assert format_timespan(timedelta(seconds=1, milliseconds=500)) == "00:00:01.5000000"
        assert format_timespan(timedelta(microseconds=1)) == "00:00:00.0000010"

    def test_negative(self):
        assert format_timespan(timedelta(seconds=-1)) == "-00:00:01"
        assert format_timespan(-timedelta(days=2, hours=3)) == "-2.03:00:00"


class TestParseTimespan:
    """Test parsing of duration text."""

    def test_basic(self):
        assert parse_timespan("02:00:00") == timedelta(hours=2)

    def test_days_and_fraction(self):
        assert parse_timespan("1.01:45:00.25") == timedelta(days=1, hours=1, minutes=45, milliseconds=250)

    def test_seven_digit_fraction_truncated_to_microseconds(self):
        assert parse_timespan("00:00:00.1234567") == timedelta(microseconds=123456)

    def test_negative(self):
        assert parse_timespan("-00:30:00") == -timedelta(minutes=30)

    def test_surrounding_whitespace(self):
        assert parse_timespan(" 00:05:00 ") == timedelta(minutes=5)

    @pytest.mark.parametrize("text", ["", "2h", "02:00", "24:00:00", "00:60:00", "00:00:00.12345678", "abc"])
    def test_invalid_text(self, text):
        with pytest.raises(ValueError):
            parse_timespan(text)

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse_timespan(7200)

    @pytest.mark.parametrize("value", [
        timedelta(0),
        timedelta(hours=23, minutes=59, seconds=59),
        timedelta(days=3, microseconds=10),
        -timedelta(hours=1, seconds=1),
    ])
    def test_format_then_parse(self, value):
        assert parse_timespan(format_timespan(value)) == value

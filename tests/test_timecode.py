"""Tests for SRT timestamp conversion."""

import pytest

from capline.core.errors import FormatError
from capline.subtitles.timecode import from_timestamp, to_timestamp


class TestToTimestamp:
    def test_zero(self):
        assert to_timestamp(0) == "00:00:00,000"

    def test_floors_milliseconds(self):
        assert to_timestamp(3725.4567) == "01:02:05,456"

    def test_never_rounds_up_across_second(self):
        assert to_timestamp(59.9999) == "00:00:59,999"

    def test_decimal_exact_input_keeps_its_millisecond(self):
        # 1.005 * 1000 is 1004.999... in binary floating point
        assert to_timestamp(1.005) == "00:00:01,005"

    def test_just_below_a_millisecond_floors(self):
        assert to_timestamp(1.0009999999) == "00:00:01,000"

    def test_hours_wider_than_two_digits(self):
        assert to_timestamp(360000) == "100:00:00,000"

    def test_minutes_and_seconds_padded(self):
        assert to_timestamp(61.007) == "00:01:01,007"

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            to_timestamp(-0.001)


class TestFromTimestamp:
    def test_basic(self):
        assert from_timestamp("00:01:05,500") == 65.5

    def test_wide_hours(self):
        assert from_timestamp("100:00:00,000") == 360000

    def test_surrounding_whitespace_ignored(self):
        assert from_timestamp("  00:00:02,000 ") == 2.0

    def test_ranges_not_enforced(self):
        assert from_timestamp("00:00:75,000") == 75.0

    @pytest.mark.parametrize(
        "value",
        ["bad", "", "1:02:03,456", "00:00:01.000", "00:00:01,00", "00:00:01,000 extra"],
        ids=["word", "empty", "short-hours", "dot-millis", "short-millis", "trailing"],
    )
    def test_malformed_raises(self, value):
        with pytest.raises(FormatError):
            from_timestamp(value)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            from_timestamp("bad")


class TestRoundTrip:
    def test_millisecond_values_within_a_minute(self):
        for ms in range(0, 60000, 7):
            t = ms / 1000
            back = from_timestamp(to_timestamp(t))
            assert abs(back - t) < 1e-3

    @pytest.mark.parametrize(
        "t", [0.0004, 1.0009999999, 12.3456789, 59.9999, 3599.9991, 86400.123456]
    )
    def test_never_greater_and_within_a_millisecond(self, t):
        back = from_timestamp(to_timestamp(t))
        assert back <= t
        assert t - back < 1e-3

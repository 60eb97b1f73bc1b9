"""Unit tests for SRT timestamp parsing."""

import pytest

from swear_killer.core.errors import MalformedTimestampError
from swear_killer.core.timestamps import parse_srt_timestamp


class TestValidTimestamps:
    """HH:MM:SS,mmm converts to H*3600 + M*60 + S + mmm/1000."""

    def test_reference_example(self):
        assert parse_srt_timestamp("00:01:23,456") == 83.456

    def test_zero(self):
        assert parse_srt_timestamp("00:00:00,000") == 0.0

    def test_all_fields(self):
        assert parse_srt_timestamp("01:02:03,004") == pytest.approx(3723.004)

    def test_hours_beyond_a_day_are_accepted(self):
        assert parse_srt_timestamp("25:00:00,000") == 90000.0
        assert parse_srt_timestamp("100:00:01,500") == 360001.5

    def test_largest_minutes_and_seconds(self):
        assert parse_srt_timestamp("99:59:59,999") == 359999.999

    @pytest.mark.parametrize("hours,minutes,seconds,millis", [
        (0, 0, 5, 0),
        (0, 59, 59, 999),
        (12, 34, 56, 789),
    ])
    def test_formula(self, hours, minutes, seconds, millis):
        text = "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, seconds, millis)
        expected = hours * 3600 + minutes * 60 + seconds + millis / 1000
        assert parse_srt_timestamp(text) == pytest.approx(expected)


class TestMalformedTimestamps:
    """Anything but the fixed comma form raises MalformedTimestampError."""

    @pytest.mark.parametrize("text", [
        "00:01:23.456",      # period separator is not accepted
        "0:01:23,456",       # single-digit hour
        "00:1:23,456",
        "00:01:23,45",
        "00:01:23",
        "",
        " 00:01:23,456",
        "00:01:23,456 ",
        "aa:bb:cc,ddd",
        "00:60:00,000",      # minutes out of range
        "00:00:60,000",      # seconds out of range
        "00:75:99,000",
    ])
    def test_rejected(self, text):
        with pytest.raises(MalformedTimestampError) as exc_info:
            parse_srt_timestamp(text)
        assert exc_info.value.timestamp == text

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_srt_timestamp("garbage")

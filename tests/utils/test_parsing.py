"""
Tests for lenient value parsing and timestamp helpers
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from src.utils.datetime import parse_date, to_date_string, to_timestamp
from src.utils.parsing import is_blank, parse_int, prune_blank


class TestParseInt:
    """Leading-integer parsing"""

    @pytest.mark.parametrize("value, expected", [
        ("45", 45),
        ("  90 min", 90),
        ("+7", 7),
        ("-3", -3),
        ("12.9", 12),
        (45.7, 45),
        (8, 8),
    ])
    def test_numbers(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "min 90", None, True, float("nan"), float("inf")])
    def test_not_numbers(self, value):
        assert parse_int(value) is None


class TestBlankValues:
    """What counts as 'not filled in'"""

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert not is_blank(0)
        assert not is_blank(False)
        assert not is_blank([])

    def test_prune_blank_is_shallow(self):
        fields = {"a": "", "b": None, "c": 0, "d": {"e": ""}}
        assert prune_blank(fields) == {"c": 0, "d": {"e": ""}}
        assert fields["a"] == ""


class TestTimestamps:
    """Canonical timestamp formatting"""

    def test_milliseconds_and_z(self):
        dt = datetime(2026, 10, 26, 9, 30, 5, 123456, tzinfo=timezone.utc)
        assert to_timestamp(dt) == "2026-10-26T09:30:05.123Z"

    def test_naive_is_utc(self):
        assert to_timestamp(datetime(2026, 10, 26)) == "2026-10-26T00:00:00.000Z"

    def test_offset_is_converted(self):
        dt = datetime(2026, 10, 26, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_timestamp(dt) == "2026-10-25T23:00:00.000Z"

    def test_date_string(self):
        assert to_date_string(date(2026, 1, 5)) == "2026-01-05"

    def test_parse_date_accepts_date_objects(self):
        assert parse_date(date(2026, 10, 30)) == datetime(2026, 10, 30)

    def test_parse_date_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date("2026-13-45")

    def test_out_of_range_in_utc(self):
        dt = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5)))
        with pytest.raises(ValueError, match="Invalid date"):
            to_timestamp(dt)

    def test_early_years_are_zero_padded(self):
        assert to_timestamp(datetime(99, 3, 4, 5, 6, 7)) == "0099-03-04T05:06:07.000Z"

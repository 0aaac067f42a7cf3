"""Tests for cell value coercion."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from datasight.table import (
    count_dates,
    is_boolean_token,
    is_missing,
    numeric_values,
    parse_date,
    to_number,
)


class TestIsMissing:
    @pytest.mark.parametrize("value", [None, "", float("nan")])
    def test_missing_values(self, value):
        assert is_missing(value)

    @pytest.mark.parametrize("value", [0, 0.0, " ", "0", False, "null"])
    def test_present_values(self, value):
        assert not is_missing(value)


class TestToNumber:
    def test_numeric_strings(self):
        assert to_number("42") == 42.0
        assert to_number(" 3.5 ") == 3.5
        assert to_number("-1e3") == -1000.0

    def test_native_numbers(self):
        assert to_number(7) == 7.0
        assert to_number(2.25) == 2.25

    def test_rejects_non_numeric(self):
        assert to_number("abc") is None
        assert to_number("12abc") is None
        assert to_number("") is None
        assert to_number(None) is None

    def test_rejects_booleans(self):
        assert to_number(True) is None
        assert to_number(False) is None

    def test_rejects_non_finite(self):
        assert to_number("nan") is None
        assert to_number("inf") is None
        assert to_number(float("-inf")) is None
        assert to_number(math.nan) is None

    def test_int_beyond_float_range(self):
        assert to_number(10**400) is None
        assert to_number(-(10**400)) is None


class TestBooleanTokens:
    @pytest.mark.parametrize("value", ["true", "false", "0", "1", True, False])
    def test_tokens(self, value):
        assert is_boolean_token(value)

    @pytest.mark.parametrize("value", ["TRUE", "yes", "t", 1, 0, ""])
    def test_non_tokens(self, value):
        assert not is_boolean_token(value)


class TestDates:
    def test_parse_iso_date(self):
        assert parse_date("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_parse_offset_is_normalized_to_utc(self):
        parsed = parse_date("2024-01-01T05:00:00+05:00")
        assert parsed == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_parse_failure(self):
        assert parse_date("not a date") is None
        assert parse_date("") is None
        assert parse_date(None) is None

    def test_datetime_passthrough(self):
        value = datetime(2023, 6, 1, 12, 30)
        assert parse_date(value) is value

    def test_count_dates_mixed(self):
        values = ["2024-01-15", "2024/02/20", "hello", "", None, "March 3, 2024"]
        assert count_dates(values) == 3

    def test_count_dates_mixed_offsets(self):
        values = ["2024-01-01T00:00:00+05:00", "2024-01-02", "2024-01-03T00:00:00Z", "hello"]
        assert count_dates(values) == 3

    def test_count_dates_empty(self):
        assert count_dates([]) == 0
        assert count_dates(["", None]) == 0


def test_numeric_values_keeps_order_and_drops_invalid():
    assert numeric_values(["3", "x", 1, None, "2.5", True]) == [3.0, 1.0, 2.5]

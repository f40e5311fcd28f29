"""Tests for date parsing utilities."""

from datetime import date, datetime

import pytest

from job_planner.exceptions import DateParseError
from job_planner.utils.date_utils import coerce_date, parse_posted_date


class TestParsePostedDate:
    """Test parsing record timestamps."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-04-20T08:15:00Z", date(2024, 4, 20)),
            ("2024-04-20T23:59:59+05:00", date(2024, 4, 20)),
            ("2024-04-20", date(2024, 4, 20)),
            ("2024-04-20 10:00:00", date(2024, 4, 20)),
            ("April 20, 2024", date(2024, 4, 20)),
            ("20 Apr 2024", date(2024, 4, 20)),
            ("20240420", date(2024, 4, 20)),
        ],
    )
    def test_formats(self, value, expected):
        assert parse_posted_date(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "not a date", "2024-13-45", "18", "March", "2024", "2024-04"]
    )
    def test_unparsable_returns_none(self, value):
        assert parse_posted_date(value) is None


class TestCoerceDate:
    """Test filter bound coercion."""

    def test_date_passthrough(self):
        assert coerce_date(date(2024, 1, 2)) == date(2024, 1, 2)

    def test_datetime_truncated(self):
        assert coerce_date(datetime(2024, 1, 2, 13, 45)) == date(2024, 1, 2)

    def test_string(self):
        assert coerce_date("2024-01-02") == date(2024, 1, 2)

    def test_malformed_string(self):
        with pytest.raises(DateParseError):
            coerce_date("someday")

    @pytest.mark.parametrize("value", ["18", "March", "April 2024"])
    def test_partial_date_rejected(self, value):
        """Test a bound missing its year, month or day is not filled in from today."""
        with pytest.raises(DateParseError):
            coerce_date(value)

    def test_wrong_type(self):
        with pytest.raises(DateParseError):
            coerce_date(20240102)

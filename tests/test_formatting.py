"""Tests for format_date, parse_date and parse_time."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from utckit import UTCError, format_date, parse_date, parse_time


@pytest.mark.unit
class TestFormatDate:
    """Tests for format_date."""

    def test_formats_aware_utc_datetime(self) -> None:
        """Test that a UTC datetime formats to the fixed string form."""
        result = format_date(datetime(2024, 10, 24, 10, 0, 0, tzinfo=UTC))
        assert result == "2024-10-24 10:00:00"

    def test_converts_other_offsets_to_utc(self) -> None:
        """Test that aware non-UTC datetimes are rendered in UTC."""
        plus_two = timezone(timedelta(hours=2))
        assert format_date(datetime(2024, 10, 24, 1, 0, 0, tzinfo=plus_two)) == (
            "2024-10-23 23:00:00"
        )
        tokyo = datetime(2024, 6, 15, 12, 0, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        assert format_date(tokyo) == "2024-06-15 03:00:00"

    def test_naive_datetime_is_taken_as_utc(self) -> None:
        assert format_date(datetime(2024, 10, 24, 10, 0, 0)) == "2024-10-24 10:00:00"

    def test_truncates_microseconds(self) -> None:
        result = format_date(datetime(2024, 10, 24, 10, 0, 0, 999999, tzinfo=UTC))
        assert result == "2024-10-24 10:00:00"

    def test_result_has_fixed_length(self) -> None:
        assert len(format_date(datetime(1, 1, 1))) == 19

    @pytest.mark.parametrize(
        "value",
        ["2024-10-24T10:00:00Z", None, 1729764000, date(2024, 10, 24)],
    )
    def test_rejects_non_datetime(self, value: object) -> None:
        """Test that strings, numbers and plain dates are rejected."""
        with pytest.raises(UTCError, match="Invalid date object"):
            format_date(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        [
            datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1))),
            datetime(9999, 12, 31, 23, 30, tzinfo=timezone(timedelta(hours=-1))),
        ],
    )
    def test_rejects_aware_datetime_outside_utc_range(self, value: datetime) -> None:
        """Test that a UTC reading before year 1 or after 9999 is a UTCError."""
        with pytest.raises(UTCError, match="Datetime out of range"):
            format_date(value)


@pytest.mark.unit
class TestParseParts:
    """Tests for parse_date / parse_time."""

    def test_parse_date(self) -> None:
        assert parse_date("2024-10-24 10:00:00") == "2024-10-24"

    def test_parse_time(self) -> None:
        assert parse_time("2024-10-24 10:00:00") == "10:00:00"

    @pytest.mark.parametrize("value", ["invalid-datetime", "2024-02-30 10:00:00", 123])
    def test_parse_date_rejects_invalid(self, value: object) -> None:
        with pytest.raises(UTCError, match="Invalid datetime"):
            parse_date(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["invalid-datetime", "2024-01-01 25:00:00", None])
    def test_parse_time_rejects_invalid(self, value: object) -> None:
        with pytest.raises(UTCError, match="Invalid datetime"):
            parse_time(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        ["2024-10-24 10:00:00", "0001-01-01 00:00:00", "2024-02-29 23:59:59"],
    )
    def test_parts_join_back_to_original(self, value: str) -> None:
        assert f"{parse_date(value)} {parse_time(value)}" == value

"""Tests for the get_* accessors."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from utckit import (
    UTCError,
    fixed_clock,
    get_date,
    get_datetime,
    get_day,
    get_hour,
    get_minute,
    get_month,
    get_second,
    get_time,
    get_year,
)
from utckit.clock import Clock

SAMPLE = "2024-06-15 12:00:00"


@pytest.mark.unit
class TestExplicitDatetime:
    """Accessors given a datetime string."""

    def test_parts(self) -> None:
        assert get_datetime(SAMPLE) == SAMPLE
        assert get_date(SAMPLE) == "2024-06-15"
        assert get_time(SAMPLE) == "12:00:00"

    def test_fields(self) -> None:
        value = "2024-06-15 12:34:56"
        assert get_year(value) == 2024
        assert get_month(value) == 5  # June, zero-based
        assert get_day(value) == 15
        assert get_hour(value) == 12
        assert get_minute(value) == 34
        assert get_second(value) == 56

    def test_month_bounds(self) -> None:
        assert get_month("2024-01-01 00:00:00") == 0
        assert get_month("2024-12-31 00:00:00") == 11

    @pytest.mark.parametrize(
        "getter",
        [
            get_datetime,
            get_date,
            get_time,
            get_year,
            get_month,
            get_day,
            get_hour,
            get_minute,
            get_second,
        ],
    )
    @pytest.mark.parametrize("value", ["invalid-datetime", "2024-02-30 00:00:00", 42])
    def test_rejects_invalid_datetime(self, getter, value: object) -> None:
        with pytest.raises(UTCError, match="Invalid datetime"):
            getter(value)


@pytest.mark.unit
class TestClockDefault:
    """Accessors with the datetime omitted read the injected clock."""

    def test_reads_fixed_clock(self, clock: Clock) -> None:
        assert get_datetime(clock=clock) == "2024-06-15 12:34:56"
        assert get_date(clock=clock) == "2024-06-15"
        assert get_time(clock=clock) == "12:34:56"
        assert get_year(clock=clock) == 2024
        assert get_month(clock=clock) == 5
        assert get_day(clock=clock) == 15
        assert get_hour(clock=clock) == 12
        assert get_minute(clock=clock) == 34
        assert get_second(clock=clock) == 56

    def test_aware_clock_is_converted_to_utc(self) -> None:
        minus_five = timezone(timedelta(hours=-5))
        clock = fixed_clock(datetime(2024, 12, 31, 22, 0, 0, tzinfo=minus_five))
        assert get_datetime(clock=clock) == "2025-01-01 03:00:00"
        assert get_year(clock=clock) == 2025

    def test_explicit_datetime_ignores_clock(self, clock: Clock) -> None:
        assert get_year("1999-01-01 00:00:00", clock=clock) == 1999

    def test_clock_returning_non_datetime_raises(self) -> None:
        with pytest.raises(UTCError, match="expected datetime"):
            get_datetime(clock=lambda: "2024-06-15 12:00:00")  # type: ignore[arg-type,return-value]

    def test_aware_clock_outside_utc_range_raises(self) -> None:
        clock = fixed_clock(datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1))))
        with pytest.raises(UTCError, match="Datetime out of range"):
            get_datetime(clock=clock)
        with pytest.raises(UTCError, match="Datetime out of range"):
            get_year(clock=clock)

    def test_system_clock_is_current_utc(self) -> None:
        """Test that the default clock reports the current UTC time."""
        before = datetime.now(UTC).replace(microsecond=0, tzinfo=None)
        result = datetime.strptime(get_datetime(), "%Y-%m-%d %H:%M:%S")
        after = datetime.now(UTC).replace(tzinfo=None)
        assert before <= result <= after

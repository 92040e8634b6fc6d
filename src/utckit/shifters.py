"""Move a UTC datetime string forward (add) or backward (remove).

The amount is checked before the datetime. Years and days accept zero;
months, hours, minutes and seconds must be strictly positive. The optional
datetime defaults to the current instant read from ``clock``.
"""

from __future__ import annotations

from typing import Any

from .clock import Clock
from .errors import invalid
from .formatting import instant_or_now
from .utils.instant import shift_field, to_string
from .utils.validate import is_int

# Smallest accepted amount per unit
_MIN_AMOUNT: dict[str, int] = {
    "year": 0,
    "month": 1,
    "day": 0,
    "hour": 1,
    "minute": 1,
    "second": 1,
}


def _shift(
    field: str,
    amount: Any,
    datetime: str | None,
    clock: Clock | None,
    *,
    sign: int,
) -> str:
    if not is_int(amount) or amount < _MIN_AMOUNT[field]:
        raise invalid(f"number of {field}s", amount)
    instant = instant_or_now(datetime, clock)
    return to_string(shift_field(instant, field, sign * amount))


def add_years(years: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Add years, keeping month and day (Feb 29 may roll to Mar 1).

    Args:
        years: Number of years to add, 0 or more.
        datetime: Starting datetime string; defaults to now.
        clock: Clock read when ``datetime`` is omitted.

    Returns:
        Shifted datetime string.

    Raises:
        UTCError: If ``years`` is not a non-negative int, ``datetime`` is
            invalid, or the result cannot be represented.

    Example:
        >>> add_years(1, "2024-01-01 00:00:00")
        '2025-01-01 00:00:00'
    """
    return _shift("year", years, datetime, clock, sign=1)


def add_months(months: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Add months (1 or more), carrying days that overflow the target month.

    Example:
        >>> add_months(1, "2024-01-31 00:00:00")
        '2024-03-02 00:00:00'
    """
    return _shift("month", months, datetime, clock, sign=1)


def add_days(days: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Add days (0 or more)."""
    return _shift("day", days, datetime, clock, sign=1)


def add_hours(hours: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Add hours (1 or more)."""
    return _shift("hour", hours, datetime, clock, sign=1)


def add_minutes(minutes: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    return _shift("minute", minutes, datetime, clock, sign=1)


def add_seconds(seconds: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    return _shift("second", seconds, datetime, clock, sign=1)


def remove_years(years: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Subtract years (0 or more).

    Example:
        >>> remove_years(1, "2024-01-01 00:00:00")
        '2023-01-01 00:00:00'
    """
    return _shift("year", years, datetime, clock, sign=-1)


def remove_months(months: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Subtract months (1 or more), carrying days that overflow the target month.

    Example:
        >>> remove_months(1, "2024-03-31 00:00:00")
        '2024-03-02 00:00:00'
    """
    return _shift("month", months, datetime, clock, sign=-1)


def remove_days(days: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Subtract days (0 or more)."""
    return _shift("day", days, datetime, clock, sign=-1)


def remove_hours(hours: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Subtract hours (1 or more)."""
    return _shift("hour", hours, datetime, clock, sign=-1)


def remove_minutes(minutes: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    return _shift("minute", minutes, datetime, clock, sign=-1)


def remove_seconds(seconds: int, datetime: str | None = None, *, clock: Clock | None = None) -> str:
    return _shift("second", seconds, datetime, clock, sign=-1)

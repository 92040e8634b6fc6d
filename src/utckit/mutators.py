"""Replace one field of a UTC datetime string.

Only the nominal range of the new value is checked. A day that does not
exist in the month (31 in November) is not rejected: it rolls forward into
the next month, the same way ``datetime`` + ``timedelta`` would carry it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .errors import invalid
from .formatting import parse_instant
from .utils.instant import replace_field, to_string
from .utils.validate import (
    is_day,
    is_hour,
    is_minute,
    is_month_index,
    is_second,
    is_year,
)


def _set_field(
    field: str,
    datetime: str,
    value: Any,
    check: Callable[[Any], bool],
) -> str:
    instant = parse_instant(datetime)
    if not check(value):
        raise invalid(field, value)
    return to_string(replace_field(instant, field, value))


def set_year(datetime: str, year: int) -> str:
    """Set the year, keeping every other field.

    Feb 29 moved into a non-leap year becomes Mar 1.

    Args:
        datetime: Datetime string ``YYYY-MM-DD hh:mm:ss``.
        year: New year, 0-9999.

    Returns:
        New datetime string.

    Raises:
        UTCError: If ``datetime`` is invalid, ``year`` is out of range, or the
            result cannot be represented.

    Example:
        >>> set_year("2024-11-27 10:00:00", 2025)
        '2025-11-27 10:00:00'
    """
    return _set_field("year", datetime, year, is_year)


def set_month(datetime: str, month: int) -> str:
    """Set the zero-based month (0 = January, 11 = December).

    Example:
        >>> set_month("2024-11-27 10:00:00", 0)
        '2024-01-27 10:00:00'
    """
    return _set_field("month", datetime, month, is_month_index)


def set_day(datetime: str, day: int) -> str:
    """Set the day of month (1-31), carrying past the end of short months.

    Example:
        >>> set_day("2024-11-27 10:00:00", 31)
        '2024-12-01 10:00:00'
    """
    return _set_field("day", datetime, day, is_day)


def set_hour(datetime: str, hour: int) -> str:
    """Set the hour (0-23)."""
    return _set_field("hour", datetime, hour, is_hour)


def set_minute(datetime: str, minute: int) -> str:
    """Set the minute (0-59)."""
    return _set_field("minute", datetime, minute, is_minute)


def set_second(datetime: str, second: int) -> str:
    """Set the second (0-59)."""
    return _set_field("second", datetime, second, is_second)

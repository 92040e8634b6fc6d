"""Validation predicates for datetime strings and calendar field values.

Every public operation is gated by these checks so malformed input never
reaches calendar arithmetic. All predicates are pure and total: they return
``False`` for anything unexpected (including non-string or non-int input)
and never raise.
"""

from __future__ import annotations

import calendar
from typing import Any

from ..global_config import (
    DATE_PATTERN,
    DATETIME_PATTERN,
    MAX_YEAR,
    MIN_YEAR,
    TIME_PATTERN,
)


def is_int(value: Any) -> bool:
    """Return True for a real integer. ``bool`` does not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_full_str(value: Any) -> bool:
    """Return True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def is_year(value: Any) -> bool:
    return is_int(value) and MIN_YEAR <= value <= MAX_YEAR


def is_month_index(value: Any) -> bool:
    """Return True for a zero-based month (0 = January, 11 = December)."""
    return is_int(value) and 0 <= value <= 11


def is_day(value: Any) -> bool:
    """Return True for a nominal day of month (1-31).

    Month length is not checked here; setters let calendar carry handle days
    that do not exist in the target month.
    """
    return is_int(value) and 1 <= value <= 31


def is_hour(value: Any) -> bool:
    return is_int(value) and 0 <= value <= 23


def is_minute(value: Any) -> bool:
    return is_int(value) and 0 <= value <= 59


def is_second(value: Any) -> bool:
    return is_int(value) and 0 <= value <= 59


def _is_calendar_date(year: int, month: int, day: int) -> bool:
    # datetime cannot represent year 0, so neither can a datetime string
    if year < 1 or not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def is_date_string(value: Any) -> bool:
    """Return True for a real calendar date in ``YYYY-MM-DD`` form.

    Args:
        value: Candidate value.

    Returns:
        True if ``value`` is a string of the exact form and the date exists
        (``2024-02-30`` and ``2023-02-29`` are rejected).
    """
    if not isinstance(value, str):
        return False
    match = DATE_PATTERN.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    return _is_calendar_date(year, month, day)


def is_time_string(value: Any) -> bool:
    """Return True for a wall-clock time in ``hh:mm:ss`` form."""
    if not isinstance(value, str):
        return False
    match = TIME_PATTERN.fullmatch(value)
    if match is None:
        return False
    hour, minute, second = (int(part) for part in match.groups())
    return is_hour(hour) and is_minute(minute) and is_second(second)


def is_datetime_string(value: Any) -> bool:
    """Return True for a valid ``YYYY-MM-DD hh:mm:ss`` datetime string.

    The string must be exactly 19 characters, zero-padded, with every field in
    range and the date part resolving to a real calendar date.

    Args:
        value: Candidate value. Non-strings are rejected, not raised on.

    Returns:
        True if ``value`` is a valid datetime string.
    """
    if not isinstance(value, str):
        return False
    match = DATETIME_PATTERN.fullmatch(value)
    if match is None:
        return False
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    return (
        _is_calendar_date(year, month, day)
        and is_hour(hour)
        and is_minute(minute)
        and is_second(second)
    )

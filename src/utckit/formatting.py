"""Formatting and parsing of ``YYYY-MM-DD hh:mm:ss`` datetime strings.

``format_date`` is the canonical sink: every operation that returns a
datetime string goes through the same formatting. ``parse_instant`` and
``instant_or_now`` are the canonical sources used by the other modules.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .clock import Clock, read_clock
from .errors import UTCError, invalid
from .global_config import DATE_LENGTH, TIME_LENGTH
from .utils.instant import to_instant, to_naive_utc, to_string
from .utils.validate import is_datetime_string


def format_date(date: datetime) -> str:
    """Format a datetime as a string in the format ``YYYY-MM-DD hh:mm:ss``.

    Aware datetimes are converted to UTC first; naive datetimes are taken to
    be UTC already. Microseconds are truncated.

    Args:
        date: The datetime to format.

    Returns:
        19-character UTC datetime string.

    Raises:
        UTCError: If ``date`` is not a datetime object, or its UTC reading
            falls outside years 1-9999.

    Example:
        >>> format_date(datetime(2024, 10, 24, 10, 0, tzinfo=UTC))
        '2024-10-24 10:00:00'
    """
    if not isinstance(date, datetime):
        raise UTCError(f"Invalid date object: {date!s}")

    return to_string(to_naive_utc(date))


def parse_date(datetime_str: str) -> str:
    """Extract the date part ``YYYY-MM-DD`` from a datetime string.

    Raises:
        UTCError: If ``datetime_str`` is not a valid datetime string.

    Example:
        >>> parse_date("2024-10-24 10:00:00")
        '2024-10-24'
    """
    if not is_datetime_string(datetime_str):
        raise invalid("datetime", datetime_str)
    return datetime_str[:DATE_LENGTH]


def parse_time(datetime_str: str) -> str:
    """Extract the time part ``hh:mm:ss`` from a datetime string.

    Raises:
        UTCError: If ``datetime_str`` is not a valid datetime string.

    Example:
        >>> parse_time("2024-10-24 10:00:00")
        '10:00:00'
    """
    if not is_datetime_string(datetime_str):
        raise invalid("datetime", datetime_str)
    return datetime_str[-TIME_LENGTH:]


def parse_instant(datetime_str: Any) -> datetime:
    """Validate a datetime string and return it as a naive UTC datetime.

    Raises:
        UTCError: If ``datetime_str`` is not a valid datetime string.
    """
    if not is_datetime_string(datetime_str):
        raise invalid("datetime", datetime_str)
    return to_instant(datetime_str)


def instant_or_now(datetime_str: Any = None, clock: Clock | None = None) -> datetime:
    """Resolve an optional datetime argument to an instant.

    ``None`` means "now" and reads ``clock``; anything else must be a valid
    datetime string.
    """
    if datetime_str is None:
        return read_clock(clock)
    return parse_instant(datetime_str)

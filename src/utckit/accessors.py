"""Read single fields or parts of a UTC datetime string.

Each getter takes an optional datetime string. When it is omitted the
current instant is read from ``clock`` (the system clock by default).
"""

from __future__ import annotations

from .clock import Clock
from .formatting import instant_or_now
from .global_config import DATE_LENGTH, TIME_LENGTH
from .utils.instant import decompose, to_string


def get_datetime(datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Return the datetime as ``YYYY-MM-DD hh:mm:ss`` (current UTC if omitted).

    Raises:
        UTCError: If ``datetime`` is given and is not a valid datetime string.
    """
    return to_string(instant_or_now(datetime, clock))


def get_date(datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Return the date part ``YYYY-MM-DD`` (current UTC date if omitted).

    Raises:
        UTCError: If ``datetime`` is given and is not a valid datetime string.
    """
    return get_datetime(datetime, clock=clock)[:DATE_LENGTH]


def get_time(datetime: str | None = None, *, clock: Clock | None = None) -> str:
    """Return the time part ``hh:mm:ss`` (current UTC time if omitted).

    Raises:
        UTCError: If ``datetime`` is given and is not a valid datetime string.
    """
    return get_datetime(datetime, clock=clock)[-TIME_LENGTH:]


def _get_field(field: str, datetime: str | None, clock: Clock | None) -> int:
    return decompose(instant_or_now(datetime, clock))[field]


def get_year(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    """Return the four-digit year."""
    return _get_field("year", datetime, clock)


def get_month(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    """Return the zero-based month (0 = January, 11 = December)."""
    return _get_field("month", datetime, clock)


def get_day(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    """Return the day of month (1-31)."""
    return _get_field("day", datetime, clock)


def get_hour(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    return _get_field("hour", datetime, clock)


def get_minute(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    return _get_field("minute", datetime, clock)


def get_second(datetime: str | None = None, *, clock: Clock | None = None) -> int:
    return _get_field("second", datetime, clock)

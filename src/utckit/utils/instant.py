"""Conversions between datetime strings and internal instants.

An instant is a naive ``datetime`` whose fields are the UTC wall-clock
reading. It never leaves the library through the string-based API; every
successful operation ends in :func:`to_string`.

Field arithmetic follows calendar-carry rules: month 12 rolls into January of
the next year, day 31 of a 30-day month rolls into the 1st of the next month,
and so on for every field.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from ..errors import UTCError
from ..global_config import DATETIME_FORMAT

logger = logging.getLogger(__name__)


def to_instant(value: str) -> datetime:
    """Parse a validated datetime string into a naive UTC datetime.

    Args:
        value: String in ``YYYY-MM-DD hh:mm:ss`` format. Callers validate
            first; malformed input surfaces as ValueError from strptime.

    Returns:
        Naive datetime holding the same fields.
    """
    return datetime.strptime(value, DATETIME_FORMAT)


def to_string(instant: datetime) -> str:
    """Format an instant as ``YYYY-MM-DD hh:mm:ss``.

    Microseconds are dropped. isoformat() is used rather than strftime so that
    years below 1000 stay zero-padded to four digits on every platform.
    """
    return instant.replace(microsecond=0).isoformat(sep=" ", timespec="seconds")


def to_naive_utc(instant: datetime) -> datetime:
    """Convert an aware datetime to a naive UTC one; naive values pass through.

    Raises:
        UTCError: If the UTC reading falls outside years 1-9999.
    """
    if instant.tzinfo is None:
        return instant
    try:
        return instant.astimezone(UTC).replace(tzinfo=None)
    except (OverflowError, ValueError) as e:
        raise UTCError(f"Datetime out of range: {e}") from e


def decompose(instant: datetime) -> dict[str, int]:
    """Split an instant into named fields, with a zero-based month."""
    return {
        "year": instant.year,
        "month": instant.month - 1,
        "day": instant.day,
        "hour": instant.hour,
        "minute": instant.minute,
        "second": instant.second,
    }


def compose(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Build an instant from fields that may lie outside their ranges.

    Out-of-range values carry into the next larger field: ``month=12`` is
    January of ``year + 1``, ``day=31`` in April is May 1st, ``month=-1`` is
    December of ``year - 1``, ``hour=24`` is midnight of the next day.

    Args:
        year: Calendar year.
        month: Zero-based month, any integer.
        day: Day of month, any integer (1 is the first day).
        hour: Hour, any integer.
        minute: Minute, any integer.
        second: Second, any integer.

    Returns:
        Normalized naive datetime.

    Raises:
        UTCError: If the normalized result falls outside years 0001-9999.
    """
    carry_years, month_index = divmod(month, 12)
    try:
        first_of_month = datetime(year + carry_years, month_index + 1, 1)
        return first_of_month + timedelta(
            days=day - 1, hours=hour, minutes=minute, seconds=second
        )
    except (ValueError, OverflowError) as e:
        logger.debug(
            "Calendar carry out of range: year=%s month=%s day=%s", year, month, day
        )
        raise UTCError(f"Datetime out of range: {e}") from e


def replace_field(instant: datetime, field: str, value: int) -> datetime:
    """Replace one field of ``instant`` and normalize with calendar carry.

    Args:
        instant: Source instant.
        field: One of year, month (zero-based), day, hour, minute, second.
        value: New field value.

    Returns:
        New normalized instant; ``instant`` is untouched.
    """
    fields = decompose(instant)
    fields[field] = value
    return compose(**fields)


def shift_field(instant: datetime, field: str, amount: int) -> datetime:
    """Add ``amount`` (may be negative) to one field of ``instant``.

    Years and months go through :func:`compose`, so Jan 31 plus one month
    lands in early March. Smaller units are exact elapsed time, which in UTC
    is the same thing as carrying the field.

    Raises:
        UTCError: If the result falls outside years 0001-9999.
    """
    if field in ("year", "month"):
        fields = decompose(instant)
        fields[field] += amount
        return compose(**fields)

    try:
        return instant + timedelta(**{f"{field}s": amount})
    except OverflowError as e:
        raise UTCError(f"Datetime out of range: {e}") from e

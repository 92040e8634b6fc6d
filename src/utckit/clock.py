"""Clock sources for operations that default to "now".

Every function that falls back to the current time accepts a ``clock``
keyword. A clock is any zero-argument callable returning a ``datetime``;
aware values are converted to UTC and naive values are taken as UTC already.
Tests pass :func:`fixed_clock` instead of reading the wall clock.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from .errors import UTCError
from .utils.instant import to_naive_utc

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports ``instant``.

    Args:
        instant: The datetime the clock should return.

    Returns:
        Zero-argument callable returning ``instant``.
    """

    def _clock() -> datetime:
        return instant

    return _clock


def read_clock(clock: Clock | None = None) -> datetime:
    """Read ``clock`` (or the system clock) as a naive UTC datetime.

    Microseconds are dropped; the library works at second precision.

    Args:
        clock: Clock to read. Defaults to :func:`utc_now`.

    Returns:
        Naive datetime whose fields are the UTC wall-clock reading.

    Raises:
        UTCError: If the clock returns something other than a datetime, or
            an aware value whose UTC reading is out of range.
    """
    now = (clock or utc_now)()
    if not isinstance(now, datetime):
        raise UTCError(f"Clock returned {type(now).__name__}, expected datetime")
    return to_naive_utc(now).replace(microsecond=0)

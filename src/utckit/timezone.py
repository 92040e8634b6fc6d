"""Timezone resolution and civil-time to UTC conversion.

Conversion uses offset differencing rather than zone transition tables: the
civil reading is pinned to an instant in a reference zone, rendered in the
target zone, and the difference between the two readings is the zone's UTC
offset at that instant. Only ``zoneinfo``'s "render this instant in zone X"
is needed; DST rules come from the IANA database it reads.

Local times skipped by a DST spring-forward are not rejected: the offset in
force just after the gap is used, so ``2024-03-31 01:30:00`` in
``Europe/London`` becomes ``2024-03-31 00:30:00`` UTC.

The offset is sampled at the reading taken as a UTC instant, so for the first
|offset| hours after a transition the pre-transition offset still applies:
``2024-03-10 03:30:00`` in ``America/New_York`` becomes ``08:30:00`` UTC
rather than ``07:30:00``. Readings later on the transition day use the new
offset.
"""

from __future__ import annotations

import logging
from datetime import UTC, timedelta
from datetime import datetime as DateTime
from typing import Any
from zoneinfo import ZoneInfo

from .errors import UTCError, describe, from_exception, invalid
from .formatting import parse_instant
from .global_config import REFERENCE_TZ
from .utils.instant import to_string
from .utils.validate import is_datetime_string, is_full_str

logger = logging.getLogger(__name__)


def resolve_zone(timezone: Any) -> ZoneInfo:
    """Return the ``ZoneInfo`` for an IANA timezone name.

    Args:
        timezone: IANA zone identifier (e.g. "Europe/London").

    Returns:
        ZoneInfo instance (cached by zoneinfo).

    Raises:
        UTCError: If ``timezone`` is not a non-empty string or names no zone
            known to the tz database.
    """
    if not is_full_str(timezone):
        raise invalid("timezone", timezone)

    try:
        return ZoneInfo(timezone)
    except Exception as e:  # noqa: BLE001
        raise UTCError(f"Invalid timezone: {timezone} ({describe(e)})") from e


def utc_offset(timezone: str, datetime_str: str) -> timedelta:
    """Return the UTC offset of ``timezone`` at a UTC instant.

    Args:
        timezone: IANA zone identifier.
        datetime_str: UTC datetime string ``YYYY-MM-DD hh:mm:ss``.

    Returns:
        Offset as timedelta (positive east of Greenwich, DST included).

    Raises:
        UTCError: If either argument is invalid.
    """
    instant = parse_instant(datetime_str).replace(tzinfo=UTC)
    zone = resolve_zone(timezone)
    offset = instant.astimezone(zone).utcoffset()
    if offset is None:
        raise UTCError(f"Timezone {timezone} reports no UTC offset")
    return offset


def _offset_between(local: DateTime, zone: ZoneInfo, reference: ZoneInfo) -> timedelta:
    """Difference between a reading in ``reference`` and the same instant in ``zone``."""
    pinned = local.replace(tzinfo=reference)
    rendered = pinned.astimezone(zone).replace(tzinfo=None)
    repinned = rendered.replace(tzinfo=reference)
    return repinned.astimezone(UTC) - pinned.astimezone(UTC)


def to_utc(
    datetime: str,
    timezone: str,
    *,
    reference_tz: str = REFERENCE_TZ,
) -> str:
    """Convert a civil datetime in ``timezone`` to a UTC datetime string.

    The fields of ``datetime`` are the wall-clock reading in ``timezone``.

    Args:
        datetime: Civil datetime string ``YYYY-MM-DD hh:mm:ss``.
        timezone: IANA zone the reading belongs to.
        reference_tz: Zone used to pin the reading to an instant while the
            offset is measured. Defaults to UTC, which makes the result
            independent of the host's local zone.

    Returns:
        UTC datetime string.

    Raises:
        UTCError: If ``datetime`` or ``timezone`` is invalid, or the
            conversion fails (message from the underlying error).

    Example:
        >>> to_utc("2024-06-15 12:00:00", "Asia/Tokyo")
        '2024-06-15 03:00:00'
    """
    if not is_datetime_string(datetime):
        raise invalid("datetime", datetime)
    if not is_full_str(timezone):
        raise invalid("timezone", timezone)

    try:
        local = parse_instant(datetime)
        zone = resolve_zone(timezone)
        reference = resolve_zone(reference_tz)
        offset = _offset_between(local, zone, reference)
        logger.debug("Offset of %s at %s: %s", timezone, datetime, offset)
        pinned = local.replace(tzinfo=reference)
        return to_string((pinned.astimezone(UTC) - offset).replace(tzinfo=None))
    except UTCError:
        raise
    except Exception as e:  # noqa: BLE001
        raise from_exception(e) from e

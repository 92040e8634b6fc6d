"""
utckit core package.

Time-zone-agnostic helpers for datetimes kept as fixed-format strings
``YYYY-MM-DD hh:mm:ss`` interpreted as UTC:
- Get, set and shift (add/remove) calendar fields
- Parse and format the fixed string form
- Convert a civil time in a named IANA zone to UTC (`to_utc`)
- A Typer-based CLI over the same functions (`utckit.cli`)

Configuration:
- Shared constants (format, field bounds, reference zone) live in
  `utckit.global_config`.
"""

from .accessors import (
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
from .clock import Clock, fixed_clock, utc_now
from .errors import UTCError
from .facade import UTC
from .formatting import format_date, parse_date, parse_time
from .mutators import set_day, set_hour, set_minute, set_month, set_second, set_year
from .shifters import (
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    remove_days,
    remove_hours,
    remove_minutes,
    remove_months,
    remove_seconds,
    remove_years,
)
from .timezone import resolve_zone, to_utc, utc_offset
from .utils.validate import is_datetime_string

__all__ = [
    "UTC",
    "UTCError",
    # Clock injection
    "Clock",
    "fixed_clock",
    "utc_now",
    # Formatting / parsing
    "format_date",
    "is_datetime_string",
    "parse_date",
    "parse_time",
    # Getters
    "get_date",
    "get_datetime",
    "get_day",
    "get_hour",
    "get_minute",
    "get_month",
    "get_second",
    "get_time",
    "get_year",
    # Setters
    "set_day",
    "set_hour",
    "set_minute",
    "set_month",
    "set_second",
    "set_year",
    # Shifters
    "add_days",
    "add_hours",
    "add_minutes",
    "add_months",
    "add_seconds",
    "add_years",
    "remove_days",
    "remove_hours",
    "remove_minutes",
    "remove_months",
    "remove_seconds",
    "remove_years",
    # Timezones
    "resolve_zone",
    "to_utc",
    "utc_offset",
]

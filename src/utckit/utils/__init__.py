"""Utility modules.

This package provides the validation predicates and instant conversions
shared by every public operation.
"""

from .instant import (
    compose,
    decompose,
    replace_field,
    shift_field,
    to_instant,
    to_naive_utc,
    to_string,
)
from .validate import (
    is_date_string,
    is_datetime_string,
    is_day,
    is_full_str,
    is_hour,
    is_int,
    is_minute,
    is_month_index,
    is_second,
    is_time_string,
    is_year,
)

__all__ = [
    # Instant conversions (calendar-carry arithmetic)
    "compose",
    "decompose",
    "replace_field",
    "shift_field",
    "to_instant",
    "to_naive_utc",
    "to_string",
    # Validation predicates
    "is_date_string",
    "is_datetime_string",
    "is_day",
    "is_full_str",
    "is_hour",
    "is_int",
    "is_minute",
    "is_month_index",
    "is_second",
    "is_time_string",
    "is_year",
]

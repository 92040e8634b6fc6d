"""Namespaced access to the public functions.

``UTC.get.year(...)`` is the same call as ``get_year(...)``; the groups only
organise the free functions. Groups are frozen, so they cannot be rebound.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from . import accessors, mutators, shifters
from .formatting import format_date, parse_date, parse_time
from .timezone import to_utc


@dataclass(frozen=True)
class Getters:
    date: Callable[..., str]
    time: Callable[..., str]
    year: Callable[..., int]
    month: Callable[..., int]
    day: Callable[..., int]
    hour: Callable[..., int]
    minute: Callable[..., int]
    second: Callable[..., int]
    datetime: Callable[..., str]


@dataclass(frozen=True)
class Setters:
    year: Callable[..., str]
    month: Callable[..., str]
    day: Callable[..., str]
    hour: Callable[..., str]
    minute: Callable[..., str]
    second: Callable[..., str]


@dataclass(frozen=True)
class Shifters:
    year: Callable[..., str]
    month: Callable[..., str]
    day: Callable[..., str]
    hour: Callable[..., str]
    minute: Callable[..., str]
    second: Callable[..., str]


class UTC:
    """Facade grouping every operation by what it does to a datetime."""

    to_utc = staticmethod(to_utc)
    format_date = staticmethod(format_date)
    parse_date = staticmethod(parse_date)
    parse_time = staticmethod(parse_time)

    get = Getters(
        date=accessors.get_date,
        time=accessors.get_time,
        year=accessors.get_year,
        month=accessors.get_month,
        day=accessors.get_day,
        hour=accessors.get_hour,
        minute=accessors.get_minute,
        second=accessors.get_second,
        datetime=accessors.get_datetime,
    )
    set = Setters(
        year=mutators.set_year,
        month=mutators.set_month,
        day=mutators.set_day,
        hour=mutators.set_hour,
        minute=mutators.set_minute,
        second=mutators.set_second,
    )
    future = Shifters(
        year=shifters.add_years,
        month=shifters.add_months,
        day=shifters.add_days,
        hour=shifters.add_hours,
        minute=shifters.add_minutes,
        second=shifters.add_seconds,
    )
    past = Shifters(
        year=shifters.remove_years,
        month=shifters.remove_months,
        day=shifters.remove_days,
        hour=shifters.remove_hours,
        minute=shifters.remove_minutes,
        second=shifters.remove_seconds,
    )

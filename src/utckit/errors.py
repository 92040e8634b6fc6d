"""Exception types for the project."""

from __future__ import annotations

from typing import Any


class UTCError(Exception):
    """Raised for every utckit failure.

    Covers invalid datetime strings, invalid field values, invalid shift
    amounts, invalid timezone names, non-datetime objects passed to the
    formatter, and calendar/timezone failures raised underneath. Callers catch
    this type; the message is for humans only.
    """


def invalid(kind: str, value: Any) -> UTCError:
    """Build a UTCError for a rejected input value.

    Args:
        kind: What was being checked (e.g. "datetime", "month",
            "number of days").
        value: The offending value, rendered with ``str()``.

    Returns:
        UTCError with message ``Invalid <kind>: <value>``.
    """
    return UTCError(f"Invalid {kind}: {value!s}")


def describe(error: BaseException) -> str:
    """Return the human message of an exception.

    KeyError subclasses (such as ZoneInfoNotFoundError) quote their message
    in ``str()``; the bare argument is used instead. Exceptions without a
    message fall back to their type name.
    """
    if len(error.args) == 1:
        message = str(error.args[0])
    else:
        message = str(error)
    return message or type(error).__name__


def from_exception(error: BaseException) -> UTCError:
    """Map an underlying calendar/zoneinfo exception to a UTCError.

    The original message is passed through unchanged.
    """
    return UTCError(describe(error))

"""CLI commands that read datetimes: now, get, validate."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from ...accessors import get_datetime
from ...facade import UTC
from ...utils.validate import is_datetime_string
from ..base import BaseCLI, format_result


class Part(str, Enum):
    """Parts of a datetime that ``get`` can extract."""

    datetime = "datetime"
    date = "date"
    time = "time"
    year = "year"
    month = "month"
    day = "day"
    hour = "hour"
    minute = "minute"
    second = "second"


def now_command() -> None:
    """Print the current UTC datetime."""
    cli = BaseCLI("read")
    cli.handle_cli_operation(operation="now", op_callable=get_datetime)


def get_command(
    part: Annotated[Part, typer.Argument(help="Part to extract")],
    datetime: Annotated[
        str | None,
        typer.Argument(help="Datetime 'YYYY-MM-DD hh:mm:ss' (defaults to now)"),
    ] = None,
) -> None:
    """Print one part of a datetime. Months are zero-based (0 = January)."""
    cli = BaseCLI("read")
    getter = getattr(UTC.get, part.value)
    cli.handle_cli_operation(
        operation=f"get {part.value}",
        op_callable=lambda: getter(datetime),
    )


def validate_command(
    datetime: Annotated[str, typer.Argument(help="Candidate datetime string")],
) -> None:
    """Check a datetime string. Exits with code 1 when it is invalid."""
    valid = is_datetime_string(datetime)
    typer.echo(format_result(valid, operation=f"valid datetime: {datetime}"))
    if not valid:
        raise typer.Exit(1)

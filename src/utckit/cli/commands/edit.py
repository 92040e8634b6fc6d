"""CLI commands that derive a new datetime: set, add, remove."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from ...facade import UTC
from ..base import BaseCLI


class Unit(str, Enum):
    """Calendar fields that can be set or shifted."""

    year = "year"
    month = "month"
    day = "day"
    hour = "hour"
    minute = "minute"
    second = "second"


def set_command(
    unit: Annotated[Unit, typer.Argument(help="Field to replace")],
    datetime: Annotated[str, typer.Argument(help="Datetime 'YYYY-MM-DD hh:mm:ss'")],
    value: Annotated[int, typer.Argument(help="New value (month is zero-based)")],
) -> None:
    """Replace one field of a datetime."""
    cli = BaseCLI("edit")
    setter = getattr(UTC.set, unit.value)
    cli.handle_cli_operation(
        operation=f"set {unit.value}",
        op_callable=lambda: setter(datetime, value),
    )


def add_command(
    unit: Annotated[Unit, typer.Argument(help="Unit to add")],
    amount: Annotated[int, typer.Argument(help="How many units")],
    datetime: Annotated[
        str | None,
        typer.Argument(help="Datetime 'YYYY-MM-DD hh:mm:ss' (defaults to now)"),
    ] = None,
) -> None:
    """Move a datetime forward."""
    cli = BaseCLI("edit")
    shifter = getattr(UTC.future, unit.value)
    cli.handle_cli_operation(
        operation=f"add {unit.value}",
        op_callable=lambda: shifter(amount, datetime),
    )


def remove_command(
    unit: Annotated[Unit, typer.Argument(help="Unit to remove")],
    amount: Annotated[int, typer.Argument(help="How many units")],
    datetime: Annotated[
        str | None,
        typer.Argument(help="Datetime 'YYYY-MM-DD hh:mm:ss' (defaults to now)"),
    ] = None,
) -> None:
    """Move a datetime backward."""
    cli = BaseCLI("edit")
    shifter = getattr(UTC.past, unit.value)
    cli.handle_cli_operation(
        operation=f"remove {unit.value}",
        op_callable=lambda: shifter(amount, datetime),
    )

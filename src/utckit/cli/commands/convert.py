"""CLI command converting a civil time in a named zone to UTC."""

from __future__ import annotations

from typing import Annotated

import typer

from ...timezone import to_utc
from ..base import BaseCLI


def to_utc_command(
    datetime: Annotated[
        str, typer.Argument(help="Local wall-clock datetime 'YYYY-MM-DD hh:mm:ss'")
    ],
    zone: Annotated[str, typer.Argument(help="IANA timezone, e.g. Europe/London")],
) -> None:
    """Convert a wall-clock reading in ZONE to UTC."""
    cli = BaseCLI("convert")
    cli.handle_cli_operation(
        operation="to-utc",
        op_callable=lambda: to_utc(datetime, zone),
    )

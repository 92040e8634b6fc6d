from __future__ import annotations

from typing import Annotated

import typer

from .base import configure_logging, get_version, resolve_log_level
from .commands.convert import to_utc_command
from .commands.edit import add_command, remove_command, set_command
from .commands.read import get_command, now_command, validate_command

app = typer.Typer(
    help="UTC datetime strings (YYYY-MM-DD hh:mm:ss): read, edit, shift, convert.",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log debug output to stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the installed version and exit",
        ),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(resolve_log_level(verbose))


app.command("now")(now_command)
app.command("get")(get_command)
app.command("validate")(validate_command)
app.command("set")(set_command)
app.command("add")(add_command)
app.command("remove")(remove_command)
app.command("to-utc")(to_utc_command)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()

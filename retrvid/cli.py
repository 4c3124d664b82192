from __future__ import annotations

import logging
import sys

import click
import typer

from . import __version__
from . import app as runner
from .config import Settings
from .errors import RetrvidError
from .intent import from_inputs
from .logging import configure_logging

# click >= 8.2 raises this for `no_args_is_help` instead of exiting directly.
NoArgsIsHelpError = getattr(click.exceptions, "NoArgsIsHelpError", ())

ABOUT = """retrvid (rid) lets you store and retrieve ids with a lookup name.

The ids are stored in a `toml` file in your default data directory. You can
change the location of this file by setting the `RETRVID_DATA` environment
variable.
"""

app = typer.Typer(add_completion=False)

log = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"retrvid {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True, help=ABOUT)
def retrvid(
    name: str | None = typer.Argument(None, metavar="NAME", help="The name of the id to get."),
    print_id: bool = typer.Option(False, "--print", "-p", help="Print the id on the console."),
    no_copy: bool = typer.Option(
        False,
        "--no-copy",
        "-C",
        help="Do not copy the id to the system clipboard.",
    ),
    list_ids: bool = typer.Option(False, "--list", "-l", help="List all stored id names."),
    add: tuple[str, str] = typer.Option(
        (None, None),
        "--add",
        "-a",
        metavar="NAME ID",
        show_default=False,
        help="Add provided name and id to the database.",
    ),
    remove: str | None = typer.Option(
        None,
        "--remove",
        "-r",
        metavar="NAME",
        help="Remove provided id (name) from the database.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version information.",
    ),
) -> None:
    try:
        intent = from_inputs(
            name=name,
            list_ids=list_ids,
            # typer reports a missing --add as (None, None)
            add=None if add == (None, None) else add,
            remove=remove,
            print_id=print_id,
            no_copy=no_copy,
        )
        runner.run(intent, settings=Settings(), echo=typer.echo)
    except RetrvidError as e:
        log.debug(
            "command failed",
            exc_info=e,
            extra={
                "event_type": "error",
                "category": e.category.value,
                "exit_code": e.exit_code,
            },
        )
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=e.exit_code) from e


def main(args: list[str] | None = None) -> None:
    """Console entry point.

    Parsing errors raised by click are rendered as a single ``error: `` line,
    like every other error.
    """
    configure_logging()
    try:
        code = app(args=args, prog_name="retrvid", standalone_mode=False)
    except NoArgsIsHelpError as e:
        typer.echo(e.format_message())
        code = e.exit_code
    except click.ClickException as e:
        log.debug(
            "usage error",
            extra={"event_type": "error", "category": "usage", "exit_code": e.exit_code},
        )
        typer.echo(f"error: {e.format_message()}", err=True)
        code = e.exit_code
    except click.Abort:
        typer.echo("error: aborted", err=True)
        code = 1
    sys.exit(code)


if __name__ == "__main__":  # pragma: no cover
    main()

"""Command line entry point for httpsql."""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError

from httpsql.core import Dispatcher, Profile, Settings, Writer
from httpsql.log import configure_logging

app = typer.Typer(
    name="httpsql",
    help="Run SQL statements against a query service over HTTP.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Run SQL statements against a query service over HTTP."""


@app.command()
def query(
    query: Annotated[
        str | None,
        typer.Argument(
            help="Query statements to run, a file path or an http(s) url. "
            "Reads standard input when omitted.",
            show_default=False,
        ),
    ] = None,
    profile: Annotated[
        str,
        typer.Option(
            "--profile",
            help="Profile to run queries",
        ),
    ] = Profile.LOCAL.value,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with status 1 when any statement fails",
        ),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
) -> None:
    """Query on the local query service.

    Statements are separated by ';' and run one at a time, in order.

    Examples:

        httpsql query "SELECT 1; SELECT 2"

        httpsql query ./queries.sql

        cat queries.sql | httpsql query
    """
    configure_logging(verbose)

    writer = Writer()
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        writer.write_err(f"Invalid httpsql settings: {e}")
        raise typer.Exit(1) from None

    dispatcher = Dispatcher(settings, writer)
    report = dispatcher.run(query, profile=profile)

    if strict and not report.ok:
        raise typer.Exit(1)

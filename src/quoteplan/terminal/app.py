# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from quoteplan.logger import configure_logging
from quoteplan.terminal import configuration, schedule
from quoteplan.terminal.custom_typer import AlphabeticalAliasedGroup
from quoteplan.view import state as view_state

app = typer.Typer(
    cls=AlphabeticalAliasedGroup,
    help="Quoteplan - Training schedule timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="gantt, g")(schedule.gantt)
app.command(name="layout, l")(schedule.layout)
app.command(name="calendar, cal")(schedule.calendar)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout diagnostics at INFO level"),
    ] = False,
) -> None:
    """
    Quoteplan - Training schedule timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging(logging.INFO)


def run() -> None:
    app()

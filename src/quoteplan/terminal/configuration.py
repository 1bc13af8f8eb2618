# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from quoteplan import configuration
from quoteplan.errors import ConfigurationError
from quoteplan.repository.configuration import CONFIGURATION_REPO
from quoteplan.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "work_on_saturday",
        "✓ Enabled" if config["work_on_saturday"] else "✗ Disabled",
    )
    table.add_row(
        "work_on_sunday",
        "✓ Enabled" if config["work_on_sunday"] else "✗ Disabled",
    )
    table.add_row("cells_per_day", str(config["cells_per_day"]))
    table.add_row("log_level", config["log_level"])
    for key, value in config["layout"].items():
        table.add_row(f"layout.{key}", str(value))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the report header",
        ),
    ] = None,
    work_on_saturday: Annotated[
        Optional[bool],
        typer.Option(
            "--work-on-saturday/--no-work-on-saturday",
            help="Treat day 6 of each week as a work day by default",
        ),
    ] = None,
    work_on_sunday: Annotated[
        Optional[bool],
        typer.Option(
            "--work-on-sunday/--no-work-on-sunday",
            help="Treat day 7 of each week as a work day by default",
        ),
    ] = None,
    cells_per_day: Annotated[
        Optional[int],
        typer.Option("--cells-per-day", min=1, help="Character cells per day column"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="One of DEBUG, INFO, WARNING, ERROR"),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", help="Pixel width of one day column"),
    ] = None,
    daily_hour_limit: Annotated[
        Optional[float],
        typer.Option(
            "--daily-hour-limit",
            help="Working hours that fill one day column; must match the scheduler",
        ),
    ] = None,
    minimum_width: Annotated[
        Optional[float],
        typer.Option("--minimum-width", help="Minimum pixel width of a segment"),
    ] = None,
    months_visible: Annotated[
        Optional[int],
        typer.Option("--months-visible", help="Number of months on the timeline"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Log level must be one of {', '.join(LOG_LEVELS)}",
                param_hint="--log-level",
            )

    layout: dict[str, float] = {}
    if day_width is not None:
        layout["day_width"] = day_width
    if daily_hour_limit is not None:
        layout["daily_hour_limit"] = daily_hour_limit
    if minimum_width is not None:
        layout["minimum_width"] = minimum_width
    if months_visible is not None:
        layout["months_visible"] = months_visible

    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            work_on_saturday=work_on_saturday,
            work_on_sunday=work_on_sunday,
            cells_per_day=cells_per_day,
            log_level=log_level,
            layout=layout or None,
        )
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.flush()
    view()

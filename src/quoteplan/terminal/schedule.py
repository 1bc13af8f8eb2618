# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from quoteplan import configuration
from quoteplan.errors import QuoteplanError
from quoteplan.model.layout import LayoutConfiguration, ScheduleFeed
from quoteplan.repository.configuration import CONFIGURATION_REPO
from quoteplan.repository.segment import SegmentRepository
from quoteplan.service.calendar import build_calendar
from quoteplan.service.layout import compute_layout, resolve_gantt_view
from quoteplan.service.viewport import viewport_for_day
from quoteplan.terminal.parse import parse_day
from quoteplan.view.calendar import calendar_view
from quoteplan.view.export import layout_to_yaml
from quoteplan.view.gantt import gantt_view

console = Console()
error_console = Console(stderr=True)

SegmentFile = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML or JSON file with scheduled task segments",
    ),
]
SaturdayOption = Annotated[
    Optional[bool],
    typer.Option(
        "--saturday/--no-saturday",
        help="Treat day 6 of each week as a work day (defaults to config)",
    ),
]
SundayOption = Annotated[
    Optional[bool],
    typer.Option(
        "--sunday/--no-sunday",
        help="Treat day 7 of each week as a work day (defaults to config)",
    ),
]


def _load_settings(
    saturday: Optional[bool], sunday: Optional[bool]
) -> tuple[LayoutConfiguration, bool, bool]:
    config = CONFIGURATION_REPO.get_config()
    layout_config = configuration.layout_configuration_from(config)
    work_on_saturday = config["work_on_saturday"] if saturday is None else saturday
    work_on_sunday = config["work_on_sunday"] if sunday is None else sunday
    return layout_config, work_on_saturday, work_on_sunday


def _fail(e: QuoteplanError) -> typer.Exit:
    error_console.print(f"[red]Error: {e}[/red]")
    return typer.Exit(1)


def gantt(
    segment_file: SegmentFile,
    saturday: SaturdayOption = None,
    sunday: SundayOption = None,
    scroll_day: Annotated[
        Optional[int],
        typer.Option(
            "--scroll-day",
            "-s",
            parser=parse_day,
            help="First day shown on the timeline (e.g. 15 or d15)",
        ),
    ] = None,
    days: Annotated[
        int,
        typer.Option("--days", "-d", min=1, help="Number of day columns to show"),
    ] = 60,
    cells_per_day: Annotated[
        Optional[int],
        typer.Option(
            "--cells-per-day",
            "-c",
            min=1,
            help="Character cells per day column (defaults to config)",
        ),
    ] = None,
    left_width: Annotated[
        int,
        typer.Option("--left-width", "-lw", min=8, help="Width of the label column"),
    ] = 32,
) -> None:
    """Render the training schedule as a gantt chart."""
    try:
        layout_config, work_on_saturday, work_on_sunday = _load_settings(
            saturday, sunday
        )
        feed: ScheduleFeed = {"loading": False, "error": None, "segments": []}
        try:
            feed["segments"] = SegmentRepository(segment_file).get_all_segments()
        except QuoteplanError as e:
            # A failed fetch is shown as the error state of the chart
            feed["error"] = str(e)
    except QuoteplanError as e:
        raise _fail(e)

    view = resolve_gantt_view(feed, layout_config, work_on_saturday, work_on_sunday)
    if cells_per_day is None:
        cells_per_day = CONFIGURATION_REPO.get_config()["cells_per_day"]

    gantt_view(
        view,
        layout_config,
        viewport=viewport_for_day(scroll_day or 1, layout_config),
        visible_days=days,
        cells_per_day=cells_per_day,
        left_column_width=left_width,
        console=console,
    )
    if view["status"] == "error":
        raise typer.Exit(1)


def layout(
    segment_file: SegmentFile,
    saturday: SaturdayOption = None,
    sunday: SundayOption = None,
    include_calendar: Annotated[
        bool,
        typer.Option(
            "--include-calendar", help="Include the full day classification table"
        ),
    ] = False,
) -> None:
    """Print the computed layout as YAML."""
    try:
        layout_config, work_on_saturday, work_on_sunday = _load_settings(
            saturday, sunday
        )
        segments = SegmentRepository(segment_file).get_all_segments()
    except QuoteplanError as e:
        raise _fail(e)

    result = compute_layout(segments, layout_config, work_on_saturday, work_on_sunday)
    typer.echo(layout_to_yaml(result, include_calendar), nl=False)


def calendar(
    saturday: SaturdayOption = None,
    sunday: SundayOption = None,
) -> None:
    """Show the rest days of the planning calendar."""
    try:
        layout_config, work_on_saturday, work_on_sunday = _load_settings(
            saturday, sunday
        )
    except QuoteplanError as e:
        raise _fail(e)

    calendar_view(
        build_calendar(layout_config, work_on_saturday, work_on_sunday),
        work_on_saturday,
        work_on_sunday,
        console=console,
    )

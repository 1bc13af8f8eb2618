# SPDX-License-Identifier: MIT

import math
from typing import Optional, TypeAlias

from rich.console import Console, Group
from rich.markup import escape
from rich.padding import Padding
from rich.text import Text

from quoteplan.color import (
    ENGAGEMENT_COLOR,
    MONTH_HEADER_COLOR,
    REST_DAY_BACKGROUND,
    RESOURCE_NAME_COLOR,
    SOFTWARE_BADGE_COLOR,
    get_resource_color,
)
from quoteplan.model.calendar import CalendarDay
from quoteplan.model.engagement import EngagementSpan
from quoteplan.model.group import ItemGroup, ResourceGroup
from quoteplan.model.layout import GanttLayout, GanttView, LayoutConfiguration
from quoteplan.model.render import TaskRenderInfo
from quoteplan.model.row import RowPlacement
from quoteplan.model.viewport import ViewportState
from quoteplan.service.viewport import frozen_region_transform, visible_day_range
from quoteplan.view.header import header
from quoteplan.view.labels import (
    EMPTY_MESSAGE,
    LOADING_MESSAGE,
    SOFTWARE_BADGE,
    item_label,
    month_label,
    segment_label,
    shows_travel_markers,
)

Cell: TypeAlias = tuple[str, str]


def gantt_view(
    view: GanttView,
    layout_config: LayoutConfiguration,
    viewport: Optional[ViewportState] = None,
    visible_days: int = 60,
    cells_per_day: int = 2,
    left_column_width: int = 32,
    console: Optional[Console] = None,
) -> None:
    """
    Display a computed schedule layout as a gantt chart in the terminal.

    The label column and the day header stay in place while the timeline is
    windowed by the viewport. Loading, error and empty views each print their
    own message instead of a chart.

    Args:
        view: The resolved view for the current fetch state
        layout_config: Layout constants the layout was computed with
        viewport: Authoritative scroll offsets in pixels (defaults to the origin)
        visible_days: Number of day columns to show
        cells_per_day: Terminal character cells per day column
        left_column_width: Width of the resource/item label column
        console: Console to print to (defaults to a new console)
    """
    if console is None:
        console = Console()
    if viewport is None:
        viewport = {"scroll_left": 0.0, "scroll_top": 0.0}

    header(console, "Training schedule")

    if view["status"] == "loading":
        console.print(f"\n[dim]{LOADING_MESSAGE}[/dim]\n")
        return
    if view["status"] == "error":
        console.print(f"\n[red]Error: {escape(view['error'] or '')}[/red]\n")
        return

    layout = view["layout"]
    if view["status"] == "empty" or layout is None:
        console.print(f"\n[dim]{EMPTY_MESSAGE}[/dim]\n")
        return

    first_day, last_day = visible_day_range(
        viewport, visible_days * layout_config["day_width"], layout_config
    )
    visible_calendar = layout["calendar"][first_day - 1 : last_day]

    console.print(f"\n[bold]Day {first_day} to Day {last_day}[/bold]\n")

    chart_elements: list[Text] = []
    chart_elements.extend(
        _build_calendar_header(visible_calendar, cells_per_day, left_column_width)
    )
    separator_width = left_column_width + len(visible_calendar) * cells_per_day
    chart_elements.append(Text("─" * separator_width, style="dim"))

    # Rows scrolled above the top of the viewport are hidden with the label column
    transform = frozen_region_transform(viewport)
    hidden_above = -transform["labels_translate_y"]

    groups_by_id = {group["resource_id"]: group for group in layout["resource_groups"]}
    engagements_by_id = {span["resource_id"]: span for span in layout["engagements"]}

    for row in layout["rows"]:
        if row["vertical_offset"] + row["height"] <= hidden_above:
            continue
        group = groups_by_id[row["resource_id"]]
        if row["kind"] == "resource":
            chart_elements.append(
                _build_resource_row(
                    group,
                    engagements_by_id.get(group["resource_id"]),
                    visible_calendar,
                    layout_config,
                    cells_per_day,
                    left_column_width,
                )
            )
        else:
            chart_elements.append(
                _build_item_row(
                    group,
                    row,
                    _row_tasks(layout, row),
                    visible_calendar,
                    layout_config,
                    cells_per_day,
                    left_column_width,
                )
            )

    chart = Group(*chart_elements)
    console.print(Padding(chart, (0, 0, 1, 0)))

    if layout["diagnostics"]:
        skipped = len(layout["diagnostics"])
        console.print(f"[yellow]{skipped} segment(s) could not be drawn[/yellow]")
    console.print()


def _row_tasks(layout: GanttLayout, row: RowPlacement) -> list[TaskRenderInfo]:
    return [
        task
        for task in layout["tasks"]
        if task["resource_id"] == row["resource_id"]
        and task["vertical_offset"] == row["vertical_offset"]
    ]


def _fit_left_column(label: Text, left_column_width: int) -> Text:
    if len(label) > left_column_width:
        label.truncate(left_column_width - 3)
        label.append("...")
    else:
        label.pad_right(left_column_width - len(label))
    return label


def _to_cell(
    pixels: float, layout_config: LayoutConfiguration, cells_per_day: int
) -> float:
    return pixels * cells_per_day / layout_config["day_width"]


def _empty_cells(
    visible_calendar: list[CalendarDay], cells_per_day: int
) -> list[Cell]:
    cells: list[Cell] = []
    for day in visible_calendar:
        style = f"on {REST_DAY_BACKGROUND}" if day["is_rest_day"] else ""
        cells.extend([(" ", style)] * cells_per_day)
    return cells


def _paint(cells: list[Cell], start: int, end: int, char: str, color: str) -> None:
    """Paint cells [start, end) clipped to the window, keeping rest-day shading."""
    for index in range(max(0, start), min(len(cells), end)):
        _, style = cells[index]
        background = style if style.startswith("on ") else ""
        cells[index] = (char, f"{color} {background}".strip())


def _cells_to_text(cells: list[Cell]) -> Text:
    text = Text()
    for char, style in cells:
        text.append(char, style=style)
    return text


def _build_calendar_header(
    visible_calendar: list[CalendarDay], cells_per_day: int, left_column_width: int
) -> list[Text]:
    """
    Build the month row and the day-of-month row.

    Returns:
        Two Rich Text rows; rest days are shaded in the day row
    """
    month_row = Text(" " * left_column_width)
    day_row = _fit_left_column(
        Text("Resources & Machines/Software", style="bold"), left_column_width
    )

    month_cells = [" "] * (len(visible_calendar) * cells_per_day)
    for index, day in enumerate(visible_calendar):
        if day["day_of_month"] == 1 or index == 0:
            label = month_label(day["month"])
            start = index * cells_per_day
            for offset, char in enumerate(label):
                if start + offset < len(month_cells):
                    month_cells[start + offset] = char
    month_row.append("".join(month_cells), style=MONTH_HEADER_COLOR)

    for day in visible_calendar:
        label = str(day["day_of_month"])
        if len(label) > cells_per_day:
            label = label[-cells_per_day:]
        style = f"bold on {REST_DAY_BACKGROUND}" if day["is_rest_day"] else ""
        day_row.append(label.rjust(cells_per_day), style=style)

    return [month_row, day_row]


def _build_resource_row(
    group: ResourceGroup,
    engagement: Optional[EngagementSpan],
    visible_calendar: list[CalendarDay],
    layout_config: LayoutConfiguration,
    cells_per_day: int,
    left_column_width: int,
) -> Text:
    """Build a resource header row with its total engagement bar."""
    row = _fit_left_column(
        Text(group["resource_name"], style=RESOURCE_NAME_COLOR), left_column_width
    )
    cells = _empty_cells(visible_calendar, cells_per_day)

    if engagement is not None and visible_calendar:
        window_start = (visible_calendar[0]["day"] - 1) * cells_per_day
        start = (engagement["padded_start_day"] - 1) * cells_per_day - window_start
        end = start + engagement["total_span_days"] * cells_per_day
        _paint(cells, start, end, "─", ENGAGEMENT_COLOR)
        if shows_travel_markers(engagement, layout_config):
            _paint(cells, start, start + 1, "✈", ENGAGEMENT_COLOR)
            _paint(cells, end - 1, end, "✈", ENGAGEMENT_COLOR)

    row.append_text(_cells_to_text(cells))
    return row


def _build_item_row(
    group: ResourceGroup,
    placement: RowPlacement,
    tasks: list[TaskRenderInfo],
    visible_calendar: list[CalendarDay],
    layout_config: LayoutConfiguration,
    cells_per_day: int,
    left_column_width: int,
) -> Text:
    """Build a machine or software row with its task segments."""
    item = _find_item(group, placement["item_name"])

    label = Text("  ")
    if item is not None and item["item_category"] == "Software":
        label.append(SOFTWARE_BADGE, style=SOFTWARE_BADGE_COLOR)
        label.append(" ")
    label.append(item_label(item) if item is not None else str(placement["item_name"]))
    row = _fit_left_column(label, left_column_width)

    cells = _empty_cells(visible_calendar, cells_per_day)
    if not visible_calendar:
        return row

    window_start = (visible_calendar[0]["day"] - 1) * cells_per_day
    color = get_resource_color(group["resource_id"])

    for task in tasks:
        start = math.floor(
            _to_cell(task["horizontal_offset"], layout_config, cells_per_day)
        )
        end = math.ceil(
            _to_cell(
                task["horizontal_offset"] + task["pixel_width"],
                layout_config,
                cells_per_day,
            )
        )
        end = max(end, start + 1)
        char = "▓" if task["item_category"] == "Software" else "█"
        _paint(cells, start - window_start, end - window_start, char, color)

        text = segment_label(task)
        if len(text) <= end - start:
            for offset, letter in enumerate(text):
                index = start - window_start + offset
                if 0 <= index < len(cells):
                    cells[index] = (letter, f"bold black on {color}")

    row.append_text(_cells_to_text(cells))
    return row


def _find_item(group: ResourceGroup, item_name: Optional[str]) -> Optional[ItemGroup]:
    for item in group["items"]:
        if item["item_name"] == item_name:
            return item
    return None

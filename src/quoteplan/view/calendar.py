# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from quoteplan.model.calendar import CalendarDay
from quoteplan.service.calendar import rest_days
from quoteplan.view.header import header
from quoteplan.view.labels import month_label

WEEKDAY_NAMES = ["D1", "D2", "D3", "D4", "D5", "D6 (Sat)", "D7 (Sun)"]


def calendar_view(
    calendar: list[CalendarDay],
    work_on_saturday: bool,
    work_on_sunday: bool,
    console: Optional[Console] = None,
) -> None:
    """Display the rest days of every month on the planning calendar."""
    if console is None:
        console = Console()

    header(
        console,
        "Planning calendar",
        f"Saturday {'worked' if work_on_saturday else 'off'}, "
        f"Sunday {'worked' if work_on_sunday else 'off'}",
    )

    table = Table()
    table.add_column("Month", style="sandy_brown")
    table.add_column("Days", justify="right")
    table.add_column("Rest days", style="cyan")
    table.add_column("Work days", justify="right", style="green")

    months: dict[int, list[CalendarDay]] = {}
    for day in calendar:
        months.setdefault(day["month"], []).append(day)

    for month, days in months.items():
        month_rest_days = rest_days(days)
        rest_labels = ", ".join(
            f"{day['day_of_month']} {WEEKDAY_NAMES[day['day_of_week']]}"
            for day in days
            if day["day"] in month_rest_days
        )
        table.add_row(
            month_label(month),
            str(len(days)),
            rest_labels or "-",
            str(len(days) - len(month_rest_days)),
        )

    console.print(table)
    console.print(
        f"[dim]{len(rest_days(calendar))} rest day(s) over {len(calendar)} day(s)[/dim]"
    )

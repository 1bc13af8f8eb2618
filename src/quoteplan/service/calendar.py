# SPDX-License-Identifier: MIT

"""
Day classification on the planning calendar.

The planning calendar is synthetic: every month has the configured number of
days (30 by default) and weeks are a plain 7-day cycle starting on day 1.
Day numbers are positions on the plan, not wall-clock dates.
"""

from quoteplan.model.calendar import CalendarDay
from quoteplan.model.layout import LayoutConfiguration

DAYS_PER_WEEK = 7
SATURDAY_INDEX = 5
SUNDAY_INDEX = 6


def day_position(day: int, days_per_month: int) -> tuple[int, int]:
    """
    Convert an absolute day number into a (month, day of month) pair.

    Days before day 1 are treated as day 1.
    """
    valid_day = max(1, day)
    month = (valid_day - 1) // days_per_month + 1
    day_of_month = (valid_day - 1) % days_per_month + 1
    return month, day_of_month


def day_of_year(month: int, day_of_month: int, days_per_month: int) -> int:
    return (month - 1) * days_per_month + day_of_month


def day_of_week(month: int, day_of_month: int, days_per_month: int) -> int:
    """Return the position of a day in its 7-day cycle, 0 through 6."""
    return (day_of_year(month, day_of_month, days_per_month) - 1) % DAYS_PER_WEEK


def is_rest_day(
    month: int,
    day_of_month: int,
    work_on_saturday: bool,
    work_on_sunday: bool,
    days_per_month: int,
) -> bool:
    weekday = day_of_week(month, day_of_month, days_per_month)
    if weekday == SATURDAY_INDEX:
        return not work_on_saturday
    if weekday == SUNDAY_INDEX:
        return not work_on_sunday
    return False


def is_rest_day_number(
    day: int, work_on_saturday: bool, work_on_sunday: bool, days_per_month: int
) -> bool:
    month, day_of_month = day_position(day, days_per_month)
    return is_rest_day(
        month, day_of_month, work_on_saturday, work_on_sunday, days_per_month
    )


def total_days(layout_config: LayoutConfiguration) -> int:
    return layout_config["months_visible"] * layout_config["days_per_month"]


def build_calendar(
    layout_config: LayoutConfiguration, work_on_saturday: bool, work_on_sunday: bool
) -> list[CalendarDay]:
    """
    Classify every day of the visible horizon.

    Returns:
        One entry per day, in day order, with its column offset in pixels
    """
    days_per_month = layout_config["days_per_month"]
    day_width = layout_config["day_width"]

    calendar: list[CalendarDay] = []
    for day in range(1, total_days(layout_config) + 1):
        month, day_of_month = day_position(day, days_per_month)
        calendar.append(
            {
                "day": day,
                "month": month,
                "day_of_month": day_of_month,
                "day_of_week": day_of_week(month, day_of_month, days_per_month),
                "is_rest_day": is_rest_day(
                    month,
                    day_of_month,
                    work_on_saturday,
                    work_on_sunday,
                    days_per_month,
                ),
                "horizontal_offset": (day - 1) * day_width,
            }
        )
    return calendar


def rest_days(calendar: list[CalendarDay]) -> list[int]:
    return [entry["day"] for entry in calendar if entry["is_rest_day"]]

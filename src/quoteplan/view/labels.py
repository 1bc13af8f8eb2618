# SPDX-License-Identifier: MIT

from quoteplan.model.engagement import EngagementSpan
from quoteplan.model.group import ItemGroup
from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.render import TaskRenderInfo

SOFTWARE_BADGE = "SW"

EMPTY_MESSAGE = "No training assignments scheduled for the selected plan."
LOADING_MESSAGE = "Loading & Scheduling..."


def format_hours(hours: float | None) -> str:
    if hours is None:
        return "0"
    if float(hours).is_integer():
        return str(int(hours))
    return f"{hours:g}"


def item_label(item: ItemGroup) -> str:
    return f"{item['item_name']} ({format_hours(item['total_hours'])}h)"


def segment_label(task: TaskRenderInfo) -> str:
    return f"{format_hours(task['segment_hours'])}h"


def segment_description(task: TaskRenderInfo) -> str:
    return (
        f"{task['item_name']}: {format_hours(task['segment_hours'])}h this block "
        f"(Total {format_hours(task['total_hours'])}h). "
        f"Start: M{task['month']} D{task['day_of_month']} "
        f"Offset: {task['start_hour_offset'] or 0:.1f}h. "
        f"Logical Duration: {task['duration_days'] or 1} day(s)."
    )


def engagement_description(span: EngagementSpan) -> str:
    return (
        f"Total Engagement for {span['resource_name']}: "
        f"Day {span['padded_start_day']} to {span['padded_end_day']} (Includes Travel)"
    )


def shows_travel_markers(
    span: EngagementSpan, layout_config: LayoutConfiguration
) -> bool:
    day_width = layout_config["day_width"]
    return span["total_span_days"] * day_width > day_width * 1.5


def month_label(month: int) -> str:
    return f"Month {month}"

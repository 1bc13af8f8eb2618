# SPDX-License-Identifier: MIT

from typing import cast

from quoteplan.model.group import ResourceGroup
from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.render import TaskRenderInfo
from quoteplan.model.row import RowLayout
from quoteplan.model.segment import ScheduledTaskSegment
from quoteplan.service.calendar import day_position
from quoteplan.service.validate import is_drawable


def horizontal_offset(
    start_day: int, start_hour_offset: float, layout_config: LayoutConfiguration
) -> float:
    """Left edge of a segment: its day column plus the hours already used that day."""
    day_width = layout_config["day_width"]
    base_offset = (max(1, start_day) - 1) * day_width
    hour_offset_pixels = (
        start_hour_offset / layout_config["daily_hour_limit"]
    ) * day_width
    return base_offset + hour_offset_pixels


def pixel_width(segment_hours: float, layout_config: LayoutConfiguration) -> float:
    width = (segment_hours / layout_config["daily_hour_limit"]) * layout_config[
        "day_width"
    ]
    return max(width, layout_config["minimum_width"])


def project_segment(
    segment: ScheduledTaskSegment,
    vertical_offset: int,
    layout_config: LayoutConfiguration,
) -> TaskRenderInfo:
    """
    Compute the drawing geometry of one segment.

    The segment must be drawable; see ``segment_problem``.
    """
    start_day = cast(int, segment["start_day"])
    start_hour_offset = cast(float, segment["start_hour_offset"])
    segment_hours = cast(float, segment["segment_hours"])
    month, day_of_month = day_position(start_day, layout_config["days_per_month"])

    render_info = cast(TaskRenderInfo, dict(segment))
    render_info["vertical_offset"] = vertical_offset
    render_info["horizontal_offset"] = horizontal_offset(
        start_day, start_hour_offset, layout_config
    )
    render_info["pixel_width"] = pixel_width(segment_hours, layout_config)
    render_info["month"] = month
    render_info["day_of_month"] = day_of_month
    return render_info


def project_segments(
    resource_groups: list[ResourceGroup],
    row_layout: RowLayout,
    layout_config: LayoutConfiguration,
) -> list[TaskRenderInfo]:
    """
    Place every drawable segment on its item row.

    Segments that cannot be drawn are skipped; the others in the same row are
    unaffected.
    """
    tasks: list[TaskRenderInfo] = []
    for group in resource_groups:
        for item in group["items"]:
            row_offset = row_layout["item_offsets"][
                (group["resource_id"], item["item_name"])
            ]
            for segment in item["segments"]:
                if not is_drawable(segment, layout_config):
                    continue
                tasks.append(project_segment(segment, row_offset, layout_config))
    return tasks

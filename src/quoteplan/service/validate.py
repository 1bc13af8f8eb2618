# SPDX-License-Identifier: MIT

from typing import Optional

from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.segment import ScheduledTaskSegment


def segment_problem(
    segment: ScheduledTaskSegment, layout_config: LayoutConfiguration
) -> Optional[str]:
    """
    Describe why a segment cannot be placed on the timeline.

    Returns:
        A short reason, or None when the segment can be drawn
    """
    if segment["resource_id"] is None:
        return "missing resource_id"
    if segment["start_day"] is None:
        return "missing start_day"
    if segment["start_day"] < 1:
        return f"start_day must be >= 1, got {segment['start_day']}"
    if segment["start_hour_offset"] is None:
        return "missing start_hour_offset"
    if segment["segment_hours"] is None:
        return "missing segment_hours"
    if segment["segment_hours"] <= 0:
        return f"segment_hours must be > 0, got {segment['segment_hours']}"

    limit = layout_config["daily_hour_limit"]
    if not 0 <= segment["start_hour_offset"] < limit:
        return (
            f"start_hour_offset must be within [0, {limit}), "
            f"got {segment['start_hour_offset']}"
        )
    return None


def is_drawable(
    segment: ScheduledTaskSegment, layout_config: LayoutConfiguration
) -> bool:
    return segment_problem(segment, layout_config) is None

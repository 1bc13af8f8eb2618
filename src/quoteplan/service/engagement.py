# SPDX-License-Identifier: MIT

from typing import Optional, cast

from quoteplan.model.engagement import EngagementSpan
from quoteplan.model.group import ResourceGroup
from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.row import RowLayout
from quoteplan.service.validate import is_drawable

TRAVEL_BUFFER_DAYS = 1


def occupied_days(
    group: ResourceGroup, layout_config: LayoutConfiguration
) -> Optional[tuple[int, int]]:
    """
    Find the first and last day a resource works on.

    A segment without a duration counts as a single day.

    Returns:
        (earliest start day, latest end day), or None when the resource has no
        drawable segments
    """
    earliest: Optional[int] = None
    latest: Optional[int] = None

    for item in group["items"]:
        for segment in item["segments"]:
            if not is_drawable(segment, layout_config):
                continue
            start_day = cast(int, segment["start_day"])
            end_day = start_day + max(1, segment["duration_days"] or 1) - 1
            earliest = start_day if earliest is None else min(earliest, start_day)
            latest = end_day if latest is None else max(latest, end_day)

    if earliest is None or latest is None:
        return None
    return earliest, latest


def engagement_span(
    group: ResourceGroup, vertical_offset: int, layout_config: LayoutConfiguration
) -> Optional[EngagementSpan]:
    days = occupied_days(group, layout_config)
    if days is None:
        return None

    earliest, latest = days
    padded_start_day = max(1, earliest - TRAVEL_BUFFER_DAYS)
    padded_end_day = latest + TRAVEL_BUFFER_DAYS
    return {
        "resource_id": group["resource_id"],
        "resource_name": group["resource_name"],
        "padded_start_day": padded_start_day,
        "padded_end_day": padded_end_day,
        "total_span_days": max(1, padded_end_day - padded_start_day + 1),
        "vertical_offset": vertical_offset,
    }


def compute_engagements(
    resource_groups: list[ResourceGroup],
    row_layout: RowLayout,
    layout_config: LayoutConfiguration,
) -> list[EngagementSpan]:
    """
    Compute the total engagement window of each resource, travel days included.

    Resources without drawable segments get no entry.
    """
    engagements: list[EngagementSpan] = []
    for group in resource_groups:
        span = engagement_span(
            group,
            row_layout["resource_offsets"][group["resource_id"]],
            layout_config,
        )
        if span is not None:
            engagements.append(span)
    return engagements

# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from functools import lru_cache
from typing import Any, Optional, TypeAlias, cast

from quoteplan.model.layout import (
    DEFAULT_LAYOUT_CONFIGURATION,
    GanttLayout,
    GanttView,
    LayoutConfiguration,
    ScheduleFeed,
    SegmentDiagnostic,
)
from quoteplan.model.segment import ScheduledTaskSegment
from quoteplan.service.calendar import build_calendar, total_days
from quoteplan.service.engagement import compute_engagements
from quoteplan.service.grouping import group_segments
from quoteplan.service.horizontal_layout import project_segments
from quoteplan.service.ingest import SEGMENT_FIELDS
from quoteplan.service.validate import segment_problem
from quoteplan.service.vertical_layout import layout_rows

logger = logging.getLogger(__name__)

SegmentKey: TypeAlias = tuple[tuple[Any, ...], ...]
ConfigKey: TypeAlias = tuple[tuple[str, Any], ...]


def collect_diagnostics(
    segments: list[ScheduledTaskSegment], layout_config: LayoutConfiguration
) -> list[SegmentDiagnostic]:
    diagnostics: list[SegmentDiagnostic] = []
    for segment in segments:
        reason = segment_problem(segment, layout_config)
        if reason is None:
            continue
        logger.warning("Skipping segment %s: %s", segment.get("id"), reason)
        diagnostics.append(
            {
                "segment_id": segment.get("id"),
                "resource_id": segment.get("resource_id"),
                "reason": reason,
            }
        )
    return diagnostics


def _run_layout_pass(
    segments: list[ScheduledTaskSegment],
    layout_config: LayoutConfiguration,
    work_on_saturday: bool,
    work_on_sunday: bool,
) -> GanttLayout:
    diagnostics = collect_diagnostics(segments, layout_config)
    resource_groups = group_segments(segments)
    row_layout = layout_rows(resource_groups, layout_config)
    tasks = project_segments(resource_groups, row_layout, layout_config)
    engagements = compute_engagements(resource_groups, row_layout, layout_config)

    if not tasks:
        logger.info("No drawable segments in %d supplied", len(segments))

    return {
        "status": "ready" if tasks else "empty",
        "resource_groups": resource_groups,
        "rows": row_layout["rows"],
        "tasks": tasks,
        "engagements": engagements,
        "calendar": build_calendar(layout_config, work_on_saturday, work_on_sunday),
        "total_grid_height": row_layout["total_grid_height"],
        "total_timeline_width": total_days(layout_config) * layout_config["day_width"],
        "diagnostics": diagnostics,
    }


@lru_cache(maxsize=16)
def _cached_layout(
    segment_key: SegmentKey,
    config_key: ConfigKey,
    work_on_saturday: bool,
    work_on_sunday: bool,
) -> GanttLayout:
    segments = [
        cast(ScheduledTaskSegment, dict(zip(SEGMENT_FIELDS, row)))
        for row in segment_key
    ]
    layout_config = cast(LayoutConfiguration, dict(config_key))
    return _run_layout_pass(segments, layout_config, work_on_saturday, work_on_sunday)


def segments_key(segments: list[ScheduledTaskSegment]) -> SegmentKey:
    return tuple(
        tuple(segment.get(field) for field in SEGMENT_FIELDS) for segment in segments
    )


def compute_layout(
    segments: list[ScheduledTaskSegment],
    layout_config: Optional[LayoutConfiguration] = None,
    work_on_saturday: bool = False,
    work_on_sunday: bool = False,
) -> GanttLayout:
    """
    Run the full layout pass over a collection of scheduled segments.

    Stages run in order: grouping by resource and item, vertical row
    placement, horizontal segment geometry, engagement spans and day
    classification. Malformed segments are reported in ``diagnostics`` and
    left out of ``tasks``; they never stop the pass.

    Results are memoized on the segment values, the layout constants and the
    two work-day flags. Each call returns an independent copy.

    Args:
        segments: Scheduled segments from the data layer, in display order
        layout_config: Layout constants (defaults to DEFAULT_LAYOUT_CONFIGURATION)
        work_on_saturday: Whether day 6 of each week is a work day
        work_on_sunday: Whether day 7 of each week is a work day

    Returns:
        The complete layout, with status "empty" when nothing can be drawn
    """
    if layout_config is None:
        layout_config = DEFAULT_LAYOUT_CONFIGURATION

    layout = _cached_layout(
        segments_key(segments),
        tuple(sorted(layout_config.items())),
        work_on_saturday,
        work_on_sunday,
    )
    return deepcopy(layout)


def clear_layout_cache() -> None:
    _cached_layout.cache_clear()


def resolve_gantt_view(
    feed: ScheduleFeed,
    layout_config: Optional[LayoutConfiguration] = None,
    work_on_saturday: bool = False,
    work_on_sunday: bool = False,
) -> GanttView:
    """
    Decide what the schedule view should show for the current fetch state.

    Loading wins over an error, and an error wins over computing a layout.
    A successful fetch with nothing to draw is "empty", never "error".
    """
    if feed["loading"]:
        return {"status": "loading", "error": None, "layout": None}
    if feed["error"] is not None:
        return {"status": "error", "error": feed["error"], "layout": None}

    layout = compute_layout(
        feed["segments"], layout_config, work_on_saturday, work_on_sunday
    )
    return {"status": layout["status"], "error": None, "layout": layout}

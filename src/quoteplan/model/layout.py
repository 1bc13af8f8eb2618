# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from quoteplan.model.calendar import CalendarDay
from quoteplan.model.engagement import EngagementSpan
from quoteplan.model.group import ResourceGroup
from quoteplan.model.render import TaskRenderInfo
from quoteplan.model.row import RowPlacement
from quoteplan.model.segment import ResourceId, ScheduledTaskSegment, SegmentId

LayoutStatus = Literal["ready", "empty"]
ViewStatus = Literal["loading", "error", "empty", "ready"]


class LayoutConfiguration(TypedDict):
    day_width: int
    daily_hour_limit: float
    resource_header_height: int
    item_row_height: int
    days_per_month: int
    months_visible: int
    minimum_width: float


DEFAULT_LAYOUT_CONFIGURATION: LayoutConfiguration = {
    "day_width": 30,
    "daily_hour_limit": 8,
    "resource_header_height": 40,
    "item_row_height": 30,
    "days_per_month": 30,
    "months_visible": 12,
    "minimum_width": 4,
}


class SegmentDiagnostic(TypedDict):
    segment_id: Optional[SegmentId]
    resource_id: Optional[ResourceId]
    reason: str


class GanttLayout(TypedDict):
    status: LayoutStatus
    resource_groups: list[ResourceGroup]
    rows: list[RowPlacement]
    tasks: list[TaskRenderInfo]
    engagements: list[EngagementSpan]
    calendar: list[CalendarDay]
    total_grid_height: int
    total_timeline_width: int
    diagnostics: list[SegmentDiagnostic]


class ScheduleFeed(TypedDict):
    loading: bool
    error: Optional[str]
    segments: list[ScheduledTaskSegment]


class GanttView(TypedDict):
    status: ViewStatus
    error: Optional[str]
    layout: Optional[GanttLayout]

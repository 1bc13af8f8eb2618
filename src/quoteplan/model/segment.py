# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

SegmentId: TypeAlias = str
ResourceId: TypeAlias = int
TaskId: TypeAlias = str | int

ItemCategory = Literal["Machine", "Software", "Unknown"]

ITEM_CATEGORIES: tuple[ItemCategory, ...] = ("Machine", "Software", "Unknown")

UNKNOWN_ITEM_NAME = "Unknown"


class ScheduledTaskSegment(TypedDict):
    id: SegmentId
    original_task_id: Optional[TaskId]
    resource_id: Optional[ResourceId]
    resource_name: Optional[str]
    item_name: Optional[str]
    item_category: ItemCategory
    segment_hours: Optional[float]
    total_hours: Optional[float]
    start_day: Optional[int]
    duration_days: Optional[int]
    start_hour_offset: Optional[float]

# SPDX-License-Identifier: MIT

from typing import TypedDict

from quoteplan.model.segment import ItemCategory, ResourceId, ScheduledTaskSegment


class ItemGroup(TypedDict):
    item_name: str
    item_category: ItemCategory
    total_hours: float
    segments: list[ScheduledTaskSegment]


class ResourceGroup(TypedDict):
    resource_id: ResourceId
    resource_name: str
    items: list[ItemGroup]

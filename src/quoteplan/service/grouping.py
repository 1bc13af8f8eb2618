# SPDX-License-Identifier: MIT

from quoteplan.model.group import ItemGroup, ResourceGroup
from quoteplan.model.segment import (
    UNKNOWN_ITEM_NAME,
    ResourceId,
    ScheduledTaskSegment,
    TaskId,
)


def resource_display_name(segment: ScheduledTaskSegment) -> str:
    name = segment["resource_name"]
    if name:
        return name
    return f"Resource {segment['resource_id']}"


def deduplicated_hours(segments: list[ScheduledTaskSegment]) -> float:
    """
    Sum the total hours of the logical tasks behind a list of segments.

    A task split into several segments is counted once, using the total of
    the first segment seen for it. Segments without an original task id are
    not attributed to any task.
    """
    task_hours: dict[TaskId, float] = {}
    for segment in segments:
        task_id = segment["original_task_id"]
        if task_id is None or task_id in task_hours:
            continue
        task_hours[task_id] = segment["total_hours"] or 0
    return sum(task_hours.values())


def item_sort_key(item: ItemGroup) -> tuple[int, str, str]:
    # Software lines go after machine lines; "Unknown" sorts with machines
    category_rank = 1 if item["item_category"] == "Software" else 0
    return (category_rank, item["item_name"].casefold(), item["item_name"])


def group_segments(segments: list[ScheduledTaskSegment]) -> list[ResourceGroup]:
    """
    Partition segments by resource, then by machine or software line.

    Resources keep the order in which they first appear. Segments without a
    resource id are left out.

    Args:
        segments: Scheduled segments in the order supplied by the data layer

    Returns:
        One group per resource with its item lines sorted for display
    """
    groups: dict[ResourceId, ResourceGroup] = {}
    items_by_resource: dict[ResourceId, dict[str, ItemGroup]] = {}

    for segment in segments:
        resource_id = segment["resource_id"]
        if resource_id is None:
            continue

        if resource_id not in groups:
            groups[resource_id] = {
                "resource_id": resource_id,
                "resource_name": resource_display_name(segment),
                "items": [],
            }
            items_by_resource[resource_id] = {}

        item_name = segment["item_name"] or UNKNOWN_ITEM_NAME
        items = items_by_resource[resource_id]
        if item_name not in items:
            item: ItemGroup = {
                "item_name": item_name,
                "item_category": segment["item_category"],
                "total_hours": 0,
                "segments": [],
            }
            items[item_name] = item
            groups[resource_id]["items"].append(item)

        items[item_name]["segments"].append(segment)

    for group in groups.values():
        for item in group["items"]:
            item["total_hours"] = deduplicated_hours(item["segments"])
        group["items"].sort(key=item_sort_key)

    return list(groups.values())

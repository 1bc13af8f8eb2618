# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from quoteplan import time
from quoteplan.model.layout import GanttLayout


def layout_to_document(
    layout: GanttLayout, include_calendar: bool = False
) -> dict[str, Any]:
    """
    Convert a layout into plain data for export.

    Item offsets keyed by tuples are not exported; rows carry the
    same information. The day table is left out unless requested since it is
    fully determined by the layout constants and the work-day flags.
    """
    document: dict[str, Any] = {
        "generated": time.datetime_to_iso_str(time.now_utc()),
        "status": layout["status"],
        "total_grid_height": layout["total_grid_height"],
        "total_timeline_width": layout["total_timeline_width"],
        "resources": [
            {
                "resource_id": group["resource_id"],
                "resource_name": group["resource_name"],
                "items": [
                    {
                        "item_name": item["item_name"],
                        "item_category": item["item_category"],
                        "total_hours": item["total_hours"],
                        "segment_ids": [s["id"] for s in item["segments"]],
                    }
                    for item in group["items"]
                ],
            }
            for group in layout["resource_groups"]
        ],
        "rows": [dict(row) for row in layout["rows"]],
        "tasks": [
            {
                "id": task["id"],
                "resource_id": task["resource_id"],
                "item_name": task["item_name"],
                "vertical_offset": task["vertical_offset"],
                "horizontal_offset": task["horizontal_offset"],
                "pixel_width": task["pixel_width"],
                "month": task["month"],
                "day_of_month": task["day_of_month"],
            }
            for task in layout["tasks"]
        ],
        "engagements": [dict(span) for span in layout["engagements"]],
        "rest_days": [day["day"] for day in layout["calendar"] if day["is_rest_day"]],
        "diagnostics": [dict(diagnostic) for diagnostic in layout["diagnostics"]],
    }
    if include_calendar:
        document["calendar"] = [dict(day) for day in layout["calendar"]]
    return document


def layout_to_yaml(layout: GanttLayout, include_calendar: bool = False) -> str:
    return dump(
        layout_to_document(layout, include_calendar),
        Dumper=Dumper,
        sort_keys=False,
    )

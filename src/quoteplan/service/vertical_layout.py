# SPDX-License-Identifier: MIT

from quoteplan.model.group import ResourceGroup
from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.row import RowLayout, RowPlacement


def layout_rows(
    resource_groups: list[ResourceGroup], layout_config: LayoutConfiguration
) -> RowLayout:
    """
    Stack resource header rows and item rows from the top of the grid.

    Each resource takes a header row followed by one row per item line, in
    the order the groups and items are given.
    """
    header_height = layout_config["resource_header_height"]
    item_height = layout_config["item_row_height"]

    rows: list[RowPlacement] = []
    resource_offsets = {}
    item_offsets = {}
    current_top = 0

    for group in resource_groups:
        resource_id = group["resource_id"]
        resource_offsets[resource_id] = current_top
        rows.append(
            {
                "kind": "resource",
                "resource_id": resource_id,
                "item_name": None,
                "vertical_offset": current_top,
                "height": header_height,
            }
        )
        current_top += header_height

        for item in group["items"]:
            item_offsets[(resource_id, item["item_name"])] = current_top
            rows.append(
                {
                    "kind": "item",
                    "resource_id": resource_id,
                    "item_name": item["item_name"],
                    "vertical_offset": current_top,
                    "height": item_height,
                }
            )
            current_top += item_height

    return {
        "rows": rows,
        "resource_offsets": resource_offsets,
        "item_offsets": item_offsets,
        "total_grid_height": current_top,
    }

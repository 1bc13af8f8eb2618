# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from quoteplan.model.segment import ResourceId

RowKind = Literal["resource", "item"]


class RowPlacement(TypedDict):
    kind: RowKind
    resource_id: ResourceId
    item_name: Optional[str]
    vertical_offset: int
    height: int


class RowLayout(TypedDict):
    rows: list[RowPlacement]
    resource_offsets: dict[ResourceId, int]
    item_offsets: dict[tuple[ResourceId, str], int]
    total_grid_height: int

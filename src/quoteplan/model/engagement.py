# SPDX-License-Identifier: MIT

from typing import TypedDict

from quoteplan.model.segment import ResourceId


class EngagementSpan(TypedDict):
    resource_id: ResourceId
    resource_name: str
    padded_start_day: int
    padded_end_day: int
    total_span_days: int
    vertical_offset: int

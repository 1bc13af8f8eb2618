# SPDX-License-Identifier: MIT

from typing import Optional

RESOURCE_COLORS = [
    "#3B82F6",
    "#F97316",
    "#10B981",
    "#8B5CF6",
    "#EC4899",
    "#EF4444",
    "#F59E0B",
    "#06B6D4",
]

ENGAGEMENT_COLOR = "grey50"
REST_DAY_BACKGROUND = "grey19"
RESOURCE_NAME_COLOR = "bold plum1"
SOFTWARE_BADGE_COLOR = "bold white on dark_slate_blue"
MONTH_HEADER_COLOR = "bold sandy_brown"


def get_resource_color(resource_id: Optional[int]) -> str:
    """Return the display color for a resource.

    The same resource always gets the same color; a missing id maps to the
    first entry of the palette.
    """
    index = abs(resource_id or 0) % len(RESOURCE_COLORS)
    return RESOURCE_COLORS[index]

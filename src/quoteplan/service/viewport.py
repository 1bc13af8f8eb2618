# SPDX-License-Identifier: MIT

import math

from quoteplan.model.layout import LayoutConfiguration
from quoteplan.model.viewport import FrozenRegionTransform, ViewportState
from quoteplan.service.calendar import total_days


def clamp_viewport(
    viewport: ViewportState,
    content_width: float,
    content_height: float,
    visible_width: float,
    visible_height: float,
) -> ViewportState:
    """Keep the scroll offsets inside the scrollable content."""
    max_left = max(0.0, content_width - visible_width)
    max_top = max(0.0, content_height - visible_height)
    return {
        "scroll_left": min(max(0.0, viewport["scroll_left"]), max_left),
        "scroll_top": min(max(0.0, viewport["scroll_top"]), max_top),
    }


def frozen_region_transform(viewport: ViewportState) -> FrozenRegionTransform:
    """
    Translate the frozen header and label column along with the grid.

    The header follows horizontal scrolling only and the label column follows
    vertical scrolling only. Neither region feeds back into the viewport.
    """
    return {
        "header_translate_x": -viewport["scroll_left"],
        "labels_translate_y": -viewport["scroll_top"],
    }


def visible_day_range(
    viewport: ViewportState, visible_width: float, layout_config: LayoutConfiguration
) -> tuple[int, int]:
    """
    Return the first and last day columns at least partly inside the viewport.

    Both bounds are clamped to the visible planning horizon.
    """
    day_width = layout_config["day_width"]
    last_day = total_days(layout_config)
    first = int(viewport["scroll_left"] // day_width) + 1
    last = math.ceil((viewport["scroll_left"] + visible_width) / day_width)
    first = min(max(1, first), last_day)
    last = min(max(first, last), last_day)
    return first, last


def viewport_for_day(day: int, layout_config: LayoutConfiguration) -> ViewportState:
    """Viewport scrolled so that the given day is the first visible column."""
    return {
        "scroll_left": float((max(1, day) - 1) * layout_config["day_width"]),
        "scroll_top": 0.0,
    }

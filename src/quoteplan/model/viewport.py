# SPDX-License-Identifier: MIT

from typing import TypedDict


class ViewportState(TypedDict):
    scroll_left: float
    scroll_top: float


class FrozenRegionTransform(TypedDict):
    header_translate_x: float
    labels_translate_y: float

# SPDX-License-Identifier: MIT

from quoteplan.model.segment import ScheduledTaskSegment


class TaskRenderInfo(ScheduledTaskSegment):
    vertical_offset: int
    horizontal_offset: float
    pixel_width: float
    month: int
    day_of_month: int

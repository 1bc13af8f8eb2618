# SPDX-License-Identifier: MIT

from typing import TypedDict


class CalendarDay(TypedDict):
    day: int
    month: int
    day_of_month: int
    day_of_week: int
    is_rest_day: bool
    horizontal_offset: int

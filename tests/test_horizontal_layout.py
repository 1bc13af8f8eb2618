import unittest
from typing import Any

from quoteplan.model.layout import DEFAULT_LAYOUT_CONFIGURATION, LayoutConfiguration
from quoteplan.model.segment import ScheduledTaskSegment
from quoteplan.service.grouping import group_segments
from quoteplan.service.horizontal_layout import (
    horizontal_offset,
    pixel_width,
    project_segment,
    project_segments,
)
from quoteplan.service.vertical_layout import layout_rows

CONFIG: LayoutConfiguration = DEFAULT_LAYOUT_CONFIGURATION


def _segment(**overrides: Any) -> ScheduledTaskSegment:
    segment: dict[str, Any] = {
        "id": "s1",
        "original_task_id": "t1",
        "resource_id": 1,
        "resource_name": "Alice",
        "item_name": "Lathe",
        "item_category": "Machine",
        "segment_hours": 4.0,
        "total_hours": 4.0,
        "start_day": 1,
        "duration_days": 1,
        "start_hour_offset": 0.0,
    }
    segment.update(overrides)
    return segment  # type: ignore[return-value]


class TestHorizontalGeometry(unittest.TestCase):
    def test_half_day_offset_and_width(self) -> None:
        task = project_segment(
            _segment(start_day=1, start_hour_offset=4, segment_hours=4), 40, CONFIG
        )

        self.assertEqual(task["horizontal_offset"], 15)
        self.assertEqual(task["pixel_width"], 15)
        self.assertEqual(task["vertical_offset"], 40)

    def test_day_column_offset(self) -> None:
        self.assertEqual(horizontal_offset(3, 0, CONFIG), 60)
        self.assertEqual(horizontal_offset(3, 2, CONFIG), 67.5)

    def test_start_day_before_one_is_treated_as_day_one(self) -> None:
        self.assertEqual(horizontal_offset(0, 0, CONFIG), 0)

    def test_minimum_width_for_tiny_segments(self) -> None:
        self.assertEqual(pixel_width(0.0001, CONFIG), CONFIG["minimum_width"])
        self.assertEqual(pixel_width(0.5, CONFIG), CONFIG["minimum_width"])

    def test_width_beyond_one_day_is_proportional(self) -> None:
        self.assertEqual(pixel_width(16, CONFIG), 60)

    def test_offset_stays_inside_start_day_column(self) -> None:
        day_width = CONFIG["day_width"]
        for start_day in (1, 2, 29, 31, 200):
            for offset in (0, 0.5, 3, 7.99):
                left = horizontal_offset(start_day, offset, CONFIG)
                self.assertGreaterEqual(left, (start_day - 1) * day_width)
                self.assertLess(left, start_day * day_width)

    def test_calendar_position(self) -> None:
        task = project_segment(_segment(start_day=31), 0, CONFIG)

        self.assertEqual((task["month"], task["day_of_month"]), (2, 1))

    def test_projection_keeps_segment_fields(self) -> None:
        segment = _segment(id="x", total_hours=12)

        task = project_segment(segment, 0, CONFIG)

        self.assertEqual(task["id"], "x")
        self.assertEqual(task["total_hours"], 12)
        self.assertNotIn("pixel_width", segment)


class TestProjectSegments(unittest.TestCase):
    def _project(self, segments: list[ScheduledTaskSegment]) -> list[Any]:
        groups = group_segments(segments)
        return project_segments(groups, layout_rows(groups, CONFIG), CONFIG)

    def test_segments_use_their_item_row(self) -> None:
        tasks = self._project(
            [
                _segment(id="a", item_name="Lathe"),
                _segment(id="b", item_name="Drill"),
            ]
        )

        offsets = {task["id"]: task["vertical_offset"] for task in tasks}
        self.assertEqual(offsets, {"b": 40, "a": 70})

    def test_missing_offset_skips_only_that_segment(self) -> None:
        tasks = self._project(
            [
                _segment(id="bad", start_hour_offset=None),
                _segment(id="good", start_day=2),
            ]
        )

        self.assertEqual([task["id"] for task in tasks], ["good"])

    def test_other_missing_fields_are_skipped(self) -> None:
        tasks = self._project(
            [
                _segment(id="no-day", start_day=None),
                _segment(id="no-hours", segment_hours=None),
                _segment(id="zero-hours", segment_hours=0),
                _segment(id="past-day-end", start_hour_offset=8),
                _segment(id="ok"),
            ]
        )

        self.assertEqual([task["id"] for task in tasks], ["ok"])


if __name__ == "__main__":
    unittest.main(verbosity=2)

import unittest

from quoteplan.model.layout import DEFAULT_LAYOUT_CONFIGURATION
from quoteplan.service.viewport import (
    clamp_viewport,
    frozen_region_transform,
    viewport_for_day,
    visible_day_range,
)


class TestViewport(unittest.TestCase):
    def test_frozen_regions_follow_one_axis_each(self) -> None:
        transform = frozen_region_transform({"scroll_left": 120.0, "scroll_top": 45.0})

        self.assertEqual(transform["header_translate_x"], -120.0)
        self.assertEqual(transform["labels_translate_y"], -45.0)

    def test_clamp(self) -> None:
        clamped = clamp_viewport(
            {"scroll_left": 5000.0, "scroll_top": -10.0},
            content_width=3000,
            content_height=200,
            visible_width=900,
            visible_height=300,
        )

        self.assertEqual(clamped, {"scroll_left": 2100.0, "scroll_top": 0.0})

    def test_visible_day_range(self) -> None:
        first, last = visible_day_range(
            {"scroll_left": 45.0, "scroll_top": 0.0}, 300, DEFAULT_LAYOUT_CONFIGURATION
        )

        self.assertEqual((first, last), (2, 12))

    def test_visible_day_range_is_clamped_to_horizon(self) -> None:
        first, last = visible_day_range(
            {"scroll_left": 358 * 30.0, "scroll_top": 0.0},
            900,
            DEFAULT_LAYOUT_CONFIGURATION,
        )

        self.assertEqual((first, last), (359, 360))

    def test_viewport_for_day(self) -> None:
        viewport = viewport_for_day(11, DEFAULT_LAYOUT_CONFIGURATION)

        self.assertEqual(viewport["scroll_left"], 300.0)
        self.assertEqual(
            visible_day_range(viewport, 30, DEFAULT_LAYOUT_CONFIGURATION), (11, 11)
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)

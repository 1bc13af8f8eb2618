import unittest

from quoteplan.model.layout import DEFAULT_LAYOUT_CONFIGURATION
from quoteplan.service.calendar import (
    build_calendar,
    day_of_week,
    day_position,
    is_rest_day,
    is_rest_day_number,
    rest_days,
)


class TestDayPosition(unittest.TestCase):
    def test_first_and_last_day_of_month(self) -> None:
        self.assertEqual(day_position(1, 30), (1, 1))
        self.assertEqual(day_position(30, 30), (1, 30))
        self.assertEqual(day_position(31, 30), (2, 1))
        self.assertEqual(day_position(360, 30), (12, 30))

    def test_days_before_one_are_clamped(self) -> None:
        self.assertEqual(day_position(0, 30), (1, 1))
        self.assertEqual(day_position(-4, 30), (1, 1))

    def test_week_cycle_runs_across_months(self) -> None:
        # Day 31 is the 3rd day of the 5th week
        self.assertEqual(day_of_week(2, 1, 30), 2)


class TestRestDays(unittest.TestCase):
    def test_weekend_days_rest_without_flags(self) -> None:
        classified = [is_rest_day_number(day, False, False, 30) for day in range(1, 8)]

        self.assertEqual(classified, [False] * 5 + [True, True])

    def test_saturday_flag(self) -> None:
        self.assertFalse(is_rest_day(1, 6, True, False, 30))
        self.assertTrue(is_rest_day(1, 7, True, False, 30))

    def test_sunday_flag(self) -> None:
        self.assertTrue(is_rest_day(1, 6, False, True, 30))
        self.assertFalse(is_rest_day(1, 7, False, True, 30))

    def test_both_flags_make_every_day_a_work_day(self) -> None:
        self.assertFalse(
            any(is_rest_day_number(day, True, True, 30) for day in range(1, 61))
        )

    def test_weekdays_ignore_flags(self) -> None:
        for flags in ((False, False), (True, False), (False, True), (True, True)):
            self.assertFalse(is_rest_day_number(3, flags[0], flags[1], 30))


class TestBuildCalendar(unittest.TestCase):
    def test_covers_visible_horizon(self) -> None:
        calendar = build_calendar(DEFAULT_LAYOUT_CONFIGURATION, False, False)

        self.assertEqual(len(calendar), 360)
        self.assertEqual(calendar[0]["horizontal_offset"], 0)
        self.assertEqual(calendar[-1]["horizontal_offset"], 359 * 30)
        self.assertEqual((calendar[30]["month"], calendar[30]["day_of_month"]), (2, 1))

    def test_rest_days_every_week(self) -> None:
        calendar = build_calendar(DEFAULT_LAYOUT_CONFIGURATION, False, False)

        self.assertEqual(rest_days(calendar)[:4], [6, 7, 13, 14])
        self.assertEqual(len(rest_days(calendar)), 360 // 7 * 2)

    def test_saturday_worked(self) -> None:
        calendar = build_calendar(DEFAULT_LAYOUT_CONFIGURATION, True, False)

        self.assertEqual(rest_days(calendar)[:3], [7, 14, 21])


if __name__ == "__main__":
    unittest.main(verbosity=2)

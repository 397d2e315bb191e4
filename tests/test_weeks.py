import unittest
from datetime import date, timedelta

from weekly_scheduler.domain.scheduling.weeks import (
    DAY_NAMES,
    adjacent_week_keys,
    get_monday,
    normalize_week_key,
    parse_week_key,
    shift_week,
    week_dates,
    week_key,
)


class TestWeekKeys(unittest.TestCase):
    def test_key_is_monday_formatted(self) -> None:
        # 2024-01-01 is a Monday.
        self.assertEqual(week_key(date(2024, 1, 1)), "01/01/2024")
        self.assertEqual(week_key(date(2024, 1, 3)), "01/01/2024")
        self.assertEqual(week_key(date(2024, 1, 7)), "01/01/2024")
        self.assertEqual(week_key(date(2024, 1, 8)), "01/08/2024")

    def test_key_is_stable_within_an_iso_week(self) -> None:
        start = date(2023, 12, 18)
        for offset in range(28):
            day = start + timedelta(days=offset)
            year, week, _ = day.isocalendar()
            iso_monday = date.fromisocalendar(year, week, 1)
            self.assertEqual(week_key(day), week_key(iso_monday))
            self.assertEqual(week_key(day), week_key(day))

    def test_key_crosses_year_boundary(self) -> None:
        self.assertEqual(week_key(date(2025, 1, 1)), "12/30/2024")

    def test_normalize_maps_any_day_to_its_monday(self) -> None:
        self.assertEqual(normalize_week_key("01/03/2024"), "01/01/2024")
        self.assertEqual(normalize_week_key("01/01/2024"), "01/01/2024")

    def test_parse_rejects_other_formats(self) -> None:
        for bad in ("2024-01-01", "13/01/2024", "", "01/01/24"):
            with self.subTest(value=bad):
                with self.assertRaises(ValueError):
                    parse_week_key(bad)

    def test_week_dates_run_monday_to_sunday(self) -> None:
        dates = week_dates(date(2024, 1, 4))
        self.assertEqual(len(dates), 7)
        self.assertEqual(dates[0], date(2024, 1, 1))
        self.assertEqual(dates[6], date(2024, 1, 7))
        self.assertEqual(len(DAY_NAMES), 7)
        self.assertEqual(get_monday(date(2024, 1, 7)), date(2024, 1, 1))

    def test_navigation(self) -> None:
        self.assertEqual(shift_week(date(2024, 1, 1), 1), date(2024, 1, 8))
        self.assertEqual(shift_week(date(2024, 1, 1), -1), date(2023, 12, 25))
        self.assertEqual(adjacent_week_keys("01/01/2024"), ("12/25/2023", "01/08/2024"))


if __name__ == "__main__":
    unittest.main()

"""Display formatting: relative times, long dates, pagination windows."""
import unittest
from datetime import datetime, timezone

from uttarakhand_news.formatting import (
    format_long_date,
    format_time_ago,
    hours_since,
    pagination_window,
    parse_dt,
)


class TestFormatTimeAgo(unittest.TestCase):

    def test_bucket_boundaries_english(self):
        self.assertEqual(format_time_ago(0.5, "en"), "Now")
        self.assertEqual(format_time_ago(5.9, "en"), "5 hours ago")
        self.assertEqual(format_time_ago(30, "en"), "1 day ago")
        self.assertEqual(format_time_ago(47.9, "en"), "1 day ago")
        self.assertEqual(format_time_ago(48, "en"), "2 days ago")

    def test_bucket_boundaries_hindi(self):
        self.assertEqual(format_time_ago(0.5, "hi"), "अभी")
        self.assertEqual(format_time_ago(5.9, "hi"), "5 घंटे पहले")
        self.assertEqual(format_time_ago(48, "hi"), "2 दिन पहले")

    def test_missing_value_is_now(self):
        self.assertEqual(format_time_ago(None, "en"), "Now")
        self.assertEqual(format_time_ago(0, "en"), "Now")
        self.assertEqual(format_time_ago(float("nan"), "en"), "Now")
        self.assertEqual(format_time_ago(float("inf"), "hi"), "अभी")

    def test_singular_hour(self):
        self.assertEqual(format_time_ago(1.0, "en"), "1 hour ago")
        self.assertEqual(format_time_ago(23.99, "en"), "23 hours ago")


class TestDates(unittest.TestCase):

    def test_long_date_english(self):
        self.assertEqual(format_long_date("2025-01-24T10:45:33.443768Z", "en"), "January 24, 2025")

    def test_long_date_hindi(self):
        self.assertEqual(format_long_date("2025-01-24T10:45:33Z", "hi"), "24 जनवरी 2025")

    def test_long_date_uses_india_time(self):
        # 20:00 UTC is already the next day in IST
        self.assertEqual(format_long_date("2025-01-23T20:00:00Z", "en"), "January 24, 2025")

    def test_unparseable_date_is_blank(self):
        self.assertEqual(format_long_date("not a date", "en"), "")
        self.assertEqual(format_long_date(None, "hi"), "")

    def test_naive_timestamps_are_utc(self):
        dt = parse_dt("2025-01-24T10:00:00")
        self.assertEqual(dt, datetime(2025, 1, 24, 10, tzinfo=timezone.utc))

    def test_hours_since(self):
        published = datetime(2025, 1, 24, 10, tzinfo=timezone.utc)
        now = datetime(2025, 1, 24, 15, 30, tzinfo=timezone.utc)
        self.assertAlmostEqual(hours_since(published, now), 5.5)
        self.assertIsNone(hours_since(None, now))
        self.assertEqual(hours_since(now, published), 0.0)


class TestPaginationWindow(unittest.TestCase):

    def test_single_page_has_no_window(self):
        self.assertEqual(pagination_window(1, 1), [])
        self.assertEqual(pagination_window(1, 0), [])

    def test_window_is_centred(self):
        self.assertEqual(pagination_window(5, 10), [3, 4, 5, 6, 7])

    def test_window_clamps_at_edges(self):
        self.assertEqual(pagination_window(1, 10), [1, 2, 3, 4, 5])
        self.assertEqual(pagination_window(10, 10), [6, 7, 8, 9, 10])
        self.assertEqual(pagination_window(2, 3), [1, 2, 3])


if __name__ == '__main__':
    unittest.main()

"""Tests for datetime utility functions."""

import unittest
from datetime import datetime, timezone, timedelta

from grayline.space_time.pythonic_datetimes import (
    ensure_utc,
    get_utc_datetime,
    utc_now,
    wrap_longitude,
    NaiveDateTimeError,
)


class TestPythonicDatetimes(unittest.TestCase):
    """Test cases for datetime utility functions."""

    def test_ensure_utc(self):
        """Test ensuring datetime is in UTC."""
        dt_utc = datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(dt_utc), dt_utc)

        dt_naive = datetime(2025, 1, 1)
        with self.assertRaises(NaiveDateTimeError):
            ensure_utc(dt_naive)

        dt_est = datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        dt_utc = datetime(2025, 1, 1, 5, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(dt_est), dt_utc)

    def test_utc_now_is_aware(self):
        self.assertEqual(utc_now().utcoffset(), timedelta(0))

    def test_wrap_longitude(self):
        """Test longitude wrapping to [-180, 180)."""
        self.assertEqual(wrap_longitude(0), 0)
        self.assertEqual(wrap_longitude(179), 179)
        self.assertEqual(wrap_longitude(-180), -180)

        self.assertEqual(wrap_longitude(180), -180)
        self.assertEqual(wrap_longitude(360), 0)
        self.assertEqual(wrap_longitude(-360), 0)
        self.assertEqual(wrap_longitude(540), -180)
        self.assertEqual(wrap_longitude(-181), 179)

    def test_wrap_longitude_custom_range(self):
        self.assertEqual(wrap_longitude(370, 0, 360), 10)
        self.assertEqual(wrap_longitude(-10, 0, 360), 350)

    def test_get_utc_datetime(self):
        dt = get_utc_datetime(2024, 6, 21, 12, 30)
        self.assertEqual(dt, datetime(2024, 6, 21, 12, 30, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()

"""Tests for sidereal time calculations."""

import unittest
from datetime import datetime, timedelta, timezone

from grayline.space_time.sidereal import (
    gmst_degrees_from_datetime,
    gmst_degrees_from_julian,
    local_sidereal_time_degrees,
)


class TestSiderealTime(unittest.TestCase):
    """Test cases for sidereal time calculations."""

    def test_gmst_meeus_midnight(self):
        # Astronomical Algorithms, Example 12.a: 1987 April 10, 0h UT
        # GMST = 13h 10m 46.3668s
        self.assertAlmostEqual(gmst_degrees_from_julian(2446895.5), 197.693195, delta=0.005)

    def test_gmst_meeus_evening(self):
        # Astronomical Algorithms, Example 12.b: 1987 April 10, 19h21m00s UT
        dt = datetime(1987, 4, 10, 19, 21, tzinfo=timezone.utc)
        self.assertAlmostEqual(gmst_degrees_from_datetime(dt), 128.7378734, delta=0.005)

    def test_gmst_at_j2000(self):
        dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        self.assertAlmostEqual(gmst_degrees_from_datetime(dt), 280.46061837, places=4)

    def test_gmst_range(self):
        start = datetime(1970, 1, 1, tzinfo=timezone.utc)
        for hours in range(0, 24 * 365 * 130, 1237):
            gmst = gmst_degrees_from_datetime(start + timedelta(hours=hours, minutes=17))
            self.assertGreaterEqual(gmst, 0.0)
            self.assertLess(gmst, 360.0)

    def test_gmst_gains_on_solar_time(self):
        # One solar day later the sidereal clock has gained ~0.9856 degrees
        jd = 2460482.5
        gained = (gmst_degrees_from_julian(jd + 1) - gmst_degrees_from_julian(jd)) % 360
        self.assertAlmostEqual(gained, 0.9856, places=3)

    def test_local_sidereal_time(self):
        jd = 2446895.5
        gmst = gmst_degrees_from_julian(jd)
        self.assertAlmostEqual(local_sidereal_time_degrees(jd, 15), (gmst + 15) % 360)
        self.assertAlmostEqual(local_sidereal_time_degrees(jd, -15), (gmst - 15) % 360)
        lst_wrap = local_sidereal_time_degrees(jd, 179)
        self.assertGreaterEqual(lst_wrap, 0.0)
        self.assertLess(lst_wrap, 360.0)


if __name__ == "__main__":
    unittest.main()

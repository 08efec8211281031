"""Tests for shared CLI helpers."""

import logging
import unittest
from datetime import datetime, timedelta, timezone

from grayline.cli.common import configure_logging, parse_time_input


class TestParseTimeInput(unittest.TestCase):
    def test_now(self) -> None:
        dt = parse_time_input("now")
        self.assertEqual(dt.utcoffset(), timedelta(0))

    def test_naive_iso_is_utc(self) -> None:
        self.assertEqual(
            parse_time_input("2024-06-21T06:30:00"),
            datetime(2024, 6, 21, 6, 30, tzinfo=timezone.utc),
        )

    def test_zulu_suffix(self) -> None:
        self.assertEqual(
            parse_time_input("2024-06-21T06:30:00Z"),
            datetime(2024, 6, 21, 6, 30, tzinfo=timezone.utc),
        )

    def test_offset_preserved(self) -> None:
        dt = parse_time_input("2024-06-21T06:30:00+02:00")
        self.assertEqual(dt.utcoffset(), timedelta(hours=2))

    def test_julian_date(self) -> None:
        self.assertEqual(
            parse_time_input("2460482.5"), datetime(2024, 6, 21, tzinfo=timezone.utc)
        )

    def test_invalid(self) -> None:
        with self.assertRaises(ValueError):
            parse_time_input("tomorrow-ish")
        with self.assertRaises(ValueError):
            parse_time_input("1e300")


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging({})

    def test_levels(self) -> None:
        configure_logging({"quiet": True})
        self.assertEqual(logging.getLogger("grayline").level, logging.ERROR)
        configure_logging({"debug": True})
        self.assertEqual(logging.getLogger("grayline").level, logging.DEBUG)
        configure_logging({"verbose": 1})
        self.assertEqual(logging.getLogger("grayline").level, logging.INFO)
        configure_logging({})
        self.assertEqual(logging.getLogger("grayline").level, logging.WARNING)

    def test_child_loggers_follow(self) -> None:
        configure_logging({"debug": True})
        self.assertEqual(
            logging.getLogger("grayline.terminator.sampler").level, logging.DEBUG
        )


if __name__ == "__main__":
    unittest.main()

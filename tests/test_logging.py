"""Tests for grayline logging setup."""

import logging
import os
import unittest
from unittest.mock import patch

from grayline.logging import _get_log_level, get_logger


class TestLogging(unittest.TestCase):
    def test_env_level(self) -> None:
        with patch.dict(os.environ, {"GRAYLINE_LOG_LEVEL": "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with patch.dict(os.environ, {"GRAYLINE_LOG_LEVEL": "bogus"}):
            self.assertEqual(_get_log_level(), logging.WARNING)

    def test_get_logger_configures_once(self) -> None:
        logger = get_logger("grayline.tests.example")
        again = get_logger("grayline.tests.example")
        self.assertIs(logger, again)
        self.assertEqual(len(logger.handlers), 1)


if __name__ == "__main__":
    unittest.main()

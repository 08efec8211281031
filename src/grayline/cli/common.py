"""
Command-line interface utilities for grayline.

This module provides logging configuration and input parsing shared by
the grayline commands.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..logging import set_log_level
from ..space_time.julian import julian_to_datetime
from ..space_time.pythonic_datetimes import utc_now


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line options as a dictionary
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)

    logging.getLogger("grayline").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_time_input(time_str: str) -> datetime:
    """Parse a time given on the command line.

    Args:
        time_str: Time string in one of these formats:
            - "now"
            - Julian date (e.g., "2460482.5")
            - ISO format with timezone (e.g., "2024-06-21T00:00:00+00:00")
            - ISO format without timezone, taken as UTC

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If time string is invalid
    """
    if time_str.lower() == "now":
        return utc_now()

    try:
        jd = float(time_str.strip("' "))
    except ValueError:
        jd = None
    if jd is not None:
        try:
            return julian_to_datetime(jd)
        except (ValueError, OverflowError):
            raise ValueError(f"Julian date out of range: {time_str}")

    value = time_str.strip()
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid time format: {time_str}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

"""Parsing of WMATA timestamps.

WMATA publishes local wall-clock times without an offset. They are pinned to
Eastern Standard Time (UTC-05:00) regardless of daylight saving, so parsed
values during EDT are one hour off true UTC.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

EASTERN_STANDARD_TIME = timezone(timedelta(hours=-5), "EST")
WMATA_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_eastern_datetime(value: Any) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS`` as a fixed-offset EST datetime.

    Naive datetimes are pinned to EST; aware ones pass through unchanged.

    Raises:
        ValueError: If ``value`` is not a string in the expected format.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=EASTERN_STANDARD_TIME)
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {type(value).__name__}")
    return datetime.strptime(value, WMATA_DATETIME_FORMAT).replace(tzinfo=EASTERN_STANDARD_TIME)


def parse_optional_eastern_datetime(value: Any) -> datetime | None:
    """Like ``parse_eastern_datetime`` but maps null or unparseable input to None."""
    try:
        return parse_eastern_datetime(value)
    except ValueError:
        return None

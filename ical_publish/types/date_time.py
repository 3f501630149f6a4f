"""Library for encoding DATE-TIME values.

Every DATE-TIME is published as a UTC time, e.g. `19980119T070000Z`.
"""

from __future__ import annotations

import datetime
import logging

from ical_publish.compat import naive_datetime_compat
from .data_types import DATA_TYPE

__all__ = [
    "UTC_MAX",
    "UTC_MIN",
    "format_utc",
    "to_utc",
]

_LOGGER = logging.getLogger(__name__)

UTC_MIN = datetime.datetime.min.replace(tzinfo=datetime.UTC)
UTC_MAX = datetime.datetime.max.replace(tzinfo=datetime.UTC)


def to_utc(value: datetime.datetime) -> datetime.datetime:
    """Convert a datetime to UTC.

    Naive values are interpreted in the timezone configured with
    `ical_publish.compat.naive_timezone` (UTC by default). Values outside of
    the representable range after conversion are clamped.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=naive_datetime_compat.get_naive_timezone())
    try:
        return value.astimezone(datetime.UTC)
    except OverflowError:
        offset = value.utcoffset() or datetime.timedelta()
        _LOGGER.debug("Clamping out of range datetime %s", value)
        return UTC_MIN if offset > datetime.timedelta() else UTC_MAX


def format_utc(value: datetime.datetime) -> str:
    """Format a UTC datetime as a fixed width DATE-TIME value."""
    # strftime does not zero pad years before 1000 on all platforms
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"T{value.hour:02d}{value.minute:02d}{value.second:02d}Z"
    )


@DATA_TYPE.register()
class DateTimeEncoder:
    """Class to handle encoding for a datetime.datetime."""

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.datetime

    @classmethod
    def __encode_property_value__(cls, value: datetime.datetime) -> str:
        """Serialize a datetime as a UTC ICS value."""
        return format_utc(to_utc(value))

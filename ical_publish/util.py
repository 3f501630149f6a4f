"""Utility methods used by multiple components."""

from __future__ import annotations

import datetime

__all__ = [
    "dtstamp_factory",
    "local_timezone",
    "PRODID",
]


PRODID = "-//smab/iCalendar 2.0//EN"


def dtstamp_factory() -> datetime.datetime:
    """Factory method for new event timestamps to facilitate mocking."""
    return datetime.datetime.now(tz=datetime.UTC)


def local_timezone() -> datetime.tzinfo:
    """Get the local timezone of the host."""
    if local_tz := datetime.datetime.now().astimezone().tzinfo:
        return local_tz
    return datetime.timezone.utc

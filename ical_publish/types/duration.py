"""Library for encoding DURATION values used as alarm triggers."""

import datetime

from .data_types import DATA_TYPE

__all__ = ["decompose_duration"]


def decompose_duration(duration: datetime.timedelta) -> tuple[int, int, int]:
    """Return the whole days and the hour and minute remainders of a duration.

    The sign of the duration is ignored. Seconds are dropped.
    """
    duration = abs(duration)
    hours, seconds = divmod(duration.seconds, 3600)
    return (duration.days, hours, seconds // 60)


@DATA_TYPE.register()
class DurationEncoder:
    """Class that can encode DURATION values."""

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.timedelta

    @classmethod
    def __encode_property_value__(cls, duration: datetime.timedelta) -> str:
        """Serialize a time delta as a trigger before the start of an event.

        The value is always written as a negative offset with all of the
        day, hour and minute parts present e.g. `-PT0D1H30M`, regardless
        of the sign of the duration.
        """
        days, hours, minutes = decompose_duration(duration)
        return f"-PT{days}D{hours}H{minutes}M"

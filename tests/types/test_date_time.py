"""Tests for DATE-TIME values."""

import datetime
import zoneinfo

import pytest

from ical_publish.compat import naive_timezone
from ical_publish.types import DATA_TYPE
from ical_publish.types.date_time import UTC_MAX, UTC_MIN, format_utc, to_utc

TOKYO = zoneinfo.ZoneInfo("Asia/Tokyo")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime.datetime(2022, 11, 10, 19, 30, tzinfo=datetime.UTC), "20221110T193000Z"),
        (datetime.datetime(2022, 11, 10, 19, 30, 5, 999999, tzinfo=datetime.UTC), "20221110T193005Z"),
        (datetime.datetime(2023, 1, 1, 8, 0, tzinfo=TOKYO), "20221231T230000Z"),
        (datetime.datetime(2022, 3, 4, 5, 6, 7), "20220304T050607Z"),
        (UTC_MIN, "00010101T000000Z"),
        (datetime.datetime(999, 2, 3, 4, 5, 6, tzinfo=datetime.UTC), "09990203T040506Z"),
        (UTC_MAX, "99991231T235959Z"),
    ],
)
def test_encode(value: datetime.datetime, expected: str) -> None:
    """Test encoding datetimes as fixed width UTC values."""
    assert DATA_TYPE.encode(value) == expected


def test_to_utc_naive() -> None:
    """Test naive values are interpreted as UTC by default."""
    assert to_utc(datetime.datetime(2022, 3, 4, 5, 6, 7)) == datetime.datetime(
        2022, 3, 4, 5, 6, 7, tzinfo=datetime.UTC
    )
    with naive_timezone(TOKYO):
        assert to_utc(datetime.datetime(2022, 3, 4, 5, 6, 7)) == datetime.datetime(
            2022, 3, 3, 20, 6, 7, tzinfo=datetime.UTC
        )


def test_to_utc_clamped() -> None:
    """Test values outside of the supported range are clamped."""
    assert to_utc(datetime.datetime.min.replace(tzinfo=TOKYO)) == UTC_MIN
    with naive_timezone(datetime.timezone(datetime.timedelta(hours=-3))):
        assert to_utc(datetime.datetime.max) == UTC_MAX


def test_format_utc() -> None:
    """Test the fixed width format."""
    value = format_utc(datetime.datetime(1, 2, 3, 4, 5, 6, tzinfo=datetime.UTC))
    assert value == "00010203T040506Z"
    assert len(value) == 16

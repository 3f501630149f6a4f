"""Test fixtures."""

from collections.abc import Generator
import datetime
from unittest.mock import patch

import pytest

DTSTAMP = datetime.datetime(2024, 1, 15, 9, 0, 0, tzinfo=datetime.UTC)


@pytest.fixture(name="dtstamp")
def mock_dtstamp() -> Generator[datetime.datetime, None, None]:
    """Mock out the timestamp given to new events."""
    with patch("ical_publish.event.dtstamp_factory", return_value=DTSTAMP):
        yield DTSTAMP

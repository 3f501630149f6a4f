"""Tests for PRIORITY types."""

import pytest

from ical_publish.types import DATA_TYPE, Priority


@pytest.mark.parametrize(
    ("priority", "expected"),
    [
        (Priority.NO_PRIORITY, "0"),
        (Priority.HIGH, "1"),
        (Priority.NORMAL, "5"),
        (Priority.LOW, "9"),
    ],
)
def test_priority(priority: Priority, expected: str) -> None:
    """Test priority is encoded as its integer value."""
    assert DATA_TYPE.encode(priority) == expected


def test_priority_values() -> None:
    """Test the priority values."""
    assert Priority(1) == Priority.HIGH
    assert Priority(9) == Priority.LOW
    with pytest.raises(ValueError):
        Priority(10)

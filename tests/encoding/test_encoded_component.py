"""Tests for encoding components as content lines."""

import datetime

from ical_publish.encoding import EncodedComponent, EncodedProperty
from ical_publish.types import Priority


def test_encode_property() -> None:
    """Test encoding a single property."""
    assert EncodedProperty(name="summary", value="Text").ics() == "SUMMARY:Text"
    assert EncodedProperty(name="DESCRIPTION", value="").ics() == "DESCRIPTION:"


def test_encode_component() -> None:
    """Test encoding a component with properties."""
    component = EncodedComponent(name="vevent")
    component.add_property("UID", "abc")
    component.add_property("PRIORITY", Priority.HIGH)
    component.add_property(
        "DTSTART", datetime.datetime(2022, 1, 2, 3, 4, 5, tzinfo=datetime.UTC)
    )
    assert component.ics() == (
        "BEGIN:VEVENT\r\n"
        "UID:abc\r\n"
        "PRIORITY:1\r\n"
        "DTSTART:20220102T030405Z\r\n"
        "END:VEVENT\r\n"
    )


def test_unterminated_component() -> None:
    """Test a component may leave the END line unterminated."""
    component = EncodedComponent(name="VCALENDAR", terminated=False)
    assert component.ics() == "BEGIN:VCALENDAR\r\nEND:VCALENDAR"


def test_nested_components() -> None:
    """Test nested components are written after the properties."""
    child = EncodedComponent(name="VALARM")
    child.add_property("ACTION", "DISPLAY")
    parent = EncodedComponent(name="VEVENT", components=[child, child])
    parent.add_property("UID", "abc")
    assert parent.ics() == (
        "BEGIN:VEVENT\r\n"
        "UID:abc\r\n"
        "BEGIN:VALARM\r\n"
        "ACTION:DISPLAY\r\n"
        "END:VALARM\r\n"
        "BEGIN:VALARM\r\n"
        "ACTION:DISPLAY\r\n"
        "END:VALARM\r\n"
        "END:VEVENT\r\n"
    )


def test_optional_property() -> None:
    """Test optional properties are only added when not blank."""
    component = EncodedComponent(name="VEVENT")
    component.add_optional_property("URL", "")
    component.add_optional_property("URL", " \t ")
    component.add_optional_property("CATEGORIES", " a,b ")
    assert component.properties == [EncodedProperty(name="CATEGORIES", value=" a,b ")]


def test_long_lines_not_folded() -> None:
    """Test long content lines are written on a single line."""
    component = EncodedComponent(name="VEVENT")
    component.add_property("DESCRIPTION", "x" * 200)
    assert component.ics() == f"BEGIN:VEVENT\r\nDESCRIPTION:{'x' * 200}\r\nEND:VEVENT\r\n"

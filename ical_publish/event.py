"""A grouping of component properties that describe a calendar event.

An event is an activity (e.g. a match from 7:30pm to 10pm on Thursday)
grouping of properties such as a summary, a location or a description. An
event takes up time on a calendar as an opaque time interval, but can
alternatively have transparency set to transparent to prevent blocking of
time as busy.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import logging
from typing import Any

from pydantic import Field, computed_field, field_validator

from .alarm import Alarm
from .component import ComponentModel
from .encoding import EncodedComponent
from .exceptions import CalendarValidationError
from .types import Priority, PropertyEnum
from .types.date_time import UTC_MIN
from .types.text import escape_newlines
from .util import dtstamp_factory

_LOGGER = logging.getLogger(__name__)

_DATE_ALIASES = {"start": "date_start", "end": "date_end"}


class Transparency(PropertyEnum):
    """Whether or not an event blocks time in busy time searches."""

    OPAQUE = "OPAQUE"
    """Blocks or opaque on busy time searches."""

    TRANSPARENT = "TRANSPARENT"
    """Transparent on busy time searches."""


class BusyStatus(PropertyEnum):
    """The busy status shown by Outlook for an event."""

    BUSY = "BUSY"
    FREE = "FREE"


def busy_status_for(transparency: Transparency | str) -> BusyStatus:
    """Return the Outlook busy status for the event transparency."""
    if transparency == Transparency.OPAQUE:
        return BusyStatus.BUSY
    return BusyStatus.FREE


class Event(ComponentModel):
    """A single event on a calendar.

    The start, end and timestamp are always published in UTC. Naive
    datetimes are interpreted as described in `ical_publish.compat`.

    The timestamp uses a factory method invoked with a lambda to facilitate
    mocking in unit tests.

    Example:
    ```python
    import datetime
    from ical_publish.event import Event, Transparency

    event = Event(
        uid="rbl-home-vs-away",
        summary="Home Team vs Away Team",
        start=datetime.datetime(2022, 11, 10, 19, 30, tzinfo=datetime.UTC),
        end=datetime.datetime(2022, 11, 10, 22, 30, tzinfo=datetime.UTC),
        transparency=Transparency.TRANSPARENT,
    )
    ```
    """

    uid: str = ""
    """An identifier for the event, expected to be unique by the caller."""

    date_start: datetime.datetime = UTC_MIN
    """The start time of the event."""

    date_end: datetime.datetime = UTC_MIN
    """The end time of the event."""

    timestamp: datetime.datetime = Field(default_factory=lambda: dtstamp_factory())
    """The date and time the event was created or last modified."""

    summary: str = ""
    """A short summary or subject for the event, also used as its title."""

    organizer: str = ""
    """The organizer of the event.

    May be a `mailto:` address, a url or just a name. Omitted when blank.
    """

    location: str = ""
    """The intended venue for the event."""

    priority: Priority = Priority.NORMAL
    """The relative priority of the event."""

    description: str = ""
    """A more complete description of the event than provided by the summary.

    Line breaks are replaced with a literal `\\n` when the value is set
    since a property value may not span lines. The original line breaks
    can't be recovered from the stored value.
    """

    transparency: Transparency = Transparency.OPAQUE
    """Whether or not the event is transparent to busy time searches."""

    url: str = ""
    """A url associated with the event. Omitted when blank."""

    all_day_event: bool = False
    """Marks the event as lasting all day.

    This is kept with the event data but does not change the published
    content.
    """

    categories: str = ""
    """Comma separated categories for the event. Omitted when blank."""

    alarms: list[Alarm] = Field(default_factory=list)
    """Reminder alarms for the event."""

    def __init__(self, **data: Any) -> None:
        """Initialize a Calendar Event.

        This method accepts keyword args with field names on the Event such as
        `summary`, `start`, `end`, `description`, etc.
        """
        for alias, name in _DATE_ALIASES.items():
            if alias not in data:
                continue
            if name in data:
                raise CalendarValidationError(
                    f"Failed to validate calendar EVENT component: "
                    f"only one of '{alias}' or '{name}' may be set"
                )
            data[name] = data.pop(alias)
        super().__init__(**data)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def busy_status(self) -> BusyStatus:
        """The Outlook busy status, derived from the transparency."""
        return busy_status_for(self.transparency)

    @field_validator("description", mode="before")
    @classmethod
    def _escape_description(cls, value: Any) -> Any:
        """Replace line breaks in the description as it is set."""
        if isinstance(value, str):
            return escape_newlines(value)
        return value

    def add_alarm(self, alarm: Alarm) -> Alarm:
        """Add a copy of the alarm to the event and return the copy."""
        owned = alarm.model_copy(deep=True)
        self.alarms.append(owned)
        return owned

    def __encode_component__(self) -> EncodedComponent:
        """Encode the event as a VEVENT component."""
        _LOGGER.debug("Encoding event %s with %d alarms", self.uid, len(self.alarms))
        component = EncodedComponent(name="VEVENT")
        component.add_property("UID", self.uid)
        component.add_property("TITLE", self.summary)
        component.add_property("SUMMARY", self.summary)
        component.add_property("PRIORITY", self.priority)
        component.add_optional_property("ORGANIZER", self.organizer)
        component.add_property("TRANSP", self.transparency)
        component.add_property("X-MICROSOFT-CDO-BUSYSTATUS", self.busy_status)
        component.add_property("LOCATION", self.location)
        component.add_property("DTSTART", self.date_start)
        component.add_property("DTEND", self.date_end)
        component.add_property("DTSTAMP", self.timestamp)
        component.add_property("DESCRIPTION", self.description)
        component.add_optional_property("CATEGORIES", self.categories)
        component.add_optional_property("URL", self.url)
        component.components.extend(
            alarm.__encode_component__() for alarm in self.alarms
        )
        return component

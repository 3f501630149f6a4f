"""The Calendar component, a named collection of events to publish."""

from __future__ import annotations

import logging

from pydantic import Field

from .component import ComponentModel
from .encoding import EncodedComponent
from .event import Event
from .util import PRODID

_LOGGER = logging.getLogger(__name__)

_VERSION = "2.0"
# Outlook needs both the version and the method to honor alarms
_METHOD = "PUBLISH"


class Calendar(ComponentModel):
    """A sequence of calendar properties and events.

    Example:
    ```python
    from ical_publish.calendar import Calendar

    calendar = Calendar(name="Badminton League", time_to_live_minutes=720)
    with open("league.ics", mode="w", newline="") as ics_file:
        ics_file.write(calendar.serialize())
    ```
    """

    product_id: str = PRODID
    """Identifies the application that produced the calendar."""

    name: str = ""
    """Display name shown in the calendar list of a client."""

    description: str = ""
    """Free text description of the calendar."""

    time_to_live_minutes: int = Field(default=1440, ge=0)
    """How often, in minutes, clients should refresh the calendar."""

    events: list[Event] = Field(default_factory=list)
    """Events associated with this calendar, published in order."""

    def add_event(self, event: Event) -> Event:
        """Add a copy of the event to the calendar and return the copy."""
        owned = event.model_copy(deep=True)
        self.events.append(owned)
        return owned

    def __encode_component__(self) -> EncodedComponent:
        """Encode the calendar as a VCALENDAR component."""
        _LOGGER.debug(
            "Encoding calendar %s with %d events", self.name, len(self.events)
        )
        component = EncodedComponent(name="VCALENDAR", terminated=False)
        component.add_property("PRODID", self.product_id)
        component.add_property("VERSION", _VERSION)
        component.add_property("METHOD", _METHOD)
        component.add_property("X-WR-CALNAME", self.name)
        component.add_property("X-WR-CALDESC", self.description)
        component.add_property("X-PUBLISHED-TTL", f"PT{self.time_to_live_minutes}M")
        component.components.extend(
            event.__encode_component__() for event in self.events
        )
        return component

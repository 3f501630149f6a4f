"""Alarm information for calendar components."""

from __future__ import annotations

import datetime

from pydantic import Field

from .component import ComponentModel
from .encoding import EncodedComponent
from .types import PropertyEnum


class Action(PropertyEnum):
    """Type of action invoked when alarm is triggered."""

    DISPLAY = "DISPLAY"
    """An alarm that displays the description text to the user."""

    AUDIO = "AUDIO"
    """An alarm that causes sound to be played to alert the user."""

    EMAIL = "EMAIL"
    """An email is composed and delivered to the attendees."""


class Alarm(ComponentModel):
    """An alarm component for an event.

    Example:
    ```python
    import datetime
    from ical_publish.alarm import Action, Alarm

    alarm = Alarm(trigger=datetime.timedelta(minutes=-15), action=Action.AUDIO)
    print(alarm.serialize())
    ```
    """

    trigger: datetime.timedelta = Field(default=datetime.timedelta(days=1))
    """Amount of time before the event that the alarm fires.

    Only the magnitude is used: the alarm is always published as firing
    before the event, whatever the sign of the duration.
    """

    action: Action = Action.DISPLAY
    """Action to be taken when the alarm is triggered."""

    description: str = "Reminder"
    """Text displayed to the user, or the body of an email."""

    def __encode_component__(self) -> EncodedComponent:
        """Encode the alarm as a VALARM component."""
        component = EncodedComponent(name="VALARM")
        component.add_property("TRIGGER", self.trigger)
        component.add_property("ACTION", self.action)
        component.add_property("DESCRIPTION", self.description)
        return component

"""Library for publishing calendars, events and alarms as iCalendar content.

This is a small producer of rfc5545 content aimed at publishing schedules
(e.g. sports league fixtures) that are subscribed to by calendar clients
such as Outlook or Google Calendar. Only encoding is supported, there is
no parsing of existing ics files.

Example:
```python
import datetime
from ical_publish.calendar import Calendar
from ical_publish.event import Event

calendar = Calendar(name="League fixtures")
calendar.add_event(
    Event(
        uid="home-vs-away",
        summary="Home Team vs Away Team",
        start=datetime.datetime(2022, 11, 10, 19, 30, tzinfo=datetime.UTC),
        end=datetime.datetime(2022, 11, 10, 22, 30, tzinfo=datetime.UTC),
    )
)
print(calendar.serialize())
```
"""

__all__ = [
    "alarm",
    "calendar",
    "compat",
    "diagnostics",
    "event",
    "exceptions",
    "publish",
    "types",
    "util",
]

"""Library for publishing a calendar in the format requested by a client.

A calendar is typically published from a web endpoint that either returns
an ics file to download, the ics content as plain text for debugging, or
the calendar data as json. This module holds the format selection and
rendering without depending on any web framework:

```python
from ical_publish.publish import negotiate_format, publish

fmt = negotiate_format(
    command=request.args.get("command"),
    accept=request.headers.get("Accept"),
)
published = publish(calendar, fmt)
return Response(published.content, media_type=published.media_type)
```
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .calendar import Calendar
from .diagnostics import redact_ics

__all__ = [
    "PublishFormat",
    "PublishedCalendar",
    "negotiate_format",
    "publish",
]

_LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"


class PublishFormat(str, enum.Enum):
    """Formats that a calendar can be published in."""

    ICS = "ics"
    """An ics file download."""

    TEXT = "text"
    """The ics content as plain text."""

    JSON = "json"
    """The calendar data model as json."""

    @property
    def media_type(self) -> str:
        """Return the media type of the content in this format."""
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    PublishFormat.ICS: "text/calendar",
    PublishFormat.TEXT: "text/plain",
    PublishFormat.JSON: "application/json",
}

# Explicit commands take precedence over the Accept header
_COMMANDS = {
    "FILE": PublishFormat.ICS,
    "TEXT": PublishFormat.TEXT,
    "JSON": PublishFormat.JSON,
}

_ACCEPT_MEDIA_TYPES = {
    media_type: publish_format for publish_format, media_type in _MEDIA_TYPES.items()
}


@dataclass(frozen=True)
class PublishedCalendar:
    """Content of a calendar rendered in a publish format."""

    content: bytes
    media_type: str
    filename: str | None = None
    """The download filename, only set for ics files."""


def _first_media_type(accept: str) -> str:
    """Return the first media type in an Accept header, without parameters."""
    return accept.split(",", 1)[0].split(";", 1)[0].strip().lower()


def negotiate_format(
    command: str | None = None, accept: str | None = None
) -> PublishFormat:
    """Select the publish format for a request.

    The command is a case insensitive `TEXT`, `FILE` or `JSON`. When it is
    missing or not recognized the first media type of the Accept header is
    used, falling back to an ics file.
    """
    if command and (publish_format := _COMMANDS.get(command.strip().upper())):
        return publish_format
    if accept and (
        publish_format := _ACCEPT_MEDIA_TYPES.get(_first_media_type(accept))
    ):
        return publish_format
    _LOGGER.debug(
        "No format selected by command=%s accept=%s, using ics", command, accept
    )
    return PublishFormat.ICS


def publish(
    calendar: Calendar,
    publish_format: PublishFormat = PublishFormat.ICS,
    filename: str | None = None,
) -> PublishedCalendar:
    """Render the calendar in the specified format.

    The filename defaults to the calendar name and is only used for an
    ics file download.
    """
    if publish_format == PublishFormat.JSON:
        content = calendar.model_dump_json()
    else:
        content = calendar.serialize()
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Publishing calendar:\n%s", redact_ics(calendar))

    if publish_format == PublishFormat.ICS:
        filename = filename or f"{calendar.name or 'calendar'}.ics"
    else:
        filename = None

    return PublishedCalendar(
        content=content.encode(ENCODING),
        media_type=publish_format.media_type,
        filename=filename,
    )

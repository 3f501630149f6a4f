"""Library for diagnostics or debugging information about published calendars.

Published calendars carry personal details such as event titles, locations
and organizers. Redaction works on the encoded component tree so that
structure, timestamps and status values stay visible in logs while the
values of any other property are masked.
"""

from __future__ import annotations

from .component import ComponentModel
from .encoding.component import EncodedComponent

__all__ = [
    "redact_component",
    "redact_ics",
]


PROPERTY_ALLOWLIST = {
    "PRODID",
    "VERSION",
    "METHOD",
    "X-PUBLISHED-TTL",
    "PRIORITY",
    "TRANSP",
    "X-MICROSOFT-CDO-BUSYSTATUS",
    "DTSTART",
    "DTEND",
    "DTSTAMP",
    "TRIGGER",
    "ACTION",
}
REDACT = "***"


def redact_component(
    component: EncodedComponent,
    property_allowlist: set[str] | None = None,
) -> EncodedComponent:
    """Return a copy of the component tree with non-allowlisted values masked.

    An empty allowlist masks every property value.
    """
    if property_allowlist is None:
        property_allowlist = PROPERTY_ALLOWLIST
    return component.redacted(property_allowlist, REDACT)


def redact_ics(
    model: ComponentModel,
    property_allowlist: set[str] | None = None,
) -> str:
    """Encode the model as ics content with non-allowlisted values masked."""
    return redact_component(model.__encode_component__(), property_allowlist).ics()

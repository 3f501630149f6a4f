"""Library for encoding rfc5545 components as text.

A component is a BEGIN/END block holding content lines for its own
properties followed by any nested components. Every content line is
terminated with CRLF. The one exception is that a component may leave its
END line unterminated, which is what a top level VCALENDAR does.

Content lines are not folded: calendar clients consuming published
calendars read the lines exactly as they are written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ical_publish.types import DATA_TYPE

from .property import EncodedProperty

_LOGGER = logging.getLogger(__name__)

CRLF = "\r\n"
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"


@dataclass
class EncodedComponent:
    """An rfc5545 component."""

    name: str
    properties: list[EncodedProperty] = field(default_factory=list)
    components: list[EncodedComponent] = field(default_factory=list)
    terminated: bool = True
    """Whether the END line is followed by a line terminator."""

    def add_property(self, name: str, value: Any) -> None:
        """Add a property, encoding the value based on its type."""
        self.properties.append(
            EncodedProperty(name=name, value=DATA_TYPE.encode(value))
        )

    def add_optional_property(self, name: str, value: str) -> None:
        """Add a text property only when the value is not blank."""
        if not value or not value.strip():
            _LOGGER.debug("Omitting blank property %s", name)
            return
        self.add_property(name, value)

    def redacted(self, allowlist: set[str], placeholder: str) -> EncodedComponent:
        """Return a copy with values of properties outside the allowlist replaced."""
        return EncodedComponent(
            name=self.name,
            properties=[
                prop
                if prop.name.upper() in allowlist
                else EncodedProperty(name=prop.name, value=placeholder)
                for prop in self.properties
            ],
            components=[
                component.redacted(allowlist, placeholder)
                for component in self.components
            ],
            terminated=self.terminated,
        )

    def ics(self) -> str:
        """Encode the component as rfc5545 content."""
        name = self.name.upper()
        contentlines = [f"{ATTR_BEGIN}:{name}"]
        contentlines.extend(prop.ics() for prop in self.properties)
        result = [CRLF.join(contentlines), CRLF]
        # Nested components write their own terminators
        result.extend(component.ics() for component in self.components)
        result.append(f"{ATTR_END}:{name}")
        if self.terminated:
            result.append(CRLF)
        return "".join(result)

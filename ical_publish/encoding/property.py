"""Library for the rfc5545 property content line.

A property is written as a single content line of the form `NAME:VALUE`.
Values are already encoded as text by the time they get here.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EncodedProperty:
    """An rfc5545 property."""

    name: str
    value: str

    def ics(self) -> str:
        """Encode the property as a content line without a line terminator."""
        return f"{self.name.upper()}:{self.value}"

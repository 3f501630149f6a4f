"""Utilities for defining enumerated property values."""

import enum

from .data_types import DATA_TYPE

__all__ = ["PropertyEnum"]


@DATA_TYPE.register()
class PropertyEnum(str, enum.Enum):
    """Base class for enumerations written to ics as their symbolic value.

    A str mixin enum would otherwise be matched by the TEXT encoder and
    written as its qualified name.
    """

    @classmethod
    def __encode_property_value__(cls, value: "PropertyEnum") -> str:
        """Serialize the enum member as its value."""
        return str(value.value)

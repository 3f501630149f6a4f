"""Library for the PRIORITY type."""

import enum

from .data_types import DATA_TYPE


@DATA_TYPE.register()
class Priority(enum.IntEnum):
    """Defines relative priority for a calendar component.

    The numeric values are defined by rfc5545 where 1 is the highest, 9
    is the lowest and 0 is undefined. Calendar clients expect the number
    rather than the name.
    """

    NO_PRIORITY = 0
    HIGH = 1
    NORMAL = 5
    LOW = 9

    @classmethod
    def __encode_property_value__(cls, value: "Priority") -> str:
        """Serialize the priority as its integer value."""
        return str(int(value))

"""Library for encoding INTEGER values."""

from .data_types import DATA_TYPE


@DATA_TYPE.register()
class IntEncoder:
    """Encode an INTEGER value."""

    @classmethod
    def __property_type__(cls) -> type:
        return int

    @classmethod
    def __encode_property_value__(cls, value: int) -> str:
        """Serialize an integer as an ICS value."""
        return str(int(value))

"""Library for encoding python values as rfc5545 property values."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)


class DataType(Protocol):
    """Defines the protocol implemented by data types in this library.

    The methods defined in this protocol are all optional.
    """

    @classmethod
    def __property_type__(cls) -> type:
        """Defines the python type to match, if different from the type itself."""

    @classmethod
    def __encode_property_value__(cls, value: Any) -> str:
        """Encoded the property from the object model to the ics string value."""


class Registry:
    """Registry of data types."""

    def __init__(
        self,
    ) -> None:
        """Initialize Registry."""
        self._encode_property_value: dict[type, Callable[[Any], str]] = {}

    def register(self) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a type."""

        def decorator(func: T_TYPE) -> T_TYPE:
            """Register decorated function."""
            data_type = func
            if data_type_func := getattr(func, "__property_type__", None):
                data_type = data_type_func()
            if encode_property_value := getattr(
                func, "__encode_property_value__", None
            ):
                self._encode_property_value[data_type] = encode_property_value
            return func

        return decorator

    @property
    def encode_property_value(self) -> dict[type, Callable[[Any], str]]:
        """Registry of encoders that run on the output data model to ics."""
        return self._encode_property_value

    def encode(self, value: Any) -> str:
        """Encode a python value as an ics property value.

        The most specific registered type in the method resolution order of
        the value wins, so a subclass may register its own encoder. Values
        of an unregistered type fall back to their string form.
        """
        for value_type in type(value).__mro__:
            if value_encoder := self._encode_property_value.get(value_type):
                return value_encoder(value)
        _LOGGER.debug("No encoder registered for %s, using str()", type(value))
        return str(value)


DATA_TYPE: Registry = Registry()

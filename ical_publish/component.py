"""Library for the pydantic model shared by all rfc5545 components.

Each component is a pydantic model holding plain public fields, so it can be
dumped as a dictionary or json like any other pydantic model. Encoding to ics
is done in two passes: the model builds an `EncodedComponent` tree with its
properties in a fixed order, then the tree is rendered as text.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .encoding import EncodedComponent
from .exceptions import CalendarValidationError

_LOGGER = logging.getLogger(__name__)


def _validation_message(name: str, err: ValidationError) -> str:
    message = [f"Failed to validate calendar {name.upper()} component"]
    for error in err.errors():
        if msg := error.get("msg"):
            message.append(msg)
    return ": ".join(message)


class ComponentModel(BaseModel):
    """Abstract class for rfc5545 component model."""

    model_config = ConfigDict(
        validate_assignment=True,
        # Nested components are copied so a parent owns its children
        revalidate_instances="always",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as err:
            _LOGGER.debug("Failed to validate component %s", err)
            raise CalendarValidationError(
                _validation_message(self.__class__.__name__, err),
                detailed_error=str(err),
            ) from err

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as err:
            _LOGGER.debug("Failed to validate assignment to %s: %s", name, err)
            raise CalendarValidationError(
                _validation_message(self.__class__.__name__, err),
                detailed_error=str(err),
            ) from err

    def __encode_component__(self) -> EncodedComponent:
        """Encode this object as a component to prepare for serialization."""
        raise NotImplementedError()

    def serialize(self) -> str:
        """Encode the component as rfc5545 iCalendar content."""
        return self.__encode_component__().ics()

    def __str__(self) -> str:
        return self.serialize()

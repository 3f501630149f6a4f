"""Library for encoding components into rfc5545 content lines."""

from .component import EncodedComponent
from .property import EncodedProperty

__all__ = [
    "EncodedComponent",
    "EncodedProperty",
]

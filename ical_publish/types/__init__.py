"""Library for encoding rfc5545 Property Value Data Types."""

# Import all types for the registry
from . import date_time, duration, integer, text  # noqa: F401
from .data_types import DATA_TYPE
from .enum import PropertyEnum
from .priority import Priority

__all__ = [
    "DATA_TYPE",
    "Priority",
    "PropertyEnum",
]

"""Compatibility layer for reproducing the behavior of older producers.

This module provides settings that change how input values are interpreted
without changing the output format.
"""

from .naive_datetime_compat import (
    enable_local_naive_datetimes,
    get_naive_timezone,
    naive_timezone,
)

__all__ = [
    "enable_local_naive_datetimes",
    "get_naive_timezone",
    "naive_timezone",
]

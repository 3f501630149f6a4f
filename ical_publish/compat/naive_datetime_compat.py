"""Compatibility layer for interpreting datetimes without timezone information.

All DATE-TIME values are published in UTC. A naive `datetime.datetime` has
no offset, so it is interpreted in a configurable timezone before the
conversion. The default is UTC which makes output independent of the host
running the publisher. Older producers assumed the host local time, which
can be restored with `enable_local_naive_datetimes`.
"""

from collections.abc import Generator
import contextlib
import contextvars
import datetime
import logging

from ical_publish.util import local_timezone

_LOGGER = logging.getLogger(__name__)


_naive_timezone: contextvars.ContextVar[datetime.tzinfo] = contextvars.ContextVar(
    "naive_timezone", default=datetime.UTC
)


@contextlib.contextmanager
def naive_timezone(tzinfo: datetime.tzinfo) -> Generator[None, None, None]:
    """Context manager to interpret naive datetimes in the specified timezone."""
    _LOGGER.debug("Interpreting naive datetimes in timezone %s", tzinfo)
    token = _naive_timezone.set(tzinfo)
    try:
        yield
    finally:
        _naive_timezone.reset(token)


@contextlib.contextmanager
def enable_local_naive_datetimes() -> Generator[None, None, None]:
    """Context manager to interpret naive datetimes in the host local time."""
    with naive_timezone(local_timezone()):
        yield


def get_naive_timezone() -> datetime.tzinfo:
    """Return the timezone used for naive datetimes."""
    return _naive_timezone.get()

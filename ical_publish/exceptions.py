"""Exceptions for ical_publish library."""


class CalendarError(Exception):
    """Base exception for all ical_publish errors."""


class CalendarValidationError(CalendarError):
    """Exception raised when a component is populated with invalid values.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the full pydantic validation
    report, useful for debugging purposes.

    Serializing a component never raises this error. It is only raised while
    constructing or assigning fields on a component.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarValidationError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error

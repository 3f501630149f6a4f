"""Library for encoding TEXT values."""

from .data_types import DATA_TYPE

__all__ = ["escape_newlines"]

NEWLINE_ESCAPE = "\\n"


def escape_newlines(value: str) -> str:
    """Replace all line breaks with the two character escape sequence `\\n`.

    A property value may not contain a raw line break, so both CRLF and LF
    are replaced. This is lossy: a literal `\\n` already present in the value
    can no longer be told apart from a converted line break.
    """
    return value.replace("\r\n", NEWLINE_ESCAPE).replace("\n", NEWLINE_ESCAPE)


@DATA_TYPE.register()
class TextEncoder:
    """Encode an rfc5545 TEXT value."""

    @classmethod
    def __property_type__(cls) -> type:
        return str

    @classmethod
    def __encode_property_value__(cls, value: str) -> str:
        """Serialize text as an ICS value.

        Values are written verbatim. Callers that accept free text are
        expected to escape it when it is set on the model.
        """
        return value

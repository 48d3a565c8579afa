"""Exception hierarchy for urlencoder.

All exceptions inherit from UrlEncoderError for easy catching of any
urlencoder-specific error.
"""

from __future__ import annotations


class UrlEncoderError(Exception):
    """Base exception for all urlencoder errors."""

    pass


class MalformedEscapeError(UrlEncoderError, ValueError):
    """Raised when decoding finds an invalid percent-escape.

    Examples:
        - Truncated escape (``%`` followed by fewer than two characters)
        - Non-hexadecimal characters after ``%`` (``%xx``, ``%-1``)

    Attributes:
        source: The text being decoded
        position: Index of the offending ``%`` in ``source``
        sequence: The escape text as found (at most three characters)
    """

    def __init__(self, message: str, source: str, position: int) -> None:
        super().__init__(message)
        self.source = source
        self.position = position
        self.sequence = source[position : position + 3]

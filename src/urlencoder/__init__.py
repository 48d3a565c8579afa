"""urlencoder: Percent-Encoding Codec for URL Components

A small library that percent-encodes and decodes text so the result is safe
both as an RFC 3986 URI component and as an application/x-www-form-urlencoded
value.

Key Features:
- Single pass over the input, no copy when nothing needs escaping
- UTF-8 escapes with uppercase hex digits
- Extra allowed characters and space/plus substitution
- Strict escape validation on decode

Quick Start:
    >>> from urlencoder import encode, decode
    >>> encode("a test &")
    'a%20test%20%26'
    >>> decode("a%20test%20%26")
    'a test &'
"""

from __future__ import annotations

from . import _logging  # noqa: F401  (installs the package NullHandler)
from .codec import RFC3986_UNRESERVED_CHARS, UNRESERVED_CHARS, decode, encode, is_unreserved
from .exceptions import MalformedEscapeError, UrlEncoderError
from .options import UrlCodec

__version__ = "1.0.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "is_unreserved",
    "UNRESERVED_CHARS",
    "RFC3986_UNRESERVED_CHARS",
    # Options
    "UrlCodec",
    # Exceptions
    "UrlEncoderError",
    "MalformedEscapeError",
    # Version
    "__version__",
]

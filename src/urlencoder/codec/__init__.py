"""Percent-encoding codec for URL components.

This module provides the character classifier and the encode/decode
transforms.
"""

from __future__ import annotations

from .charset import RFC3986_UNRESERVED_CHARS, UNRESERVED_CHARS, is_unreserved
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "is_unreserved",
    "UNRESERVED_CHARS",
    "RFC3986_UNRESERVED_CHARS",
]

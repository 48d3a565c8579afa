"""Percent-decoder for URL components.

This module provides the decode() function that turns ``%XX`` escapes back
into text. Consecutive escapes are collected as raw octets and decoded as
UTF-8 in one step, so multi-byte sequences split over several escapes come
back intact.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import MalformedEscapeError

logger = logging.getLogger(__name__)

_HEX_CHARS = frozenset("0123456789ABCDEFabcdef")


def _flush(out: list[str], pending: bytearray) -> None:
    if pending:
        out.append(pending.decode("utf-8", "replace"))
        pending.clear()


def decode(source: Optional[str], plus_to_space: bool = False) -> Optional[str]:
    """Decode percent-escaped text.

    Args:
        source: Text to decode (``None`` and ``""`` are returned unchanged)
        plus_to_space: If True, decode ``+`` as a space

    Returns:
        The decoded text, or ``source`` itself when it held no escapes

    Raises:
        MalformedEscapeError: If a ``%`` is not followed by two hex digits

    Note:
        Octet runs that are not valid UTF-8 are decoded with U+FFFD
        replacement characters; only the escape syntax is validated.

    Examples:
        ```python
        from urlencoder import decode

        decode("a%20test%20%26")                  # 'a test &'
        decode("foo+bar", plus_to_space=True)     # 'foo bar'
        decode("sdkjfh%6")                        # raises MalformedEscapeError
        ```
    """
    if not source:
        return source

    length = len(source)
    out: Optional[list[str]] = None
    pending = bytearray()
    i = 0
    while i < length:
        ch = source[i]

        if ch == "%":
            if out is None:
                out = [source[:i]]

            if length < i + 3:
                logger.debug("Truncated escape at index %d", i)
                raise MalformedEscapeError(
                    f"Illegal escape sequence at index {i}: {source[i:]!r}", source, i
                )
            hi = source[i + 1]
            lo = source[i + 2]
            if hi not in _HEX_CHARS or lo not in _HEX_CHARS:
                logger.debug("Non-hex escape at index %d", i)
                raise MalformedEscapeError(
                    f"Illegal characters in escape sequence at index {i}: "
                    f"{source[i:i + 3]!r}",
                    source,
                    i,
                )

            pending.append(int(hi + lo, 16))
            i += 3
            continue

        if plus_to_space and ch == "+":
            if out is None:
                out = [source[:i]]
            _flush(out, pending)
            out.append(" ")
            i += 1
            continue

        if out is not None:
            _flush(out, pending)
            out.append(ch)
        i += 1

    if out is None:
        return source

    _flush(out, pending)
    return "".join(out)

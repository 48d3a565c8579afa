"""Unreserved character classification.

The table covers code points 0-126 and flags the characters that never need
escaping under both RFC 3986 and the application/x-www-form-urlencoded
percent-encode set: ASCII letters, digits, ``-``, ``.`` and ``_``.

``~`` is unreserved in RFC 3986 but not in the form-encoding set, so it is
left out of the table. Callers that want the strict RFC 3986 profile can pass
``RFC3986_UNRESERVED_CHARS`` (or just ``"~"``) as the encoder's allow set.
"""

from __future__ import annotations

import string

# Highest code point covered by the table ('~')
TABLE_LIMIT = 0x7E

UNRESERVED_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "-._")

RFC3986_UNRESERVED_CHARS: frozenset[str] = UNRESERVED_CHARS | {"~"}

_UNRESERVED_TABLE: tuple[bool, ...] = tuple(
    chr(cp) in UNRESERVED_CHARS for cp in range(TABLE_LIMIT + 1)
)


def is_unreserved(ch: str) -> bool:
    """Return True if ``ch`` can always be left unescaped.

    Args:
        ch: A single character

    Returns:
        True for ASCII letters, digits, ``-``, ``.`` and ``_``; False for
        everything else, including any character above ``~``.

    Example:
        >>> is_unreserved("a"), is_unreserved(" "), is_unreserved("é")
        (True, False, False)
    """
    cp = ord(ch)
    return cp <= TABLE_LIMIT and _UNRESERVED_TABLE[cp]

"""Main CLI entry point for urlencoder.

The command line is ``urlencoder [-e|-d] text``. Only the first of two
arguments can be a flag; the text is always taken as-is, so text starting
with a dash works (``urlencoder -d -x``).
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from .._logging import configure_logging
from ..codec import decode, encode
from ..exceptions import MalformedEscapeError

logger = logging.getLogger(__name__)

USAGE = (
    "Usage : urlencoder [-ed] text\n"
    "Encode and decode URL parameters.\n"
    "  -e  encode (default)\n"
    "  -d  decode\n"
)

MODES = {"-e": "encode", "-d": "decode"}

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MALFORMED = 2


class UsageError(Exception):
    """Raised when the command line does not match ``[-e|-d] text``."""


def parse_args(argv: Sequence[str]) -> tuple[str, str]:
    """Split the command line into a mode and the text.

    Args:
        argv: Arguments without the program name

    Returns:
        ``(mode, text)`` with mode ``"encode"`` or ``"decode"``

    Raises:
        UsageError: On wrong arity, an unknown flag, or a lone flag
    """
    if len(argv) == 1:
        if argv[0].startswith("-"):
            raise UsageError(f"missing text after {argv[0]!r}")
        return "encode", argv[0]

    if len(argv) == 2:
        if argv[0] not in MODES:
            raise UsageError(f"unrecognized flag {argv[0]!r}")
        return MODES[argv[0]], argv[1]

    raise UsageError(f"expected 1 or 2 arguments, got {len(argv)}")


def run(argv: Sequence[str]) -> tuple[str, int]:
    """Run the command line and return its output and exit status.

    Args:
        argv: Arguments without the program name

    Returns:
        ``(output, status)``; the output goes to stdout when status is 0 and
        to stderr otherwise
    """
    try:
        mode, text = parse_args(argv)
    except UsageError as e:
        logger.debug("Invalid arguments %r: %s", list(argv), e)
        return USAGE, EXIT_USAGE

    logger.debug("Mode: %s", mode)
    if mode == "decode":
        try:
            return decode(text), EXIT_OK
        except MalformedEscapeError as e:
            return f"Error: {e}\n", EXIT_MALFORMED

    return encode(text), EXIT_OK


def write(stream: TextIO, text: str) -> None:
    """Write ``text`` to ``stream``, escaping what its encoding cannot hold."""
    encoding = getattr(stream, "encoding", None) or "utf-8"
    stream.write(text.encode(encoding, "backslashreplace").decode(encoding))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the urlencoder CLI.

    Returns:
        Exit code (0 for success, 1 for bad arguments, 2 for a malformed escape)
    """
    configure_logging()
    if argv is None:
        argv = sys.argv[1:]

    output, status = run(argv)
    if status == EXIT_OK:
        write(sys.stdout, output + "\n")
    else:
        write(sys.stderr, output)
    return status


if __name__ == "__main__":
    sys.exit(main())

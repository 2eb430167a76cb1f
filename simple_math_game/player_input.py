from __future__ import annotations

import logging
import re
import sys
from typing import TextIO

log = logging.getLogger(__name__)

# Bounds of the integer type the answers were originally read into.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Plain base-10 only: no underscores, no non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_ECHO_LIMIT = 20


def _is_int_text(text: str) -> bool:
    return _INT_PATTERN.fullmatch(text) is not None


def _within(text: str, low: int, high: int) -> bool:
    # Longer digit strings than either bound cannot be in range; skip int()
    # so huge lines never reach the interpreter's conversion limit.
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > max(len(str(abs(low))), len(str(abs(high)))):
        return False
    return low <= int(text) <= high


def _echo(text: str) -> str:
    if len(text) <= _ECHO_LIMIT:
        return text
    return text[:_ECHO_LIMIT] + "..."


class PlayerInput:
    """Blocking line reader that only hands back integers in a closed range.

    Bad lines are answered with a message naming the expected range and the
    read is retried; there is no retry limit.  End of input raises
    ``EOFError`` so the caller can wind down.
    """

    def __init__(self, *, stdin: TextIO | None = None, out: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._out = out if out is not None else sys.stdout

    def read_int(self, low: int | None = None, high: int | None = None) -> int:
        """Read until a line parses to an int in ``[low, high]``.

        ``read_int(high)`` reads in ``[1, high]``; ``read_int()`` accepts any
        32-bit signed integer.
        """

        if low is None:
            low, high = INT_MIN, INT_MAX
        elif high is None:
            low, high = 1, low
        if low > high:
            raise ValueError("low must be <= high")

        while True:
            line = self._stdin.readline()
            if line == "":
                raise EOFError("input closed")
            text = line.strip()
            if not _is_int_text(text):
                log.debug("rejected non-integer input %r", _echo(text))
                self._write(
                    f"Invalid input: '{_echo(text)}' is not an integer. "
                    f"Enter an integer between {low} and {high} inclusive"
                )
                continue
            if not _within(text, low, high):
                log.debug("rejected out-of-range input %s (expected %d..%d)", _echo(text), low, high)
                self._write(
                    f"Invalid input: {_echo(text)} is out of range. "
                    f"Enter an integer between {low} and {high} inclusive"
                )
                continue
            return int(text)

    def _write(self, message: str) -> None:
        self._out.write(message + "\n")
        self._out.flush()

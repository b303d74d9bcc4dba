"""Conversions between integers and their decimal text."""

from __future__ import annotations

import sys
from typing import TextIO

_WHITESPACE = " \n\t\f\v\r"
_DIGITS = "0123456789"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return _wrap32(-value if negative else value)


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(int(n))


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of an integer to stream (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(itoa(n))
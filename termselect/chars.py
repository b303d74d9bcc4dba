"""ASCII character classification and case conversion.

Each function takes a code point as an int or a one-character string.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 97 <= code <= 122 or 65 <= code <= 90


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    code = _code(c)
    return 48 <= code <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    code = _code(c)
    return 0 <= code <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    code = _code(c)
    return 32 <= code <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    result = code + 32 if 65 <= code <= 90 else code
    return chr(result) if isinstance(c, str) else result


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    result = code - 32 if 97 <= code <= 122 else code
    return chr(result) if isinstance(c, str) else result
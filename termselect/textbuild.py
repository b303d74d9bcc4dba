"""Building new text from existing text: copying, concatenating and extracting.

Text is treated as a terminated string: anything after a NUL character is
ignored. Functions return new strings rather than filling buffers.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strcat(left: str, right: str) -> str:
    """Right appended to left."""
    return _terminated(left) + _terminated(right)


def strncat(left: str, right: str, n: int) -> str:
    """At most the first n characters of right appended to left."""
    _non_negative(n, "n")
    return _terminated(left) + _terminated(right)[:n]


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had:
    len(dest) + len(src), or len(src) + size when dest is already longer than
    size (dest is then left unchanged).
    """
    _non_negative(size, "size")
    dest = _terminated(dest)
    src = _terminated(src)
    if len(dest) > size:
        return dest, len(src) + size
    room = max(size - 1 - len(dest), 0)
    return dest + src[:room], len(dest) + len(src)


def strncpy(src: str, n: int) -> str:
    """Exactly n characters: the start of src, padded with NUL characters."""
    _non_negative(n, "n")
    head = _terminated(src)[:n]
    return head + "\0" * (n - len(head))


def strdup(text: str) -> str:
    """A copy of the text up to its terminator."""
    return _terminated(text)


def strndup(text: str, n: int) -> str:
    """A copy of at most the first n characters of the text."""
    _non_negative(n, "n")
    return _terminated(text)[:n]


def strjoin(left: Optional[str], right: Optional[str]) -> Optional[str]:
    """Left followed by right; None when either is missing."""
    if left is None or right is None:
        return None
    return strcat(left, right)


def strjoinch(text: Optional[str], c: CharLike) -> Optional[str]:
    """Text followed by one character; None when text is missing or c is NUL."""
    if text is None:
        return None
    ch = _char(c)
    if ch == "\0":
        return None
    return _terminated(text) + ch


def strsub(text: Optional[str], start: int, length: int) -> Optional[str]:
    """The length characters of text beginning at start; None when text is missing.

    The requested range must lie within the text.
    """
    if text is None:
        return None
    _non_negative(start, "start")
    _non_negative(length, "length")
    text = _terminated(text)
    if start + length > len(text):
        raise ValueError("range exceeds text length")
    return text[start:start + length]
"""Transforming text: trimming, splitting, mapping and walking characters.

Text is treated as a terminated string: anything after a NUL character is
ignored. Functions given a missing text return None rather than failing.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_TRIMMED = " \t\n"

_SIZE_UNITS = (
    (1_000, "BYTES"),
    (1_000_000, "Kb"),
    (1_000_000_000, "Mb"),
)


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strtrim(text: Optional[str]) -> Optional[str]:
    """Text without leading and trailing spaces, tabs and newlines."""
    if text is None:
        return None
    return _terminated(text).strip(_TRIMMED)


def strsplit(text: Optional[str], separator: CharLike) -> Optional[list[str]]:
    """The non-empty runs of text between separators.

    Returns None when text is missing or the separator is NUL.
    """
    if text is None:
        return None
    sep = _char(separator)
    if sep == "\0":
        return None
    return [word for word in _terminated(text).split(sep) if word]


def strmap(text: Optional[str], func: Callable[[str], str]) -> Optional[str]:
    """A new text made of func applied to every character."""
    if text is None:
        return None
    return "".join(func(ch) for ch in _terminated(text))


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """A new text made of func applied to every position and character."""
    if text is None:
        return None
    return "".join(func(pos, ch) for pos, ch in enumerate(_terminated(text)))


def _walk(chars: MutableSequence[str]) -> range:
    end = len(chars)
    for pos, ch in enumerate(chars):
        if ch == "\0":
            end = pos
            break
    return range(end)


def striter(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[str], Optional[str]]],
) -> None:
    """Call func on every character up to a NUL, in place.

    A value returned by func, other than None, replaces the character.
    """
    if chars is None or func is None:
        return
    for pos in _walk(chars):
        replacement = func(chars[pos])
        if replacement is not None:
            chars[pos] = replacement


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Like striter, with func also given each character's position."""
    if chars is None or func is None:
        return
    for pos in _walk(chars):
        replacement = func(pos, chars[pos])
        if replacement is not None:
            chars[pos] = replacement


def copy_until(text: str, stop: CharLike) -> tuple[str, int]:
    """The text before the first stop character, and the position of that character.

    When stop does not occur, the whole text is copied and the position is its length.
    """
    text = _terminated(text)
    ch = _char(stop)
    found = text.find(ch) if ch != "\0" else -1
    pos = len(text) if found < 0 else found
    return text[:pos], pos


def size_label(text: str) -> str:
    """The storage size of text, terminator included, with its unit label."""
    size = len(_terminated(text)) + 1
    for limit, unit in _SIZE_UNITS:
        if size < limit:
            return f"{size}{unit}"
    return f"{size}Gb"
"""Measuring, comparing and searching text.

Text is treated as a terminated string: anything after a NUL character is
ignored. Search functions return positions, or None when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strlen(text: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(text))


def _difference(left: str, right: str, limit: Optional[int]) -> int:
    left = _terminated(left)
    right = _terminated(right)
    if limit is not None:
        if limit < 0:
            raise ValueError("n must not be negative")
        left = left[:limit]
        right = right[:limit]
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def strcmp(left: str, right: str) -> int:
    """Difference of the first differing characters, 0 when the texts are equal."""
    return _difference(left, right, None)


def strncmp(left: str, right: str, n: int) -> int:
    """Like strcmp, looking at no more than the first n characters."""
    return _difference(left, right, n)


def strequ(left: Optional[str], right: Optional[str]) -> bool:
    """True when both texts are given and equal."""
    if left is None or right is None:
        return False
    return strcmp(left, right) == 0


def strnequ(left: Optional[str], right: Optional[str], n: int) -> bool:
    """True when both texts are given and their first n characters are equal."""
    if left is None or right is None:
        return False
    return strncmp(left, right, n) == 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Position of the first c; searching for NUL finds the terminator."""
    text = _terminated(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    found = text.find(ch)
    return None if found < 0 else found


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Position of the last c; searching for NUL finds the terminator."""
    text = _terminated(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    found = text.rfind(ch)
    return None if found < 0 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Position of the first occurrence of needle; an empty needle is found at 0."""
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    found = haystack.find(needle)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like strstr, but the occurrence must lie within the first length characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def count_twins(source: str, target: str) -> int:
    """Number of places, overlapping ones included, where target occurs in source."""
    source = _terminated(source)
    target = _terminated(target)
    if not source or not target:
        return 0
    return sum(1 for start in range(len(source)) if source.startswith(target, start))


def format_twins(count: int) -> str:
    """The report line for a count of occurrences."""
    suffix = " time" if count == 1 else " times\n"
    return f"the word exist {count}{suffix}"


def count_words(text: str, separator: CharLike) -> int:
    """Number of runs of characters other than separator."""
    text = _terminated(text)
    sep = _char(separator)
    if sep == "\0":
        return 1 if text else 0
    return sum(1 for word in text.split(sep) if word)
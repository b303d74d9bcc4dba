"""Writing characters and strings to a stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character to stream (standard output by default)."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write text to stream; None writes nothing."""
    if text is not None:
        _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is not None:
        _target(stream).write(text + "\n")
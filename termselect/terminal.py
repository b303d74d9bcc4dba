"""The controlling terminal: raw input mode, capabilities and drawing the selection."""

from __future__ import annotations

import curses
import io
import os
import shutil
import sys
import termios
from typing import TextIO

from .entries import Entry, SelectionList
from .keys import Key, decode_key
from .layout import column_count, has_room

_READ_SIZE = 4
_DEFAULT_INPUT_FD = 2

_TERMINFO_NAMES = {
    "ti": "smcup",
    "te": "rmcup",
    "vi": "civis",
    "ve": "cnorm",
    "cl": "clear",
    "mr": "rev",
    "us": "smul",
    "me": "sgr0",
    "ue": "rmul",
    "do": "cud1",
}

_FALLBACK = {
    "ti": "\x1b[?1049h",
    "te": "\x1b[?1049l",
    "vi": "\x1b[?25l",
    "ve": "\x1b[?25h",
    "cl": "\x1b[H\x1b[2J",
    "mr": "\x1b[7m",
    "us": "\x1b[4m",
    "me": "\x1b[0m",
    "ue": "\x1b[24m",
    "do": "\n",
}

NOT_ENOUGH_SPACE = "Not enough space"


class TerminalError(Exception):
    """Raised when the terminal cannot be put into selection mode."""


class Terminal:
    """Draws on an output stream and reads keys from a terminal descriptor."""

    def __init__(self, stream: TextIO | None = None, input_fd: int | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.input_fd = input_fd if input_fd is not None else _DEFAULT_INPUT_FD
        self.capabilities: dict[str, str] = dict(_FALLBACK)
        self._saved: list | None = None

    def __enter__(self) -> "Terminal":
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.leave()

    def _write(self, *parts: str) -> None:
        self.stream.write("".join(parts))
        self.stream.flush()

    def _load_capabilities(self, term_name: str) -> None:
        try:
            curses.setupterm(term_name, self.input_fd)
        except curses.error as err:
            raise TerminalError(f"unknown terminal type {term_name!r}") from err
        for short, long_name in _TERMINFO_NAMES.items():
            value = curses.tigetstr(long_name)
            self.capabilities[short] = value.decode("latin-1") if value else ""

    def enter(self) -> None:
        """Switch to unbuffered, silent input and the alternate screen, cursor hidden."""
        isatty = getattr(self.stream, "isatty", None)
        if not (isatty and isatty()) or not os.isatty(self.input_fd):
            raise TerminalError("not a terminal")
        term_name = os.environ.get("TERM")
        if not term_name:
            raise TerminalError("TERM is not set")
        self._load_capabilities(term_name)
        saved = termios.tcgetattr(self.input_fd)
        raw = termios.tcgetattr(self.input_fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.input_fd, termios.TCSANOW, raw)
        self._saved = saved
        self._write(self.capabilities["ti"], self.capabilities["vi"])

    def leave(self) -> None:
        """Restore the input mode and the normal screen, cursor shown."""
        if self._saved is not None:
            termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, self._saved)
            self._saved = None
        self._write(self.capabilities["te"], self.capabilities["ve"])

    def size(self) -> tuple[int, int]:
        """Columns and rows of the terminal."""
        for source in (self._stream_fd, lambda: self.input_fd):
            try:
                found = os.get_terminal_size(source())
            except (OSError, ValueError, AttributeError):
                continue
            return found.columns, found.lines
        fallback = shutil.get_terminal_size()
        return fallback.columns, fallback.lines

    def _stream_fd(self) -> int:
        try:
            return self.stream.fileno()
        except io.UnsupportedOperation as err:
            raise OSError("stream has no descriptor") from err

    def read_key(self) -> Key | None:
        """Read one burst of input and decode it; None if it means nothing."""
        data = os.read(self.input_fd, _READ_SIZE)
        if not data:
            raise EOFError("terminal input closed")
        return decode_key(data)

    def draw(self, selection: SelectionList) -> None:
        """Render the selection, or a notice when the screen is too small for it."""
        columns, rows = self.size()
        if has_room(selection, columns, rows):
            self.render(selection, columns)
        else:
            self.show_message(NOT_ENOUGH_SPACE)

    def show_message(self, text: str) -> None:
        """Clear the screen and show text."""
        self._write(self.capabilities["cl"], text)

    def _styled(self, entry: Entry, under_cursor: bool) -> str:
        caps = self.capabilities
        if entry.selected and under_cursor:
            start = caps["mr"] + caps["us"]
        elif under_cursor:
            start = caps["us"]
        elif entry.selected:
            start = caps["mr"]
        else:
            start = ""
        return f"{start}{entry.name}{caps['me']}{caps['ue']}"

    def render(self, selection: SelectionList, columns: int) -> None:
        """Clear the screen and lay the visible entries out in columns."""
        caps = self.capabilities
        width = selection.max_name_width()
        per_row = column_count(columns, width)
        cursor = selection.cursor()
        entries = list(selection)
        last = len(entries) - 1
        parts = [caps["cl"]]
        shown = 0
        for pos, entry in enumerate(entries):
            if entry.removed:
                continue
            parts.append(self._styled(entry, pos == cursor))
            shown += 1
            if shown % per_row == 0:
                parts.append(caps["do"])
            elif pos < last:
                parts.append(" " * (width - len(entry.name) + 1))
        self._write(*parts)
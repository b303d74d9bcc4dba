"""The interactive selector: key handling, signal handling and the main loop."""

from __future__ import annotations

import os
import signal
import sys
from enum import Enum
from typing import Sequence

from .entries import SelectionExhausted, SelectionList
from .keys import Key
from .layout import format_selected, has_room
from .terminal import Terminal, TerminalError

_FINISHING_SIGNALS = (
    "SIGHUP", "SIGINT", "SIGQUIT", "SIGTERM", "SIGALRM", "SIGPIPE", "SIGURG",
    "SIGXCPU", "SIGXFSZ", "SIGVTALRM", "SIGPROF", "SIGUSR1", "SIGUSR2",
)


class Action(Enum):
    """What the main loop should do after a key press."""

    NONE = "none"
    REDRAW = "redraw"
    SUBMIT = "submit"
    QUIT = "quit"


class _Finished(Exception):
    """Raised from a signal handler to end the session without output."""


def handle_key(selection: SelectionList, key: Key | None) -> Action:
    """Apply a key press to the selection and say what should follow."""
    if key is Key.LEFT:
        selection.move_left()
    elif key is Key.RIGHT:
        selection.move_right()
    elif key is Key.SPACE:
        selection.move_right(toggle=True)
    elif key is Key.RESET:
        selection.reset()
    elif key is Key.HOME:
        selection.to_start()
    elif key is Key.END:
        selection.to_end()
    elif key is Key.SELECT_ALL:
        selection.select_all()
    elif key is Key.DESELECT_ALL:
        selection.deselect_all()
    elif key is Key.DELETE:
        try:
            selection.move_left(remove=True)
        except SelectionExhausted:
            return Action.QUIT
    elif key is Key.ENTER:
        return Action.SUBMIT if selection.selected_count() > 0 else Action.NONE
    elif key is Key.ESCAPE:
        return Action.QUIT
    else:
        return Action.NONE
    return Action.REDRAW


def _install_signals(term: Terminal, selection: SelectionList) -> dict[int, object]:
    previous: dict[int, object] = {}

    def remember(signum: int, handler) -> None:
        if signum not in previous:
            previous[signum] = signal.getsignal(signum)
        signal.signal(signum, handler)

    def redraw(signum, frame) -> None:
        term.draw(selection)

    def suspend(signum, frame) -> None:
        term.leave()
        signal.signal(signal.SIGTSTP, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGTSTP)

    def resume(signum, frame) -> None:
        term.enter()
        term.draw(selection)
        signal.signal(signal.SIGTSTP, suspend)

    def finish(signum, frame) -> None:
        raise _Finished()

    remember(signal.SIGWINCH, redraw)
    remember(signal.SIGTSTP, suspend)
    remember(signal.SIGCONT, resume)
    for name in _FINISHING_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is not None:
            remember(signum, finish)
    return previous


def _restore_signals(previous: dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def _run(term: Terminal, selection: SelectionList) -> bool:
    """Drive the session; True when the user submitted a selection."""
    previous = _install_signals(term, selection)
    try:
        term.draw(selection)
        while True:
            key = term.read_key()
            columns, rows = term.size()
            if not has_room(selection, columns, rows):
                continue
            action = handle_key(selection, key)
            if action is Action.REDRAW:
                term.draw(selection)
            elif action is Action.SUBMIT:
                return True
            elif action is Action.QUIT:
                return False
    finally:
        _restore_signals(previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Let the user pick among the given names; print the chosen ones on stdout."""
    names = list(sys.argv[1:] if argv is None else argv)
    if not names:
        sys.stderr.write("No Files Selected\n")
        return 0
    selection = SelectionList(names)
    try:
        with Terminal() as term:
            submitted = _run(term, selection)
    except TerminalError as err:
        sys.stderr.write(f"{err}\n")
        return 1
    except (_Finished, EOFError):
        return 0
    if submitted:
        sys.stdout.write(format_selected(selection))
        sys.stdout.flush()
    return 0
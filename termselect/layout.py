"""Arranging the selection on screen: column counts, space checks and output text."""

from __future__ import annotations

from .entries import Entry, SelectionList


def column_count(width: int, name_width: int) -> int:
    """Number of names that fit side by side in a line of the given width.

    Each name takes its widest length plus one separating space; at least one
    column is always used.
    """
    fitting = width // (name_width + 1)
    return fitting if fitting > 1 else 1


def has_room(selection: SelectionList, columns: int, rows: int) -> bool:
    """True if the visible entries fit on a screen of columns by rows."""
    width = selection.max_name_width()
    count = selection.active_count()
    per_row = column_count(columns, width)
    if columns * rows < count * (width + 2):
        return False
    if per_row == 1 and (count > rows or width + 1 > columns):
        return False
    return True


def format_selected(selection: SelectionList) -> str:
    """The selected names, separated by single spaces, as printed on submission."""
    return " ".join(selection.selected_names())


def grid(selection: SelectionList, columns: int) -> list[list[Entry]]:
    """The visible entries split into rows for a screen that is columns wide."""
    per_row = column_count(columns, selection.max_name_width())
    visible = selection.visible()
    return [visible[start:start + per_row] for start in range(0, len(visible), per_row)]
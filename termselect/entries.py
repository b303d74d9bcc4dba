"""The list of names offered for selection, with a cursor and per-entry flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Entry:
    """One selectable name."""

    name: str
    selected: bool = False
    removed: bool = False


class SelectionExhausted(Exception):
    """Raised when the last remaining entry would be removed."""


class SelectionList:
    """Names in order, each selectable or removable, with one entry under the cursor.

    Removed entries keep their place but are skipped by every movement.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._entries = [Entry(str(name)) for name in names]
        if not self._entries:
            raise ValueError("no entries to select from")
        self._cursor = 0

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def visible(self) -> list[Entry]:
        """Entries that have not been removed, in order."""
        return [entry for entry in self._entries if not entry.removed]

    def active_count(self) -> int:
        """Number of entries that have not been removed."""
        return sum(1 for entry in self._entries if not entry.removed)

    def selected_count(self) -> int:
        """Number of entries flagged as selected, removed ones included."""
        return sum(1 for entry in self._entries if entry.selected)

    def cursor(self) -> int:
        """Position of the entry under the cursor."""
        return self._cursor

    def _active_positions(self) -> list[int]:
        return [pos for pos, entry in enumerate(self._entries) if not entry.removed]

    def move_right(self, toggle: bool = False) -> None:
        """Move to the next entry, wrapping around; optionally toggle the current one first."""
        if not toggle and self.active_count() == 1:
            return
        current = self._entries[self._cursor]
        if toggle:
            current.selected = not current.selected
        active = self._active_positions()
        self._cursor = next((pos for pos in active if pos > self._cursor), active[0])

    def move_left(self, remove: bool = False) -> None:
        """Move to the previous entry, wrapping around; optionally remove the current one.

        Removing the only remaining entry raises SelectionExhausted.
        """
        if self.active_count() == 1:
            if remove:
                raise SelectionExhausted("no entries left")
            return
        was_first = self._cursor == self._active_positions()[0]
        if remove:
            self._entries[self._cursor].removed = True
        active = self._active_positions()
        if was_first:
            self._cursor = active[-1]
        else:
            self._cursor = max(pos for pos in active if pos < self._cursor)

    def select_all(self) -> None:
        """Select every entry still shown."""
        for entry in self.visible():
            entry.selected = True

    def deselect_all(self) -> None:
        """Deselect every entry still shown."""
        for entry in self.visible():
            entry.selected = False

    def reset(self) -> None:
        """Bring back removed entries, clear selections and put the cursor first."""
        for entry in self._entries:
            entry.selected = False
            entry.removed = False
        self._cursor = 0

    def to_start(self) -> None:
        """Put the cursor on the first entry still shown."""
        if self.active_count() == 1:
            return
        self._cursor = self._active_positions()[0]

    def to_end(self) -> None:
        """Put the cursor on the last entry still shown."""
        if self.active_count() == 1:
            return
        self._cursor = self._active_positions()[-1]

    def selected_names(self) -> list[str]:
        """Names that are selected and not removed, in order."""
        return [entry.name for entry in self._entries if entry.selected and not entry.removed]

    def max_name_width(self) -> int:
        """Length of the longest name still shown."""
        return max((len(entry.name) for entry in self.visible()), default=0)
# termselect

An interactive chooser for the terminal. Give it a list of words (file
names, branch names, anything), move between them, mark the ones you
want, and press Enter: the marked items are printed to standard output
on one line, separated by single spaces, ready to be used by another
command.

The list is drawn on standard error, in as many columns as fit the
window width, and is redrawn when the window is resized. If the window
is too small for the list, "Not enough space" is shown and key presses
are ignored until it is enlarged.

## Install

    pip install .

This needs a POSIX system (the terminal handling uses `termios` and
`curses` from the standard library). There are no other dependencies.

## Use

    termselect one two three four

or, to act on the chosen items:

    rm $(termselect *.log)

Run without arguments, it prints `No Files Selected` to standard error
and exits with status 0.

Standard error must be a terminal: the list is drawn there and keys are
read from it, so standard output stays free for the result. `TERM` must
be set to a terminal type known to the system. If either condition is
not met, a short message is written to standard error and the exit
status is 1.

While it runs, the terminal is switched to its alternate screen with the
cursor hidden; both are restored on exit.

## Keys

| Key                      | Action                                          |
|--------------------------|-------------------------------------------------|
| Right arrow              | move the cursor to the next item (wraps)        |
| Left arrow               | move the cursor to the previous item (wraps)    |
| Space                    | mark or unmark the current item, then move on   |
| Backspace / Delete       | remove the current item from the list           |
| `*`                      | mark every item still shown                     |
| `-`                      | unmark every item still shown                   |
| `r`                      | restore removed items and clear all marks       |
| Home / End               | jump to the first / last item                   |
| Enter                    | print the marked items and quit                 |
| Esc                      | quit without printing anything                  |

Enter does nothing while no item has been marked. Removing the last
remaining item quits without printing anything. The cursor item is
underlined and marked items are shown in reverse video.

Ctrl-Z suspends the chooser and restores the terminal; it takes over
the screen again when resumed. Interrupt, hang-up, termination and
similar signals end it without printing anything.

## From Python

The list logic can be used without a terminal:

    from termselect.entries import SelectionList

    items = SelectionList(["alpha", "beta", "gamma"])
    items.move_right(toggle=True)   # mark "alpha", cursor on "beta"
    items.move_right(toggle=True)   # mark "beta", cursor on "gamma"
    print(items.selected_names())   # ['alpha', 'beta']

`SelectionList` also has `move_left(remove=...)`, `select_all`,
`deselect_all`, `reset`, `to_start`, `to_end`, `visible`, `cursor` and
`max_name_width`. Removing the only remaining entry raises
`SelectionExhausted`.

Other pieces:

- `termselect.keys.decode_key` turns raw key bytes into a `Key`, or
  `None` for input it does not recognise.
- `termselect.app.handle_key` applies a `Key` to a `SelectionList` and
  returns an `Action` (`NONE`, `REDRAW`, `SUBMIT` or `QUIT`).
- `termselect.layout` has `column_count`, `has_room`, `grid` and
  `format_selected` for laying out and printing a selection.
- `termselect.terminal.Terminal` is a context manager that puts a
  terminal into selection mode and draws a `SelectionList` on it.

The package also carries small helper modules for text and bytes:
`chars` (ASCII classification and case conversion), `numbers`
(`atoi`, `itoa`, `put_nbr`), `output` (`put_char`, `put_str`,
`put_endl`), `memory` (byte-buffer filling, copying, searching and
comparing), `linked` (a singly linked `LinkedList`), `textsearch`,
`textbuild` and `texttransform` (comparing, searching, building,
splitting and trimming text that ends at its first NUL character).

## What it does not do

Items come only from the command line; the chooser does not read them
from standard input or a file. There is no searching or filtering
within the list, and the Up and Down arrows are recognised but do
nothing.

## Tests

    pip install .[test]
    pytest
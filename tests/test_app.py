import pytest

from termselect.app import Action, handle_key, main
from termselect.entries import SelectionList
from termselect.keys import Key


def _names(selection):
    return [entry.name for entry in selection.visible()]


def test_right_moves_cursor_and_redraws():
    selection = SelectionList(["a", "b", "c"])
    assert handle_key(selection, Key.RIGHT) is Action.REDRAW
    assert selection.cursor() == 1


def test_left_wraps_to_end():
    selection = SelectionList(["a", "b", "c"])
    assert handle_key(selection, Key.LEFT) is Action.REDRAW
    assert selection.cursor() == 2


def test_space_toggles_and_moves():
    selection = SelectionList(["a", "b"])
    assert handle_key(selection, Key.SPACE) is Action.REDRAW
    assert selection.selected_names() == ["a"]
    assert selection.cursor() == 1


def test_select_all_and_deselect_all():
    selection = SelectionList(["a", "b"])
    handle_key(selection, Key.SELECT_ALL)
    assert selection.selected_names() == ["a", "b"]
    handle_key(selection, Key.DESELECT_ALL)
    assert selection.selected_names() == []


def test_delete_removes_current():
    selection = SelectionList(["a", "b", "c"])
    assert handle_key(selection, Key.DELETE) is Action.REDRAW
    assert _names(selection) == ["b", "c"]


def test_delete_last_entry_quits():
    selection = SelectionList(["only"])
    assert handle_key(selection, Key.DELETE) is Action.QUIT


def test_reset_restores_everything():
    selection = SelectionList(["a", "b", "c"])
    handle_key(selection, Key.SELECT_ALL)
    handle_key(selection, Key.DELETE)
    handle_key(selection, Key.RESET)
    assert _names(selection) == ["a", "b", "c"]
    assert selection.selected_names() == []
    assert selection.cursor() == 0


def test_home_and_end():
    selection = SelectionList(["a", "b", "c"])
    handle_key(selection, Key.END)
    assert selection.cursor() == 2
    handle_key(selection, Key.HOME)
    assert selection.cursor() == 0


def test_enter_needs_a_selection():
    selection = SelectionList(["a", "b"])
    assert handle_key(selection, Key.ENTER) is Action.NONE
    handle_key(selection, Key.SPACE)
    assert handle_key(selection, Key.ENTER) is Action.SUBMIT


def test_escape_quits():
    assert handle_key(SelectionList(["a"]), Key.ESCAPE) is Action.QUIT


@pytest.mark.parametrize("key", [None, Key.UP, Key.DOWN])
def test_unhandled_keys_change_nothing(key):
    selection = SelectionList(["a", "b"])
    assert handle_key(selection, key) is Action.NONE
    assert selection.cursor() == 0


def test_main_without_names(capsys):
    assert main([]) == 0
    assert capsys.readouterr().err == "No Files Selected\n"


def test_main_fails_without_terminal(capsys):
    assert main(["a", "b"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err != ""
import pytest

from termselect.entries import Entry, SelectionExhausted, SelectionList


def current(selection):
    return list(selection)[selection.cursor()].name


def test_initial_state():
    sel = SelectionList(["a", "b", "c"])
    assert current(sel) == "a"
    assert sel.selected_count() == 0
    assert sel.active_count() == len(sel.visible())
    assert [e.name for e in sel] == ["a", "b", "c"]


def test_empty_list_rejected():
    with pytest.raises(ValueError):
        SelectionList([])


def test_entry_defaults():
    entry = Entry("x")
    assert entry.name == "x"
    assert entry.selected is False
    assert entry.removed is False


def test_move_right_cycles():
    sel = SelectionList(["a", "b", "c"])
    seen = []
    for _ in range(3):
        sel.move_right()
        seen.append(current(sel))
    assert seen == ["b", "c", "a"]


def test_move_right_toggle_selects_then_moves():
    sel = SelectionList(["a", "b", "c"])
    sel.move_right(toggle=True)
    assert current(sel) == "b"
    assert sel.selected_names() == ["a"]


def test_toggle_twice_deselects():
    sel = SelectionList(["a", "b"])
    sel.move_right(toggle=True)
    sel.move_right()
    sel.move_right(toggle=True)
    assert sel.selected_names() == []
    assert current(sel) == "b"


def test_toggle_on_last_wraps():
    sel = SelectionList(["a", "b", "c"])
    sel.to_end()
    sel.move_right(toggle=True)
    assert current(sel) == "a"
    assert sel.selected_names() == ["c"]


def test_single_entry_right_without_toggle_stays():
    sel = SelectionList(["only"])
    sel.move_right()
    assert current(sel) == "only"
    assert sel.selected_names() == []


def test_single_entry_toggle():
    sel = SelectionList(["only"])
    sel.move_right(toggle=True)
    assert current(sel) == "only"
    assert sel.selected_names() == ["only"]


def test_move_left_wraps_from_first():
    sel = SelectionList(["a", "b", "c"])
    sel.move_left()
    assert current(sel) == "c"
    sel.move_left()
    assert current(sel) == "b"


def test_remove_middle_moves_back():
    sel = SelectionList(["a", "b", "c"])
    sel.move_right()
    sel.move_left(remove=True)
    assert current(sel) == "a"
    assert [e.name for e in sel.visible()] == ["a", "c"]


def test_remove_first_goes_to_last():
    sel = SelectionList(["a", "b", "c"])
    sel.move_left(remove=True)
    assert current(sel) == "c"
    assert [e.name for e in sel.visible()] == ["b", "c"]


def test_remove_last_remaining_raises():
    sel = SelectionList(["a", "b"])
    sel.move_left(remove=True)
    assert sel.active_count() == len(sel.visible())
    with pytest.raises(SelectionExhausted):
        sel.move_left(remove=True)


def test_single_entry_left_without_remove_stays():
    sel = SelectionList(["only"])
    sel.move_left()
    assert current(sel) == "only"


def test_movements_skip_removed():
    sel = SelectionList(["a", "b", "c", "d"])
    sel.move_right()
    sel.move_left(remove=True)  # removes b, cursor on a
    sel.move_right()
    assert current(sel) == "c"
    sel.move_left()
    assert current(sel) == "a"


def test_right_wraps_past_removed_tail():
    sel = SelectionList(["a", "b", "c"])
    sel.to_end()
    sel.move_left(remove=True)  # removes c, cursor on b
    assert current(sel) == "b"
    sel.move_right()
    assert current(sel) == "a"


def test_select_all_skips_removed():
    sel = SelectionList(["a", "b", "c"])
    sel.move_right()
    sel.move_left(remove=True)
    sel.select_all()
    assert sel.selected_names() == ["a", "c"]
    assert sel.selected_count() == len(sel.visible())
    sel.deselect_all()
    assert sel.selected_names() == []


def test_removed_selection_still_counted():
    sel = SelectionList(["a", "b", "c"])
    sel.move_right()
    sel.move_right(toggle=True)  # selects b, cursor on c
    sel.move_left()
    sel.move_left(remove=True)  # removes b
    assert sel.selected_names() == []
    assert sel.selected_count() > 0


def test_reset_restores_everything():
    sel = SelectionList(["a", "b", "c"])
    sel.select_all()
    sel.move_left(remove=True)
    sel.reset()
    assert current(sel) == "a"
    assert sel.selected_names() == []
    assert [e.name for e in sel.visible()] == ["a", "b", "c"]


def test_to_start_and_to_end_skip_removed():
    sel = SelectionList(["a", "b", "c", "d"])
    sel.move_left(remove=True)  # removes a, cursor on d
    sel.move_left(remove=True)  # removes d, cursor on c
    sel.to_start()
    assert current(sel) == "b"
    sel.to_end()
    assert current(sel) == "c"


def test_to_end_single_entry_noop():
    sel = SelectionList(["only"])
    sel.to_end()
    sel.to_start()
    assert current(sel) == "only"


def test_max_name_width_tracks_visible():
    sel = SelectionList(["longest", "ab", "abc"])
    assert sel.max_name_width() == len("longest")
    sel.move_left(remove=True)
    assert sel.max_name_width() == len("abc")


def test_selected_names_keep_order():
    sel = SelectionList(["x", "y", "z"])
    sel.to_end()
    sel.move_right(toggle=True)
    sel.move_right(toggle=True)
    assert sel.selected_names() == ["x", "z"]
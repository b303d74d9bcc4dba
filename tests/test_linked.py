import pytest

from termselect.linked import LinkedList


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_items_keep_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    lst.push_front("a")
    assert list(lst) == ["a", "b"]
    assert len(lst) == 2


def test_push_front_reverses_sequence():
    lst = LinkedList()
    items = [1, 2, 3, 4]
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))


def test_pop_front_returns_and_deletes():
    deleted = []
    lst = LinkedList(["x", "y"])
    assert lst.pop_front(deleted.append) == "x"
    assert deleted == ["x"]
    assert list(lst) == ["y"]
    assert len(lst) == 1


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_calls_delete_in_order():
    deleted = []
    items = ["one", "two", "three"]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete():
    lst = LinkedList(range(5))
    lst.clear()
    assert len(lst) == 0


def test_each_visits_every_content():
    seen = []
    items = [3, 1, 2]
    LinkedList(items).each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    original = LinkedList(["a", "bb", "ccc"])
    mapped = original.map(len)
    assert list(mapped) == [len(s) for s in ["a", "bb", "ccc"]]
    assert list(original) == ["a", "bb", "ccc"]
    assert len(mapped) == len(original)


def test_map_of_empty_is_empty():
    mapped = LinkedList().map(str)
    assert list(mapped) == []
    assert len(mapped) == 0


def test_none_content_is_kept():
    lst = LinkedList()
    lst.push_front(None)
    assert list(lst) == [None]
    assert len(lst) == 1
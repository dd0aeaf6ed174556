import pytest

from ftkit.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert node.next.content == "b"
    assert list(lst) == ["a", "b"]


def test_push_back_appends():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert node.next is None
    assert list(lst) == ["a", "b"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front(7)
    assert lst.last() is node
    assert lst.head is node


def test_last_returns_final_node():
    lst = LinkedList(["x", "y", "z"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "z"


def test_len_counts_all_pushes():
    lst = LinkedList()
    for i in range(5):
        lst.push_back(i)
        lst.push_front(-i)
    assert len(lst) == 10
    assert len(list(lst)) == len(lst)


def test_clear_calls_delete_in_order():
    lst = LinkedList([1, 2, 3])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList(["a", "b"])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]
    assert lst.last().content == 9


def test_for_each_visits_every_value():
    lst = LinkedList(["a", "b", "c"])
    seen = []
    lst.for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_produced_values():
    lst = LinkedList([1, 2, 0, 4])
    deleted = []

    def invert(x):
        return 1 // x

    with pytest.raises(ZeroDivisionError):
        lst.map(invert, deleted.append)
    assert deleted == [1, 0]
    assert list(lst) == [1, 2, 0, 4]
import pytest

from ftkit.lists import LinkedList, Node


def test_init_preserves_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    lst.push_back("y")
    assert list(lst) == ["x", "y"]


def test_push_back_appends_and_updates_last():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert node.content == "b"
    assert list(lst) == ["a", "b"]


def test_last_node_has_no_successor():
    lst = LinkedList([1, 2, 3])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == 3
    assert last.next is None


def test_for_each_visits_in_order():
    items = [3, 1, 2]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = [1, 2, 3]
    lst = LinkedList(items)
    mapped = lst.map(str)
    assert list(mapped) == [str(v) for v in items]
    assert list(lst) == items


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_releases_partial_result():
    released = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    lst = LinkedList([1, 2, 3])
    with pytest.raises(RuntimeError):
        lst.map(f, released.append)
    assert released == [10, 20]


def test_pop_front_removes_and_deletes():
    released = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(released.append) == "a"
    assert released == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_pop_front_last_element_empties():
    lst = LinkedList(["only"])
    lst.pop_front()
    assert lst.last() is None
    assert lst.head is None
    lst.push_back("again")
    assert list(lst) == ["again"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_value_in_order():
    items = ["x", "y", "z"]
    released = []
    lst = LinkedList(items)
    lst.clear(released.append)
    assert released == items
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_deleter():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_len_matches_iteration_after_mixed_operations():
    lst = LinkedList()
    lst.push_back(1)
    lst.push_front(0)
    lst.push_back(2)
    lst.pop_front()
    assert len(lst) == len(list(lst))
    assert list(lst) == [1, 2]
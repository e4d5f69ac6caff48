import pytest

from minishell.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert lst.last().content == "c"


def test_push_front_prepends():
    lst = LinkedList(["b"])
    lst.push_front(Node("a"))
    assert list(lst) == ["a", "b"]
    assert lst.head.content == "a"


def test_push_front_on_empty():
    lst = LinkedList()
    node = Node("x")
    lst.push_front(node)
    assert lst.head is node
    assert lst.last() is node


def test_push_front_none_raises():
    with pytest.raises(TypeError):
        LinkedList().push_front(None)


def test_push_back_appends_and_ignores_none():
    lst = LinkedList(["a"])
    lst.push_back(Node("b"))
    lst.push_back(None)
    assert list(lst) == ["a", "b"]


def test_push_back_links_chain():
    chain = Node(2, Node(3))
    lst = LinkedList([1])
    lst.push_back(chain)
    assert list(lst) == [1, 2, 3]
    assert lst.last().content == 3


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_iterate_visits_each_content():
    seen = []
    LinkedList(["x", "y"]).iterate(seen.append)
    assert seen == ["x", "y"]


def test_iterate_none_does_nothing():
    lst = LinkedList([1])
    lst.iterate(None)
    assert list(lst) == [1]


def test_map_builds_new_list():
    lst = LinkedList(["ab", "cd"])
    mapped = lst.map(str.upper, lambda _: None)
    assert list(mapped) == ["AB", "CD"]
    assert list(lst) == ["ab", "cd"]
    assert mapped.head is not lst.head


def test_map_empty_gives_empty():
    mapped = LinkedList().map(str.upper, lambda _: None)
    assert len(mapped) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        return None if value == 3 else value * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_requires_callables():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None, lambda _: None)
    with pytest.raises(TypeError):
        LinkedList([1]).map(lambda v: v, None)
import pytest

from so_long.linked_list import LinkedList, Node


def test_empty_list_has_no_nodes():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_reverses_order():
    items = ["Node 1", "Node 2", "Node 3"]
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))
    assert lst.last().content == items[0]


def test_push_back_keeps_order():
    items = ["a", "b", "c", "d"]
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_back_on_empty_list_sets_head():
    lst = LinkedList()
    node = lst.push_back("Hello")
    assert lst.head is node
    assert lst.last() is node


def test_push_returns_linked_node():
    lst = LinkedList()
    second = lst.push_front("second")
    first = lst.push_front("first")
    assert first.next is second
    assert second.next is None


def test_constructor_from_iterable():
    items = [1, 2, 3]
    lst = LinkedList(items)
    assert list(lst) == items
    assert lst.last().content == items[-1]


@pytest.mark.parametrize("count", [1, 2, 5, 20])
def test_len_matches_pushes(count):
    lst = LinkedList()
    for i in range(count):
        if i % 2:
            lst.push_front(i)
        else:
            lst.push_back(i)
    assert len(lst) == count
    assert sorted(lst) == list(range(count))


def test_node_defaults_to_no_next():
    node = Node("content")
    assert node.next is None
    assert node.content == "content"
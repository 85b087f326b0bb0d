import pytest

from structlab.linked_list import LinkedList, ListNode


def check_structure(lst):
    first, last = lst.first, lst.last
    if len(lst) == 0:
        assert first is None and last is None
        return
    assert first is not None and last is not None
    assert first.prev is None and last.next is None
    if len(lst) == 1:
        assert first is last
        return
    node = first
    count = 0
    while node is not last:
        assert node.next is not None and node.next.prev is node
        node = node.next
        count += 1
        assert count < len(lst)
    assert count + 1 == len(lst)


INSERTED = [2, 5, 3, 1, 7, 14, 1, 5]


def test_empty_list_structure():
    lst = LinkedList()
    check_structure(lst)
    assert len(lst) == 0
    assert list(lst) == []


def test_insert_back_keeps_order():
    lst = LinkedList()
    for value in INSERTED:
        lst.insert_back(value)
    check_structure(lst)
    assert list(lst) == INSERTED
    assert len(lst) == len(INSERTED)


def test_insert_front_reverses_order():
    lst = LinkedList()
    for value in INSERTED:
        lst.insert_front(value)
    check_structure(lst)
    assert list(lst) == list(reversed(INSERTED))


def test_find_missing_returns_none():
    lst = LinkedList(INSERTED)
    assert lst.find(8) is None


def test_source_scenario():
    lst = LinkedList(INSERTED)
    model = list(INSERTED)
    list_copy = LinkedList(lst)

    node = lst.find(5)
    assert node is not None and node.item == 5
    assert node is lst.first.next
    lst.remove_node(node)
    model.remove(5)

    list_copy2 = LinkedList()
    list_copy2 = lst.copy()
    check_structure(lst)
    assert list(lst) == model

    node = lst.find(5)
    assert node is not None and node.item == 5
    lst.remove_node(node)
    model.remove(5)
    check_structure(lst)
    assert lst.find(5) is None
    assert list(lst) == model

    node = lst.find(14)
    assert node is not None
    lst.insert_before(17, node)
    model.insert(model.index(14), 17)
    check_structure(lst)
    assert list(lst) == model

    while len(lst) > 1:
        lst.remove_back()
    check_structure(lst)
    assert list(lst) == [2]

    node = lst.find(2)
    assert node is not None and node.item == 2
    lst.remove_node(node)
    check_structure(lst)
    assert len(lst) == 0

    check_structure(list_copy)
    assert list(list_copy) == INSERTED
    check_structure(list_copy2)
    expected_copy2 = list(INSERTED)
    expected_copy2.remove(5)
    assert list(list_copy2) == expected_copy2

    with pytest.raises(IndexError):
        lst.remove_front()


def test_remove_back_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_back()


def test_remove_front_and_back_return_items():
    lst = LinkedList(INSERTED)
    assert lst.remove_front() == INSERTED[0]
    assert lst.remove_back() == INSERTED[-1]
    check_structure(lst)
    assert list(lst) == INSERTED[1:-1]


def test_copy_is_independent():
    lst = LinkedList(INSERTED)
    duplicate = lst.copy()
    lst.remove_front()
    lst.insert_back(99)
    assert list(duplicate) == INSERTED
    check_structure(duplicate)


def test_clear_empties_list():
    lst = LinkedList(INSERTED)
    node = lst.first
    lst.clear()
    check_structure(lst)
    assert len(lst) == 0
    with pytest.raises(ValueError):
        lst.remove_node(node)


def test_insert_before_first_becomes_first():
    lst = LinkedList(INSERTED)
    new_node = lst.insert_before(0, lst.first)
    assert lst.first is new_node
    assert list(lst) == [0] + INSERTED
    check_structure(lst)


def test_remove_last_node():
    lst = LinkedList(INSERTED)
    assert lst.remove_node(lst.last) == INSERTED[-1]
    assert list(lst) == INSERTED[:-1]
    check_structure(lst)


def test_foreign_node_rejected():
    lst = LinkedList(INSERTED)
    other = LinkedList(INSERTED)
    with pytest.raises(ValueError):
        lst.remove_node(other.first)
    with pytest.raises(ValueError):
        lst.insert_before(1, ListNode(1))
    assert list(lst) == INSERTED


def test_removed_node_cannot_be_removed_again():
    lst = LinkedList(INSERTED)
    node = lst.find(7)
    lst.remove_node(node)
    with pytest.raises(ValueError):
        lst.remove_node(node)
    assert len(lst) == len(INSERTED) - 1
import pytest

from dsakit.linked_list import SinglyLinkedList

NUMBERS = [5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100]


def make_list():
    sll = SinglyLinkedList()
    for number in NUMBERS:
        sll.insert_end(number)
    return sll


def test_insert_front():
    sll = SinglyLinkedList()
    sll.insert_front(5)
    assert sll.first() == 5
    assert sll.last() == 5

    sll.insert_front(10)
    assert sll.first() == 10
    assert sll.last() == 5
    assert list(sll) == [10, 5]
    assert len(sll) == 2


def test_insert_end():
    sll = SinglyLinkedList()
    sll.insert_end(5)
    assert sll.first() == 5
    assert sll.last() == 5

    sll.insert_end(10)
    assert sll.first() == 5
    assert sll.last() == 10
    assert list(sll) == [5, 10]


def test_length():
    assert len(make_list()) == 20


def test_get():
    sll = make_list()
    assert sll.get(8) == 45

    with pytest.raises(IndexError, match="index out of range"):
        sll.get(69)

    with pytest.raises(IndexError, match="list is empty"):
        SinglyLinkedList().get(0)


def test_get_negative_index():
    with pytest.raises(IndexError, match="index out of range"):
        make_list().get(-1)


def test_remove():
    sll = make_list()
    sll.remove(0)
    assert sll.first() == 10
    assert len(sll) == 19

    with pytest.raises(IndexError, match="index out of range"):
        sll.remove(9000)

    sll.remove(5)
    assert len(sll) == 18
    assert 35 not in list(sll)

    with pytest.raises(IndexError, match="list is empty"):
        SinglyLinkedList().remove(0)


def test_remove_last_updates_tail():
    sll = make_list()
    sll.remove(19)
    assert sll.last() == 95
    sll.insert_end(7)
    assert list(sll)[-2:] == [95, 7]


def test_remove_only_item_empties_list():
    sll = SinglyLinkedList()
    sll.insert_end(1)
    sll.remove(0)
    assert len(sll) == 0
    assert list(sll) == []
    with pytest.raises(IndexError, match="list is empty"):
        sll.first()
    with pytest.raises(IndexError, match="list is empty"):
        sll.last()


def test_iteration_order():
    assert list(make_list()) == NUMBERS
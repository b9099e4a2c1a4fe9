import pytest

from dsakit.linked_list import LinkedList


def test_construct_from_values():
    values = [1, 2, 3, 4, 5]
    assert list(LinkedList(values)) == values
    assert len(LinkedList(values)) == 5


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert str(lst) == ""


def test_append_order():
    lst = LinkedList()
    lst.append(1)
    lst.append(2)
    lst.append(3)
    assert str(lst) == "1 2 3"


def test_insert_middle_example():
    lst = LinkedList([1, 2, 3, 4, 5])
    lst.insert(3, 10)
    assert list(lst) == [1, 2, 3, 10, 4, 5]


def test_insert_front_and_end():
    lst = LinkedList([2, 3])
    lst.insert(0, 1)
    lst.insert(len(lst), 4)
    assert list(lst) == [1, 2, 3, 4]
    lst.append(5)
    assert list(lst) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_out_of_range(index):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert(index, 9)
    assert list(lst) == [1, 2, 3]


def test_delete_first_is_one_based():
    lst = LinkedList([7, 8, 9])
    assert lst.delete(1) == 7
    assert list(lst) == [8, 9]


def test_delete_last_then_append():
    lst = LinkedList([7, 8, 9])
    assert lst.delete(3) == 9
    lst.append(10)
    assert list(lst) == [7, 8, 10]


def test_delete_until_empty_then_append():
    lst = LinkedList([1, 2])
    lst.delete(2)
    lst.delete(1)
    assert len(lst) == 0
    lst.append(5)
    assert list(lst) == [5]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_out_of_range(position):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.delete(position)
    assert len(lst) == 3


def test_insert_delete_round_trip():
    values = [4, 5, 6, 7]
    lst = LinkedList(values)
    lst.insert(2, 99)
    assert lst.delete(3) == 99
    assert list(lst) == values


def test_total_and_maximum():
    values = [3, 9, 2, 5]
    lst = LinkedList(values)
    assert lst.total() == sum(values)
    assert lst.maximum() == max(values)


def test_total_of_empty():
    assert LinkedList().total() == 0


def test_maximum_of_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().maximum()


def test_search():
    lst = LinkedList([3, 9, 2, 5])
    assert lst.search(2) == 2
    assert lst.search(42) is None


@pytest.mark.parametrize("key", [1, 2, 3, 4, 5, 6, 7])
def test_binary_search_finds_every_element(key):
    lst = LinkedList([1, 2, 3, 4, 5, 6, 7])
    assert lst.binary_search(key) == key


@pytest.mark.parametrize("key", [0, 8, 100])
def test_binary_search_missing(key):
    assert LinkedList([1, 2, 3, 4, 5, 6, 7]).binary_search(key) is None


def test_binary_search_empty():
    assert LinkedList().binary_search(1) is None
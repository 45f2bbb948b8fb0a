import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.singly_linked import SinglyLinkedList


def test_build_and_iterate():
    values = [4, 8, 15, 16, 23, 42]
    linked = SinglyLinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = SinglyLinkedList()
    assert list(linked) == []
    assert len(linked) == 0


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_positions(index):
    values = [1, 2, 3]
    linked = SinglyLinkedList(values)
    linked.insert(index, 99)
    expected = list(values)
    expected.insert(index, 99)
    assert list(linked) == expected
    assert len(linked) == 4


def test_insert_into_empty_then_append():
    linked = SinglyLinkedList()
    linked.insert(0, "a")
    linked.append("b")
    assert list(linked) == ["a", "b"]


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_out_of_range(index):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert(index, 0)


def test_replace_all():
    linked = SinglyLinkedList([1, 2, 1, 3])
    assert linked.replace_all(1, 9) == 2
    assert list(linked) == [9, 2, 9, 3]
    assert linked.replace_all(7, 0) == 0


def test_value_at():
    values = [5, 6, 7]
    linked = SinglyLinkedList(values)
    assert [linked.value_at(i) for i in range(3)] == values
    with pytest.raises(IndexError):
        linked.value_at(3)
    with pytest.raises(IndexError):
        linked.value_at(-1)


def test_delete_at_head_middle_tail():
    linked = SinglyLinkedList([1, 2, 3, 4])
    assert linked.delete_at(0) == 1
    assert linked.delete_at(1) == 3
    assert linked.delete_at(1) == 4
    assert list(linked) == [2]
    linked.append(5)
    assert list(linked) == [2, 5]


def test_delete_at_out_of_range():
    linked = SinglyLinkedList([1])
    with pytest.raises(IndexError):
        linked.delete_at(1)


def test_remove_first_occurrence():
    linked = SinglyLinkedList([3, 1, 3, 2])
    linked.remove(3)
    assert list(linked) == [1, 3, 2]
    linked.remove(2)
    linked.append(8)
    assert list(linked) == [1, 3, 8]


def test_remove_missing():
    linked = SinglyLinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.remove(5)
    assert list(linked) == [1, 2]


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_at_matches_list_pop(values, data):
    index = data.draw(st.integers(0, len(values) - 1))
    linked = SinglyLinkedList(values)
    expected = list(values)
    assert linked.delete_at(index) == expected.pop(index)
    assert list(linked) == expected
    assert len(linked) == len(expected)
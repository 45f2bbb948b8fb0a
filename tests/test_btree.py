from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsakit.btree import BTree


def build(values, degree=3):
    tree = BTree(degree)
    for value in values:
        tree.insert(value)
    return tree


def test_iteration_is_sorted_after_inserts():
    values = [10, 20, 5, 6, 12, 30, 7, 17, 3, 1, 40, 50, 60, 2]
    tree = build(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


def test_empty_tree():
    tree = BTree()
    assert list(tree) == []
    assert len(tree) == 0
    assert 5 not in tree


def test_contains():
    values = list(range(0, 100, 3))
    tree = build(values, degree=2)
    assert all(value in tree for value in values)
    assert not any(value in tree for value in range(1, 100, 3))


def test_remove_keeps_order():
    values = list(range(50))
    tree = build(values)
    for value in range(0, 50, 2):
        tree.remove(value)
    assert list(tree) == list(range(1, 50, 2))
    assert len(tree) == 25


def test_remove_everything_empties_tree():
    values = list(range(30))
    tree = build(values, degree=2)
    for value in reversed(values):
        tree.remove(value)
    assert list(tree) == []
    assert len(tree) == 0


def test_remove_missing_raises():
    tree = build([1, 2, 3])
    with pytest.raises(KeyError):
        tree.remove(99)
    assert list(tree) == [1, 2, 3]


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        BTree().remove(1)


def test_duplicates_are_kept():
    tree = build([4, 4, 4, 1, 4])
    assert list(tree) == sorted([4, 4, 4, 1, 4])
    tree.remove(4)
    assert Counter(tree)[4] == 3


@pytest.mark.parametrize("degree", [1, 0, -3])
def test_min_degree_must_be_at_least_two(degree):
    with pytest.raises(ValueError):
        BTree(degree)


@settings(max_examples=60)
@given(
    st.integers(min_value=2, max_value=5),
    st.lists(st.integers(-200, 200), max_size=120),
    st.lists(st.integers(-200, 200), max_size=120),
)
def test_matches_multiset_model(degree, inserts, removals):
    tree = build(inserts, degree)
    model = Counter(inserts)
    for value in removals:
        if model[value]:
            tree.remove(value)
            model[value] -= 1
        else:
            with pytest.raises(KeyError):
                tree.remove(value)
    assert list(tree) == sorted(model.elements())
    assert len(tree) == sum(model.values())
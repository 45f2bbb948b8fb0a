import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import BinarySearchTree, is_prime, load_tree, parse_values

SAMPLE = [6, 5, -3, 2, 12, -5, 8, 9, 1, 20]

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def _is_valid(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and not node.value > low:
        return False
    if high is not None and not node.value < high:
        return False
    return _is_valid(node.left, low, node.value) and _is_valid(node.right, node.value, high)


@given(int_lists)
def test_iteration_is_sorted_and_distinct(values):
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    assert _is_valid(tree.root)


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree(SAMPLE)
    assert tree.insert(6) is False
    assert len(tree) == len(SAMPLE)
    assert tree.insert(7) is True
    assert 7 in tree


def test_search_and_contains():
    tree = BinarySearchTree(SAMPLE)
    node = tree.search(8)
    assert node is not None and node.value == 8
    assert tree.search(100) is None
    assert -5 in tree
    assert 100 not in tree
    assert "x" not in tree


def test_small_tree_traversals():
    tree = BinarySearchTree([2, 1, 3])
    assert tree.preorder() == [2, 1, 3]
    assert tree.postorder() == [1, 3, 2]
    assert tree.reverse_inorder() == [3, 2, 1]
    assert tree.leaves() == [1, 3]
    assert tree.nodes_with_children() == [2]
    assert tree.nodes_with_two_children() == [2]


def test_chain_tree_queries():
    tree = BinarySearchTree([1, 2, 3])
    assert tree.leaves() == [3]
    assert tree.nodes_with_children() == [1, 2]
    assert tree.nodes_with_two_children() == []


@given(int_lists)
def test_preorder_rebuilds_same_tree(values):
    tree = BinarySearchTree(values)
    pre = tree.preorder()
    assert BinarySearchTree(pre).preorder() == pre
    if values:
        assert pre[0] == values[0] == tree.root.value


@given(int_lists)
def test_postorder_and_reverse(values):
    tree = BinarySearchTree(values)
    post = tree.postorder()
    assert sorted(post) == list(tree)
    if values:
        assert post[-1] == values[0]
    assert tree.reverse_inorder() == list(reversed(list(tree)))


@given(int_lists)
def test_leaf_and_parent_partition(values):
    tree = BinarySearchTree(values)
    leaves = tree.leaves()
    parents = tree.nodes_with_children()
    assert len(leaves) + len(parents) == len(tree)
    assert all(tree.search(v).is_leaf for v in leaves)
    assert set(tree.nodes_with_two_children()) <= set(parents)


def test_minimum_maximum():
    tree = BinarySearchTree(SAMPLE)
    assert tree.minimum() == min(SAMPLE)
    assert tree.maximum() == max(SAMPLE)


def test_minimum_maximum_of_empty_tree():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()


def test_remove_leaf_and_single_child():
    tree = BinarySearchTree(SAMPLE)
    tree.remove(20)
    tree.remove(-3)
    assert list(tree) == sorted(set(SAMPLE) - {20, -3})
    assert _is_valid(tree.root)


def test_remove_two_children_uses_predecessor():
    tree = BinarySearchTree([5, 3, 8, 4])
    tree.remove(5)
    assert tree.root.value == 4
    assert list(tree) == [3, 4, 8]


def test_remove_missing_raises():
    tree = BinarySearchTree(SAMPLE)
    with pytest.raises(KeyError):
        tree.remove(100)
    with pytest.raises(KeyError):
        BinarySearchTree().remove(1)
    assert len(tree) == len(SAMPLE)


@given(int_lists, st.randoms())
def test_remove_everything(values, rnd):
    tree = BinarySearchTree(values)
    remaining = sorted(set(values))
    order = list(remaining)
    rnd.shuffle(order)
    for value in order:
        tree.remove(value)
        remaining.remove(value)
        assert list(tree) == remaining
        assert _is_valid(tree.root)
    assert len(tree) == 0
    assert tree.root is None


@pytest.mark.parametrize(
    "number, expected",
    [(-7, False), (0, False), (1, False), (2, True), (3, True), (4, False), (9, False), (13, True)],
)
def test_is_prime(number, expected):
    assert is_prime(number) is expected


@given(int_lists)
def test_count_primes_and_total(values):
    tree = BinarySearchTree(values)
    distinct = set(values)
    assert tree.count_primes() == len([v for v in distinct if is_prime(v)])
    assert tree.total() == sum(distinct)


def test_parse_values_formats():
    assert parse_values("6 5 -3 2 12") == [6, 5, -3, 2, 12]
    assert parse_values("6,5,-3\n2 ; 12\n") == [6, 5, -3, 2, 12]
    assert parse_values("   ") == []


def test_parse_values_rejects_garbage():
    with pytest.raises(ValueError):
        parse_values("1 two 3")


def test_load_tree(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(" ".join(str(v) for v in SAMPLE))
    tree = load_tree(path)
    assert list(tree) == sorted(SAMPLE)
    assert tree.root.value == SAMPLE[0]


def test_deep_tree_does_not_recurse():
    tree = BinarySearchTree(range(5000))
    assert len(tree) == 5000
    assert list(tree) == list(range(5000))
    assert tree.postorder()[-1] == 0
    tree.remove(0)
    assert tree.minimum() == 1
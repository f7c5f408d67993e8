import numpy as np
import pytest

from treapseq.treap.errors import TreapIndexError
from treapseq.treap.node import Node, get_size
from treapseq.treap.operations import build_from_sequence, to_sequence
from treapseq.treap.split_merge import merge, split

from ._check_treap import _check_height, _check_treap


def test_merge_empty():
    assert merge(None, None) is None

    node = Node(1, 0)
    assert merge(node, None) is node
    assert merge(None, node) is node


def test_merge_tie():
    left, right = Node(1, 5), Node(2, 5)
    root = merge(left, right)
    assert root is right
    assert root.left is left
    assert to_sequence(root) == [1, 2]


def test_merge_priority():
    left, right = Node(1, 6), Node(2, 5)
    root = merge(left, right)
    assert root is left
    assert root.right is right
    assert root.size == 2 and root.height == 1 and root.min_value == 1


@pytest.mark.parametrize("n, m", [(0, 5), (5, 0), (1, 1), (10, 20), (100, 57)])
def test_merge_size(n, m):
    rng = np.random.RandomState(0)
    a = build_from_sequence(range(n), rng)
    b = build_from_sequence(range(n, n + m), rng)

    root = merge(a, b)
    assert get_size(root) == n + m
    assert to_sequence(root) == list(range(n + m))
    _check_treap(root)


@pytest.mark.parametrize("n", [1, 2, 10, 101])
def test_split(n):
    rng = np.random.RandomState(n)
    values = [int(v) for v in rng.permutation(n)]

    for k in range(n + 1):
        root = build_from_sequence(values, rng)
        left, right = split(root, k)
        assert get_size(left) == k
        assert get_size(left) + get_size(right) == n
        assert to_sequence(left) == values[:k]
        assert to_sequence(right) == values[k:]
        _check_treap(left)
        _check_treap(right)

        root = merge(left, right)
        assert to_sequence(root) == values
        _check_treap(root)
        assert root.height == _check_height(root)


def test_split_single():
    node = Node(7, 3)
    assert split(node, 0) == (None, node)
    assert split(node, 1) == (node, None)
    assert split(None, 0) == (None, None)


@pytest.mark.parametrize("k", [-1, 6, 100, 1.5, "1", True])
def test_split_invalid(k):
    values = [5, 3, 1, 2, 4]
    root = build_from_sequence(values, np.random.RandomState(0))

    with pytest.raises(TreapIndexError):
        split(root, k)
    # The treap is left intact.
    assert to_sequence(root) == values
    assert get_size(root) == 5


def test_split_invalid_is_index_error():
    with pytest.raises(IndexError):
        split(None, 1)


def test_split_numpy_index():
    values = [3, 1, 2]
    root = build_from_sequence(values, np.random.RandomState(0))
    left, right = split(root, np.int64(2))
    assert to_sequence(left) == [3, 1] and to_sequence(right) == [2]

from numbers import Integral
from typing import Iterable, List, Optional

from treapseq.treap.errors import TreapIndexError
from treapseq.treap.node import Node, get_height, get_min_value, get_size, make_node, propagate
from treapseq.treap.split_merge import merge, split


def build_from_sequence(values: Iterable[int], rng) -> Optional[Node]:
    """
    Build a treap by merging single-node treaps one after another.
    """
    root = None
    for value in values:
        root = merge(root, make_node(value, rng))
    return root


def insert_last(root: Optional[Node], value: int, rng) -> Optional[Node]:
    return merge(root, make_node(value, rng))


def reverse_range(root: Optional[Node], start: int, end: int) -> Optional[Node]:
    """
    Reverse the closed 0-based range [start, end]. The segment is only flagged here, and the swap is
    pushed down by later propagation.
    """
    for i in (start, end):
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise TreapIndexError(f"Range bounds must be integers, got {i!r}.")
    if not 0 <= start <= end < get_size(root):
        raise TreapIndexError(f"Invalid range [{start}, {end}] for a sequence of size {get_size(root)}.")

    before, rest = split(root, start)
    segment, after = split(rest, end - start + 1)

    segment.reverse = not segment.reverse
    return merge(merge(before, segment), after)


def remove_first(root: Optional[Node]) -> Optional[Node]:
    if get_size(root) == 0:
        return root
    _, rest = split(root, 1)
    return rest


def index_of_minimum(root: Optional[Node]) -> int:
    """
    Return the position of the smallest value, or -1 for an empty treap. Ties go to the leftmost.
    """
    if root is None:
        return -1

    current = root
    passed = 0
    while True:
        propagate(current)
        index = get_size(current.left) + passed

        if get_min_value(current) == get_min_value(current.left):
            current = current.left
        elif current.value == get_min_value(current):
            return index
        else:
            current = current.right
            passed = index + 1


def to_sequence(root: Optional[Node]) -> List[int]:
    """
    In-order values with all pending reversals resolved.
    """
    values = []
    stack = []
    current = root
    while stack or current is not None:
        while current is not None:
            propagate(current)
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def size(root: Optional[Node]) -> int:
    return get_size(root)


def height(root: Optional[Node]) -> int:
    return get_height(root)


def min_value(root: Optional[Node]):
    propagate(root)
    return get_min_value(root)

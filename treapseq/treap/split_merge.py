from numbers import Integral
from typing import Optional, Tuple

from treapseq.treap.errors import TreapIndexError
from treapseq.treap.node import Node, get_priority, get_size, propagate, recalc, reset_min


def merge(
    left: Optional[Node],
    right: Optional[Node],
) -> Optional[Node]:
    """
    Concatenate two treaps, all of left before all of right. The root with the higher priority becomes
    the parent and its side adjacent to the other treap is merged recursively. On a tie, the right root
    becomes the parent. Both inputs are consumed.
    """
    if left is None:
        return right
    if right is None:
        return left

    propagate(left)
    propagate(right)

    if get_priority(left) > get_priority(right):
        left.right = merge(left.right, right)
        reset_min(left)
        recalc(left)
        return left
    else:
        right.left = merge(left, right.left)
        reset_min(right)
        recalc(right)
        return right


def split(
    root: Optional[Node],
    k: int,
) -> Tuple[Optional[Node], Optional[Node]]:
    """
    Split a treap into its first k elements and the rest. The input is consumed.
    """
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise TreapIndexError(f"Split index must be an integer, got {k!r}.")
    if not 0 <= k <= get_size(root):
        raise TreapIndexError(f"Split index {k} out of range [0, {get_size(root)}].")
    return _split(root, int(k))


def _split(current, k):
    if current is None:
        return None, None

    propagate(current)

    if get_size(current.left) >= k:
        # The cut lies in the left subtree.
        left, current.left = _split(current.left, k)
        reset_min(current)
        recalc(current)
        return left, current
    else:
        # The cut lies in the right subtree, where indices start after this node.
        current.right, right = _split(current.right, k - get_size(current.left) - 1)
        reset_min(current)
        recalc(current)
        return current, right

import math

MAX_PRIORITY = 1000007


class Node:
    """
    Node of an implicit treap.
    """

    __slots__ = ("value", "priority", "min_value", "reverse", "size", "height", "left", "right")

    def __init__(
        self,
        value,
        priority,
    ):
        self.value = value
        # Heap ordering key, drawn at random so that the expected depth is logarithmic.
        self.priority = priority
        # Minimum value in the subtree rooted here.
        self.min_value = value
        # Children are logically swapped, but the swap has not been pushed down yet.
        self.reverse = False

        # Size is used for implicit indexing.
        self.size = 1
        self.height = 0

        self.left = None
        self.right = None

    def __repr__(self):
        return f"Node(value={self.value}, priority={self.priority}, size={self.size}, reverse={self.reverse})"


def make_node(value, rng):
    """
    Create a single-node treap with a priority drawn uniformly from [0, MAX_PRIORITY].
    """
    return Node(value, int(rng.randint(0, MAX_PRIORITY + 1)))


def get_value(x):
    return -1 if x is None else x.value


def get_min_value(x):
    return math.inf if x is None else x.min_value


def get_priority(x):
    return -1 if x is None else x.priority


def get_size(x):
    return 0 if x is None else x.size


def get_height(x):
    return 0 if x is None else x.height


def reset_min(x):
    """
    Reset the minimum value of a node to its own value. Used before recalc after a split or merge
    changed the children, since the child holding the old minimum may be gone.
    """
    if x is None:
        return
    x.min_value = x.value


def recalc(x):
    """
    Recalculate size, height and minimum value of a node from its children.
    """
    if x is None:
        return

    x.size = 1 + get_size(x.left) + get_size(x.right)

    if x.left is None and x.right is None:
        x.height = 0
        x.min_value = x.value
    else:
        x.height = 1 + max(get_height(x.left), get_height(x.right))
        x.min_value = min(x.min_value, get_min_value(x.left), get_min_value(x.right))


def propagate(x):
    """
    Push a pending reversal one level down.
    """
    if x is None or not x.reverse:
        return

    if x.left is not None:
        x.left.reverse = not x.left.reverse
    if x.right is not None:
        x.right.reverse = not x.right.reverse

    x.left, x.right = x.right, x.left
    x.reverse = False
    recalc(x)

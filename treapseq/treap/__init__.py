from .errors import ConsumedTreapError, TreapError, TreapIndexError
from .implicit_treap import ImplicitTreap
from .node import MAX_PRIORITY, Node, make_node, propagate, recalc, reset_min
from .operations import (
    build_from_sequence,
    index_of_minimum,
    insert_last,
    remove_first,
    reverse_range,
    to_sequence,
)
from .split_merge import merge, split

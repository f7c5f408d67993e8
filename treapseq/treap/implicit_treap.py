from treapseq.treap import operations
from treapseq.treap.errors import ConsumedTreapError
from treapseq.treap.split_merge import merge, split
from treapseq.util.random import make_rng


class ImplicitTreap:
    """
    Handle owning the root of an implicit treap.

    Mutations return a new handle and invalidate this one, so a subtree is never reachable from two
    live handles. Queries leave the handle valid.
    """

    def __init__(
        self,
        root=None,
        rng=None,
        seed=None,
    ):
        self._root = root
        self._rng = make_rng(seed) if rng is None else rng
        self._consumed = False

    @classmethod
    def from_sequence(cls, values, seed=None, rng=None):
        rng = make_rng(seed) if rng is None else rng
        return cls(operations.build_from_sequence(values, rng), rng=rng)

    def _check(self):
        if self._consumed:
            raise ConsumedTreapError("This treap was consumed by an earlier mutation.")

    def _consume(self):
        self._check()
        root = self._root
        self._root = None
        self._consumed = True
        return root

    def _wrap(self, root):
        return ImplicitTreap(root, rng=self._rng)

    @property
    def root(self):
        self._check()
        return self._root

    @property
    def consumed(self):
        return self._consumed

    @property
    def size(self):
        self._check()
        return operations.size(self._root)

    @property
    def height(self):
        self._check()
        return operations.height(self._root)

    @property
    def min_value(self):
        self._check()
        return operations.min_value(self._root)

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self.to_list())

    def __repr__(self):
        if self._consumed:
            return "ImplicitTreap(<consumed>)"
        return f"ImplicitTreap({self.to_list()})"

    def to_list(self):
        self._check()
        return operations.to_sequence(self._root)

    def index_of_minimum(self):
        self._check()
        return operations.index_of_minimum(self._root)

    def reverse_range(self, start, end):
        self._check()
        root = operations.reverse_range(self._root, start, end)
        self._root = None
        self._consumed = True
        return self._wrap(root)

    def remove_first(self):
        return self._wrap(operations.remove_first(self._consume()))

    def insert_last(self, value):
        return self._wrap(operations.insert_last(self._consume(), value, self._rng))

    def split(self, k):
        self._check()
        left, right = split(self._root, k)
        self._root = None
        self._consumed = True
        return self._wrap(left), self._wrap(right)

    def merge(self, other):
        if other is self:
            raise ValueError("Cannot merge a treap with itself.")
        self._check()
        other._check()
        return self._wrap(merge(self._consume(), other._consume()))

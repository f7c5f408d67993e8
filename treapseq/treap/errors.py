class TreapError(Exception):
    """
    Base class of treap errors.
    """


class TreapIndexError(TreapError, IndexError):
    """
    Split index or reversal range outside of the sequence.
    """


class ConsumedTreapError(TreapError, RuntimeError):
    """
    A handle was used after a mutation consumed it.
    """

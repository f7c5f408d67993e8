from treapseq.sorter import ReversalSorter, sort_by_reversal
from treapseq.treap import ConsumedTreapError, ImplicitTreap, TreapError, TreapIndexError

import os
from datetime import timedelta
from time import time

import pandas as pd
from tensorboardX import SummaryWriter
from tqdm import tqdm

from treapseq.treap import ImplicitTreap


class ReversalSorter:
    """
    Sort a sequence by chained reversals.

    At each step the current minimum is brought to the front by reversing the prefix ending at it, and
    then removed. The reported index of a step is the 1-based position of that minimum in the original
    array frame, i.e. the second index of the reversal.
    """

    def __init__(
        self,
        values,
        seed=0,
        log_dir=None,
        verbose=False,
    ):
        self.values = list(values)
        self.treap = ImplicitTreap.from_sequence(self.values, seed=seed)
        self.verbose = verbose

        # Log setting.
        self.log = {"step": [], "index": [], "value": [], "height": [], "size": []}
        self.removed = []
        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            self.csv_path = os.path.join(log_dir, "log.csv")
            self.writer = SummaryWriter(log_dir=os.path.join(log_dir, "summary"))
        else:
            self.csv_path = None
            self.writer = None

    def step(self, step):
        index = self.treap.index_of_minimum()
        value = self.treap.min_value
        height = self.treap.height
        size = self.treap.size

        if index != 0:
            self.treap = self.treap.reverse_range(0, index)
        # The minimum is at the front now and everything before it in the original frame is sorted.
        self.treap = self.treap.remove_first()
        self.removed.append(value)

        reported = index + step + 1
        self.log["step"].append(step)
        self.log["index"].append(reported)
        self.log["value"].append(value)
        self.log["height"].append(height)
        self.log["size"].append(size)

        if self.writer is not None:
            self.writer.add_scalar("treap/height", height, step)
            self.writer.add_scalar("treap/size", size, step)
            self.writer.add_scalar("sort/index", reported, step)
        return reported

    def run(self):
        self.start_time = time()
        # Continue from the elements already removed, if any.
        start = len(self.removed)
        steps = range(start, start + self.treap.size)
        if self.verbose:
            steps = tqdm(steps, desc="Sorting")

        indices = [self.step(step) for step in steps]

        if self.csv_path is not None:
            pd.DataFrame(self.log).to_csv(self.csv_path, index=False)
            self.writer.close()
        if self.verbose:
            print(f"Num steps: {len(indices):<6}   Time: {self.time}")
        return indices

    @property
    def time(self):
        return str(timedelta(seconds=int(time() - self.start_time)))


def sort_by_reversal(values, seed=0):
    """
    Run the reversal sort and return the reported indices and the removed values in removal order.
    """
    sorter = ReversalSorter(values, seed=seed)
    indices = sorter.run()
    return indices, sorter.removed

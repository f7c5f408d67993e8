import argparse

from treapseq.sorter import ReversalSorter
from treapseq.util import format_indices, read_sequence


def run(args):
    values = read_sequence(args.input)

    sorter = ReversalSorter(
        values,
        seed=args.seed,
        log_dir=args.log_dir,
        verbose=args.verbose,
    )
    indices = sorter.run()
    print(format_indices(indices))


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--input", type=str, default=None)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--log_dir", type=str, default=None)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args()
    run(args)

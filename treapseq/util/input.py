import sys


def parse_sequence(text):
    """
    Parse a count n followed by n whitespace separated integers.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Empty input, expected the number of elements.")

    try:
        numbers = [int(token) for token in tokens]
    except ValueError as e:
        raise ValueError(f"Input must contain only integers: {e}") from e

    num_elements, values = numbers[0], numbers[1:]
    if num_elements < 0:
        raise ValueError(f"Number of elements must be non-negative, got {num_elements}.")
    if len(values) != num_elements:
        raise ValueError(f"Expected {num_elements} elements, got {len(values)}.")
    return values


def read_sequence(path=None):
    if path is None:
        return parse_sequence(sys.stdin.read())
    with open(path) as f:
        return parse_sequence(f.read())


def format_indices(indices):
    return " ".join(str(i) for i in indices)

from .input import format_indices, parse_sequence, read_sequence
from .random import make_rng

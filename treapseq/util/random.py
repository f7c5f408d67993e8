import numpy as np


def make_rng(seed=None):
    """
    Create the generator used for node priorities. Seeded once, so the same seed gives the same tree shape.
    """
    return np.random.RandomState(seed)

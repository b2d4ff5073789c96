"""
Stochastic Helpers Module

Small helpers around the module-level 'random' generator. Seeding 'random'
(and 'numpy.random') reproduces a run exactly.

Functions:
    flip_coin:            Fair Bernoulli trial
    evaluate_probability: Bernoulli trial with a validated probability
    shuffle:              Shuffled concatenation of several sequences
"""

import random
from typing import Iterable, TypeVar

from galapagos.errors import ConfigurationError

T = TypeVar('T')

def flip_coin() -> bool:
    return random.random() < 0.5

def evaluate_probability(probability: float) -> bool:
    """
    Return True with the given probability.

    Parameters:
        probability: a number in [0, 1]

    Returns:
        outcome of the Bernoulli trial
    """
    if not 0.0 <= probability <= 1.0:
        raise ConfigurationError(f"probability must be in [0, 1], got {probability}")

    # Edge values are decided without consuming a random draw
    if probability == 0.0:
        return False
    if probability == 1.0:
        return True
    return random.random() < probability

def shuffle(*sequences: Iterable[T]) -> list[T]:
    """
    Concatenate the given sequences and return the result shuffled.
    """
    pool = [item for sequence in sequences for item in sequence]
    random.shuffle(pool)
    return pool

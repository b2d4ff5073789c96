"""
Shared Operators Module

Operators that work the same way on binary and permutation chromosomes, since
both are fixed-length sequences. Each returns a new chromosome of the same
type as its input.

Classes:
    NoOpCrossover:         Return one parent unchanged (coin flip which)
    CyclicShiftMutation:   Rotate a random segment left by one position
    ReverseMutation:       Reverse a random segment
    ScrambleMutation:      Shuffle a random (possibly wrapping) segment
    RandomizationMutation: Replace the chromosome with a random one
"""

import numpy as np
import random

from galapagos.genotype.chromosome import Chromosome, ChromosomeType
from galapagos.operators.operator  import Crossover, Mutation
from galapagos.stochastic          import flip_coin

SEQUENCE_TYPES = (ChromosomeType.BINARY, ChromosomeType.PERMUTATION)

def _values(chromosome: Chromosome) -> np.ndarray:
    # Writable copy of the underlying sequence
    if chromosome.kind is ChromosomeType.BINARY:
        return chromosome.bits.copy()
    return chromosome.permutation.copy()

def _random_segment(length: int) -> tuple[int, int]:
    """
    Return (start, end) with 0 <= start < end < length; both ends are inclusive.
    """
    start = random.randrange(length - 1)
    end   = random.randint(start + 1, length - 1)
    return start, end

class NoOpCrossover(Crossover):
    """
    Return one of the parents, chosen by a coin flip.
    """

    chromosome_types = (ChromosomeType.BINARY, ChromosomeType.PERMUTATION, ChromosomeType.NEURAL)
    name             = "noop"

    def _invoke(self, x, y, x_is_fitter):
        return x if flip_coin() else y

class CyclicShiftMutation(Mutation):
    """
    Pick a random segment and rotate it one position to the left:
    its first value moves to the end of the segment.
    """

    chromosome_types = SEQUENCE_TYPES
    name             = "cyclic_shift"

    def _invoke(self, chromosome):
        values = _values(chromosome)
        if len(values) < 2:
            return type(chromosome)(values)

        start, end = _random_segment(len(values))
        values[start:end + 1] = np.roll(values[start:end + 1], -1)
        return type(chromosome)(values)

class ReverseMutation(Mutation):
    """
    Pick a random segment and reverse the order of its values.
    """

    chromosome_types = SEQUENCE_TYPES
    name             = "reverse"

    def _invoke(self, chromosome):
        values = _values(chromosome)
        if len(values) < 2:
            return type(chromosome)(values)

        start, end = _random_segment(len(values))
        values[start:end + 1] = values[start:end + 1][::-1]
        return type(chromosome)(values)

class ScrambleMutation(Mutation):
    """
    Pick two distinct positions and shuffle the values between them.
    The segment wraps around the end of the sequence when the second
    position comes before the first one.
    """

    chromosome_types = SEQUENCE_TYPES
    name             = "scramble"

    def _invoke(self, chromosome):
        values = _values(chromosome)
        n      = len(values)
        if n < 2:
            return type(chromosome)(values)

        start, end = random.sample(range(n), 2)
        length     = (end - start) % n + 1
        positions  = [(start + i) % n for i in range(length)]

        segment = [values[i] for i in positions]
        random.shuffle(segment)
        for position, value in zip(positions, segment):
            values[position] = value
        return type(chromosome)(values)

class RandomizationMutation(Mutation):
    """
    Replace the chromosome with a uniformly random one of the same length.
    """

    chromosome_types = SEQUENCE_TYPES
    name             = "randomization"

    def _invoke(self, chromosome):
        return type(chromosome).random(len(chromosome))

"""
Binary Operators Module

Crossover and mutation operators specific to binary chromosomes.

Classes:
    SinglePointCrossover: Head of the first parent, tail of the second
    TwoPointCrossover:    Middle segment taken from the second parent
    UniformCrossover:     Each bit taken from either parent by a coin flip
    FlipBitMutation:      Invert every bit
    SingleBitMutation:    Invert one random bit
    BoundaryMutation:     Replace with all ones or all zeros
"""

import numpy as np
import random

from galapagos.errors                     import ConfigurationError, IncompatibilityError
from galapagos.genotype.binary_chromosome import BinaryChromosome
from galapagos.genotype.chromosome        import ChromosomeType
from galapagos.operators.operator         import Crossover, Mutation
from galapagos.stochastic                 import flip_coin

class SinglePointCrossover(Crossover):
    """
    Single-point crossover.

    For a crossover point p, the child takes bits [0, p] from the first parent
    and bits (p, B) from the second one. The point is drawn uniformly from
    [0, B-2] on every call unless fixed at construction.
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "single_point"

    def __init__(self, weight: float = 1.0, point: int | None = None):
        """
        Parameters:
            weight: relative weight of the operator
            point:  fixed crossover point, or None to draw it at random
        """
        super().__init__(weight)
        if point is not None and point < 0:
            raise ConfigurationError(f"crossover point cannot be negative, got {point}")
        self.point: int | None = point

    def _invoke(self, x: BinaryChromosome, y: BinaryChromosome, x_is_fitter: bool) -> BinaryChromosome:
        bit_count = x.bit_count
        if self.point is None:
            point = random.randrange(max(bit_count - 1, 1))
        else:
            if not 0 <= self.point < bit_count:
                raise IncompatibilityError(f"crossover point {self.point} is out of range for {bit_count} bits")
            point = self.point

        return BinaryChromosome(np.concatenate((x.bits[:point + 1], y.bits[point + 1:])))

class TwoPointCrossover(Crossover):
    """
    Two-point crossover: the child is a copy of the first parent in which
    a random segment [start, end) is taken from the second parent.
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "two_point"

    def _invoke(self, x: BinaryChromosome, y: BinaryChromosome, x_is_fitter: bool) -> BinaryChromosome:
        bits = x.bits.copy()
        if x.bit_count < 2:
            return BinaryChromosome(bits)

        start = random.randrange(x.bit_count - 1)
        end   = random.randint(start + 1, x.bit_count - 1)
        bits[start:end] = y.bits[start:end]
        return BinaryChromosome(bits)

class UniformCrossover(Crossover):
    """
    Uniform crossover: every bit is taken from either parent with equal probability.
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "uniform"

    def _invoke(self, x: BinaryChromosome, y: BinaryChromosome, x_is_fitter: bool) -> BinaryChromosome:
        from_x = [flip_coin() for _ in range(x.bit_count)]
        return BinaryChromosome(np.where(from_x, x.bits, y.bits))

class FlipBitMutation(Mutation):
    """
    Invert every bit of the chromosome.
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "flip_bit"

    def _invoke(self, chromosome: BinaryChromosome) -> BinaryChromosome:
        return BinaryChromosome(~chromosome.bits)

class SingleBitMutation(Mutation):
    """
    Invert one bit, chosen uniformly at random.
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "single_bit"

    def _invoke(self, chromosome: BinaryChromosome) -> BinaryChromosome:
        bits = chromosome.bits.copy()
        position = random.randrange(chromosome.bit_count)
        bits[position] = not bits[position]
        return BinaryChromosome(bits)

class BoundaryMutation(Mutation):
    """
    Replace the chromosome with all ones or all zeros (coin flip).
    """

    chromosome_types = (ChromosomeType.BINARY,)
    name             = "boundary"

    def _invoke(self, chromosome: BinaryChromosome) -> BinaryChromosome:
        if flip_coin():
            return BinaryChromosome(np.ones(chromosome.bit_count, dtype=bool))
        return BinaryChromosome(np.zeros(chromosome.bit_count, dtype=bool))

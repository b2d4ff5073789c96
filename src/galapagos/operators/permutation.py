"""
Permutation Operators Module

Crossover and mutation operators specific to permutation chromosomes. All of
them produce valid permutations: every value appears exactly once.

Classes:
    AlternatingPositionCrossover: Values taken alternately from each parent
    OrderCrossover:               Slice of the first parent, rest in the second parent's order
    MidpointCrossover:            First half of the first parent, rest in the second parent's order
    TranspositionMutation:        Swap two values
    DisplacementMutation:         Move a segment to another position
"""

import random

from galapagos.genotype.chromosome             import ChromosomeType
from galapagos.genotype.permutation_chromosome import PermutationChromosome
from galapagos.operators.operator              import Crossover, Mutation

class AlternatingPositionCrossover(Crossover):
    """
    Alternating-position crossover (AP).

    Walks both parents position by position, appending the value of the first
    parent and then the value of the second, skipping values already placed.
    """

    chromosome_types = (ChromosomeType.PERMUTATION,)
    name             = "alternating_position"

    def _invoke(self, x, y, x_is_fitter):
        seen  = set()
        child = []
        for value_x, value_y in zip(x.permutation.tolist(), y.permutation.tolist()):
            for value in (value_x, value_y):
                if value not in seen:
                    seen.add(value)
                    child.append(value)
        return PermutationChromosome(child)

class OrderCrossover(Crossover):
    """
    Order crossover (OX1).

    A random slice [start, end] of the first parent is copied in place; the
    remaining positions are filled, starting right after the slice and
    wrapping around, with the missing values in the order they appear in the
    second parent (also read starting right after the slice).
    """

    chromosome_types = (ChromosomeType.PERMUTATION,)
    name             = "order"

    def _invoke(self, x, y, x_is_fitter):
        n = x.n
        if n < 2:
            return PermutationChromosome(x.permutation)

        start = random.randrange(n)
        end   = random.randrange(start, n)

        child = [None] * n
        child[start:end + 1] = x.permutation[start:end + 1].tolist()
        kept = set(child[start:end + 1])

        donor     = y.permutation.tolist()
        remaining = [donor[(end + 1 + i) % n] for i in range(n)]
        remaining = [value for value in remaining if value not in kept]

        for i, value in enumerate(remaining):
            child[(end + 1 + i) % n] = value
        return PermutationChromosome(child)

class MidpointCrossover(Crossover):
    """
    Midpoint crossover: the first N // 2 values of the first parent,
    followed by the missing values in the order they appear in the second.
    """

    chromosome_types = (ChromosomeType.PERMUTATION,)
    name             = "midpoint"

    def _invoke(self, x, y, x_is_fitter):
        head = x.permutation[:x.n // 2].tolist()
        seen = set(head)
        tail = [value for value in y.permutation.tolist() if value not in seen]
        return PermutationChromosome(head + tail)

class TranspositionMutation(Mutation):
    """
    Swap the values at two distinct random positions.
    """

    chromosome_types = (ChromosomeType.PERMUTATION,)
    name             = "transposition"

    def _invoke(self, chromosome):
        permutation = chromosome.permutation.copy()
        if chromosome.n < 2:
            return PermutationChromosome(permutation)

        i, j = random.sample(range(chromosome.n), 2)
        permutation[i], permutation[j] = permutation[j], permutation[i]
        return PermutationChromosome(permutation)

class DisplacementMutation(Mutation):
    """
    Cut a random segment out of the permutation and
    reinsert it at a different random position.
    """

    chromosome_types = (ChromosomeType.PERMUTATION,)
    name             = "displacement"

    def _invoke(self, chromosome):
        values = chromosome.permutation.tolist()
        n      = len(values)
        if n < 2:
            return PermutationChromosome(values)

        size    = random.randint(1, n - 1)
        start   = random.randrange(n - size + 1)
        segment = values[start:start + size]
        rest    = values[:start] + values[start + size:]

        # Any insertion point other than the original one
        insertion = random.choice([i for i in range(len(rest) + 1) if i != start])
        return PermutationChromosome(rest[:insertion] + segment + rest[insertion:])

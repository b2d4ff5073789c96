"""
Operators Package

This package implements the genetic operators (crossover and mutation) for
every chromosome variant, and the weighted selection of one operator among a
configured set.

Modules:
    operator:    GeneticOperator, Crossover and Mutation base classes, select_operator
    shared:      Operators working on both binary and permutation chromosomes
    binary:      Binary chromosome operators
    permutation: Permutation chromosome operators
    neat:        NEAT genome operators

Exported:
    crossovers:        Crossover classes by chromosome type and name
    mutations:         Mutation classes by chromosome type and name
    default_crossovers(kind): Default crossover selection of a chromosome type
    default_mutations(kind):  Default mutation selection of a chromosome type
    select_operator:   Weighted random choice of an operator
"""

from galapagos.genotype.chromosome import ChromosomeType
from galapagos.operators.operator  import GeneticOperator, Crossover, Mutation, select_operator
from galapagos.operators.shared    import (NoOpCrossover,
                                           CyclicShiftMutation,
                                           ReverseMutation,
                                           ScrambleMutation,
                                           RandomizationMutation)
from galapagos.operators.binary    import (SinglePointCrossover,
                                           TwoPointCrossover,
                                           UniformCrossover,
                                           FlipBitMutation,
                                           SingleBitMutation,
                                           BoundaryMutation)
from galapagos.operators.permutation import (AlternatingPositionCrossover,
                                             OrderCrossover,
                                             MidpointCrossover,
                                             TranspositionMutation,
                                             DisplacementMutation)
from galapagos.operators.neat      import (NeatCrossover,
                                           EdgeMutation,
                                           NodeMutation,
                                           EnableDisableMutation,
                                           WeightMutation)

def _catalogue(*classes) -> dict[str, type]:
    return {cls.name: cls for cls in classes}

# Operator classes available for each chromosome type, by configuration name
crossovers = {
    ChromosomeType.BINARY     : _catalogue(SinglePointCrossover, TwoPointCrossover, UniformCrossover, NoOpCrossover),
    ChromosomeType.PERMUTATION: _catalogue(AlternatingPositionCrossover, OrderCrossover, MidpointCrossover, NoOpCrossover),
    ChromosomeType.NEURAL     : _catalogue(NeatCrossover, NoOpCrossover),
    }

mutations = {
    ChromosomeType.BINARY     : _catalogue(CyclicShiftMutation, RandomizationMutation, ReverseMutation,
                                           ScrambleMutation, FlipBitMutation, SingleBitMutation, BoundaryMutation),
    ChromosomeType.PERMUTATION: _catalogue(CyclicShiftMutation, RandomizationMutation, ReverseMutation,
                                           ScrambleMutation, TranspositionMutation, DisplacementMutation),
    ChromosomeType.NEURAL     : _catalogue(EdgeMutation, NodeMutation, EnableDisableMutation, WeightMutation),
    }

def default_crossovers(kind: ChromosomeType) -> list[Crossover]:
    if kind is ChromosomeType.BINARY:
        return [SinglePointCrossover()]
    if kind is ChromosomeType.PERMUTATION:
        return [OrderCrossover()]
    return [NeatCrossover()]

def default_mutations(kind: ChromosomeType) -> list[Mutation]:
    if kind is ChromosomeType.BINARY:
        return [SingleBitMutation()]
    if kind is ChromosomeType.PERMUTATION:
        return [TranspositionMutation()]
    return [NodeMutation(), EdgeMutation()]

__all__ = [
    'GeneticOperator', 'Crossover', 'Mutation', 'select_operator',
    'crossovers', 'mutations', 'default_crossovers', 'default_mutations',
    'NoOpCrossover', 'CyclicShiftMutation', 'ReverseMutation', 'ScrambleMutation', 'RandomizationMutation',
    'SinglePointCrossover', 'TwoPointCrossover', 'UniformCrossover',
    'FlipBitMutation', 'SingleBitMutation', 'BoundaryMutation',
    'AlternatingPositionCrossover', 'OrderCrossover', 'MidpointCrossover',
    'TranspositionMutation', 'DisplacementMutation',
    'NeatCrossover', 'EdgeMutation', 'NodeMutation', 'EnableDisableMutation', 'WeightMutation',
]

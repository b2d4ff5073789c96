"""
Selection Package

This package implements the parent-selection strategies used by the
generational loop.

Modules:
    selection_algorithm:           SelectionAlgorithm base class
    fitness_proportionate:         FitnessProportionateSelection class
    stochastic_universal_sampling: StochasticUniversalSampling class
    tournament:                    TournamentSelection class
    truncation:                    TruncationSelection class

Exported:
    selection_algorithms: Selection algorithm classes by configuration name
"""

from galapagos.selection.selection_algorithm           import SelectionAlgorithm
from galapagos.selection.fitness_proportionate         import FitnessProportionateSelection
from galapagos.selection.stochastic_universal_sampling import StochasticUniversalSampling
from galapagos.selection.tournament                    import TournamentSelection
from galapagos.selection.truncation                    import TruncationSelection

selection_algorithms = {cls.name: cls for cls in (FitnessProportionateSelection,
                                                  StochasticUniversalSampling,
                                                  TournamentSelection,
                                                  TruncationSelection)}

__all__ = ['FitnessProportionateSelection',
           'SelectionAlgorithm',
           'StochasticUniversalSampling',
           'TournamentSelection',
           'TruncationSelection',
           'selection_algorithms']

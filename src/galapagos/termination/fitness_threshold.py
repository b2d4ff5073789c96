"""
Fitness Threshold Module

Classes:
    FitnessThreshold: Stop once a creature is fit enough
"""

from typing import TYPE_CHECKING

from galapagos.termination.termination_condition import TerminationCondition
if TYPE_CHECKING:
    from galapagos.pool import Population

class FitnessThreshold(TerminationCondition):
    """
    Satisfied once the best true (unshared) fitness in the population
    reaches the threshold.
    """

    name = "fitness_threshold"

    def __init__(self, threshold: float):
        self.threshold: float = threshold

    def check(self, population: 'Population') -> bool:
        return population.best_true_fitness >= self.threshold

    def __repr__(self):
        return f"FitnessThreshold({self.threshold})"

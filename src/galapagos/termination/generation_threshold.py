"""
Generation Threshold Module

Classes:
    GenerationThreshold: Stop after a given number of generations
"""

from typing import TYPE_CHECKING

from galapagos.errors                              import ConfigurationError
from galapagos.termination.termination_condition import TerminationCondition
if TYPE_CHECKING:
    from galapagos.pool import Population

class GenerationThreshold(TerminationCondition):
    """
    Satisfied once the generation counter reaches the threshold.
    """

    name = "generation_threshold"

    def __init__(self, threshold: int = 1000):
        if threshold < 0:
            raise ConfigurationError(f"generation threshold cannot be negative, got {threshold}")
        self.threshold: int = threshold

    def check(self, population: 'Population') -> bool:
        return population.generation >= self.threshold

    def __repr__(self):
        return f"GenerationThreshold({self.threshold})"

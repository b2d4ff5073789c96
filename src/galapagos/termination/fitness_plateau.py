"""
Fitness Plateau Module

Classes:
    FitnessPlateau: Stop when the best fitness stops improving
"""

from typing import TYPE_CHECKING

from galapagos.errors                              import ConfigurationError
from galapagos.termination.termination_condition import TerminationCondition
if TYPE_CHECKING:
    from galapagos.pool import Population

class FitnessPlateau(TerminationCondition):
    """
    Satisfied when the best true fitness in the population has not improved
    for 'length' consecutive checks. Any improvement restarts the count.
    """

    name = "fitness_plateau"

    def __init__(self, length: int):
        if length <= 0:
            raise ConfigurationError(f"plateau length must be positive, got {length}")
        self.length: int = length

        self._best_fitness: float | None = None
        self._stale_count : int          = 0

    def check(self, population: 'Population') -> bool:
        fitness = population.best_true_fitness
        if self._best_fitness is None or fitness > self._best_fitness:
            self._best_fitness = fitness
            self._stale_count  = 0
        else:
            self._stale_count += 1

        return self._stale_count >= self.length

    def __repr__(self):
        return f"FitnessPlateau({self.length})"

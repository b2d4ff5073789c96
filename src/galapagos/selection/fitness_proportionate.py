"""
Fitness-Proportionate Selection Module

Classes:
    FitnessProportionateSelection: Roulette-wheel selection
"""

import random
from typing import Sequence, TYPE_CHECKING

from galapagos.selection.selection_algorithm import SelectionAlgorithm
if TYPE_CHECKING:
    from galapagos.pool import Creature

class FitnessProportionateSelection(SelectionAlgorithm):
    """
    Roulette-wheel selection: each creature is selected with probability
    proportional to its fitness. Every fitness must be positive.
    """

    name = "fitness_proportionate"

    def initialize(self, creatures: Sequence['Creature']) -> None:
        super().initialize(creatures)

        self._creatures.sort(key=lambda creature: creature.fitness, reverse=True)
        self._fitness = [creature.fitness for creature in self._creatures]
        if self._fitness[-1] <= 0:
            raise ValueError("fitness-proportionate selection requires every fitness to be positive")
        self._total = sum(self._fitness)

    def invoke(self) -> 'Creature':
        self._check_initialized()

        value = random.random() * self._total
        for creature, fitness in zip(self._creatures, self._fitness):
            value -= fitness
            if value <= 0:
                return creature
        return self._creatures[-1]

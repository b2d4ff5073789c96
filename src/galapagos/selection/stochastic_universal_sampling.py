"""
Stochastic Universal Sampling Module

Classes:
    StochasticUniversalSampling: Roulette wheel read through evenly spaced pointers
"""

import random
from typing import Sequence, TYPE_CHECKING

from galapagos.errors                        import ConfigurationError
from galapagos.selection.selection_algorithm import SelectionAlgorithm
if TYPE_CHECKING:
    from galapagos.pool import Creature

class StochasticUniversalSampling(SelectionAlgorithm):
    """
    Stochastic universal sampling (SUS).

    At initialization, N equally spaced pointers (spacing F/N, F the total
    fitness) are laid over the roulette wheel starting from a single random
    offset, and the creatures under the pointers are kept. Each invocation
    returns one of the kept creatures uniformly at random. Compared with
    independent roulette draws this lowers the variance of how often each
    creature is selected. Every fitness must be positive.
    """

    name = "stochastic_universal_sampling"

    def __init__(self, pointer_count: int = 100):
        """
        Parameters:
            pointer_count: number of pointers laid over the wheel
        """
        super().__init__()
        if pointer_count <= 0:
            raise ConfigurationError(f"pointer count must be positive, got {pointer_count}")
        self.pointer_count: int = pointer_count
        self._selected: list['Creature'] = []

    def initialize(self, creatures: Sequence['Creature']) -> None:
        super().initialize(creatures)

        self._creatures.sort(key=lambda creature: creature.fitness, reverse=True)
        fitness = [creature.fitness for creature in self._creatures]
        if fitness[-1] <= 0:
            raise ValueError("stochastic universal sampling requires every fitness to be positive")

        spacing = sum(fitness) / self.pointer_count
        pointer = random.random() * spacing

        self._selected = []
        cumulative     = 0.0
        index          = 0
        for _ in range(self.pointer_count):
            while index < len(fitness) - 1 and cumulative + fitness[index] < pointer:
                cumulative += fitness[index]
                index      += 1
            self._selected.append(self._creatures[index])
            pointer += spacing

    def invoke(self) -> 'Creature':
        self._check_initialized()
        return random.choice(self._selected)

    def copy(self) -> 'StochasticUniversalSampling':
        clone = super().copy()
        clone._selected = []
        return clone

"""
Truncation Selection Module

Classes:
    TruncationSelection: Uniform choice among the top fraction of creatures
"""

import math
import random
from typing import Sequence, TYPE_CHECKING

from galapagos.errors                        import ConfigurationError
from galapagos.selection.selection_algorithm import SelectionAlgorithm
if TYPE_CHECKING:
    from galapagos.pool import Creature

class TruncationSelection(SelectionAlgorithm):
    """
    Truncation selection: only the fittest fraction of the creatures
    (at least one) breeds, each of them with equal probability.
    """

    name = "truncation"

    def __init__(self, rate: float = 0.33):
        """
        Parameters:
            rate: fraction of the creatures kept for breeding, in (0, 1]
        """
        super().__init__()
        if not 0.0 < rate <= 1.0:
            raise ConfigurationError(f"truncation rate must be in (0, 1], got {rate}")
        self.rate: float = rate

    def initialize(self, creatures: Sequence['Creature']) -> None:
        super().initialize(creatures)
        self._creatures.sort(key=lambda creature: creature.fitness, reverse=True)
        keep = max(1, math.floor(len(self._creatures) * self.rate))
        self._creatures = self._creatures[:keep]

    def invoke(self) -> 'Creature':
        self._check_initialized()
        return random.choice(self._creatures)

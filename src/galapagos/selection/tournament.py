"""
Tournament Selection Module

Classes:
    TournamentSelection: Best of k creatures drawn at random
"""

import random
from typing import TYPE_CHECKING

from galapagos.errors                        import ConfigurationError
from galapagos.selection.selection_algorithm import SelectionAlgorithm
if TYPE_CHECKING:
    from galapagos.pool import Creature

class TournamentSelection(SelectionAlgorithm):
    """
    Tournament selection: draw k creatures uniformly at random (with
    replacement) and return the fittest of them.
    """

    name = "tournament"

    def __init__(self, size: int = 2):
        """
        Parameters:
            size: number of creatures taking part in each tournament
        """
        super().__init__()
        if size <= 0:
            raise ConfigurationError(f"tournament size must be positive, got {size}")
        self.size: int = size

    def invoke(self) -> 'Creature':
        self._check_initialized()
        contestants = [random.choice(self._creatures) for _ in range(self.size)]
        return max(contestants, key=lambda creature: creature.fitness)

"""
Selection Algorithm Module

This module defines the interface shared by all parent-selection strategies.

Classes:
    SelectionAlgorithm: Abstract base class for selection algorithms
"""

import copy
from abc    import ABC, abstractmethod
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from galapagos.pool import Creature

class SelectionAlgorithm(ABC):
    """
    Abstract base class for selection algorithms.

    A selection algorithm is initialized once per generation with a snapshot
    of the breeding creatures, then invoked as many times as parents are
    needed. Invocations are independent: the same creature can be returned
    any number of times, including as both parents of a child.

    Selection uses each creature's effective ('fitness') value, which accounts
    for fitness sharing inside niches.

    Public Methods:
        initialize(creatures): Prepare the algorithm for the current generation
        invoke():              Select one creature
        copy():                Fresh, uninitialized copy of the algorithm
    """

    name: str = ""

    def __init__(self):
        self._creatures: list['Creature'] = []

    def initialize(self, creatures: Sequence['Creature']) -> None:
        """
        Take a snapshot of the creatures to select from.

        Parameters:
            creatures: the breeding creatures of the current generation
        """
        if not creatures:
            raise ValueError("cannot select from an empty set of creatures")
        self._creatures = list(creatures)

    @abstractmethod
    def invoke(self) -> 'Creature':
        pass

    def copy(self) -> 'SelectionAlgorithm':
        clone = copy.copy(self)
        clone._creatures = []
        return clone

    def _check_initialized(self) -> None:
        if not self._creatures:
            raise RuntimeError(f"{type(self).__name__} must be initialized before being invoked")

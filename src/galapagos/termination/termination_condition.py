"""
Termination Condition Module

This module defines the interface shared by all termination conditions.

Classes:
    TerminationCondition: Abstract base class for termination conditions
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from galapagos.pool import Population

class TerminationCondition(ABC):
    """
    Abstract base class for termination conditions.

    The population checks its conditions once after every generation and
    stops as soon as any of them is satisfied. Conditions may keep state
    between checks (e.g. a plateau counter or a clock).

    Public Methods:
        check(population): Whether the run should stop
    """

    name: str = ""

    @abstractmethod
    def check(self, population: 'Population') -> bool:
        pass

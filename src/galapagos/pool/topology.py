"""
Group Topology Module

Group topologies describe which island groups of a species are neighbours.

Classes:
    GroupTopology:    Abstract base class for group topologies
    CircularTopology: Groups arranged on a ring
"""

from abc    import ABC, abstractmethod
from typing import Iterator, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from galapagos.pool.group import Group

class GroupTopology(ABC):
    """
    An arrangement of groups.

    Public Methods:
        neighbors(index): The groups adjacent to the group at 'index'
    """

    def __init__(self, groups: Sequence['Group']):
        self._groups: list['Group'] = list(groups)

    @abstractmethod
    def neighbors(self, index: int) -> list['Group']:
        pass

    def __getitem__(self, index: int) -> 'Group':
        return self._groups[index]

    def __iter__(self) -> Iterator['Group']:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

class CircularTopology(GroupTopology):
    """
    Groups arranged on a ring: the neighbours of a group are the
    previous and the next one, wrapping around at both ends.
    """

    def neighbors(self, index: int) -> list['Group']:
        size = len(self._groups)
        return [self._groups[(index - 1) % size], self._groups[(index + 1) % size]]

"""
Niche Module

This module implements fitness sharing: creatures are clustered into niches of
genetically similar creatures, and every member of a niche shares its fitness
with the other members. This keeps one fitness peak from taking over the whole
population.

Classes:
    Niche: A cluster of creatures within a distance threshold of a representative

Functions:
    reassign_niches: Cluster a new generation, starting from the previous niches
    clear_niches:    Remove the niche membership of a set of creatures
"""

import logging
import random
from typing import Iterator, Sequence, TYPE_CHECKING

from galapagos.errors import ConfigurationError
if TYPE_CHECKING:
    from galapagos.pool.creature import Creature

logger = logging.getLogger(__name__)

class Niche:
    """
    A cluster of creatures within a distance threshold of a representative.

    The representative decides membership but is not necessarily a member:
    when niches are carried over to a new generation, the representative is a
    creature of the previous generation.

    Public Attributes:
        representative: Creature against which candidates are compared
        threshold:      Maximum distance between a member and the representative
        members:        The creatures in the niche

    Public Properties:
        adjusted_fitness: Sum of the true fitness of the members

    Public Methods:
        compatible(creature): Whether a creature is close enough to join
        add(creature):        Add a creature and point it to this niche
    """

    def __init__(self, representative: 'Creature', threshold: float):
        """
        Parameters:
            representative: the creature members are compared to
            threshold:      the niche radius, must be positive
        """
        if threshold <= 0:
            raise ConfigurationError(f"distance threshold must be positive, got {threshold}")

        self.representative: 'Creature'       = representative
        self.threshold     : float            = threshold
        self.members       : list['Creature'] = []

    @property
    def adjusted_fitness(self) -> float:
        return sum(creature.true_fitness for creature in self.members)

    def compatible(self, creature: 'Creature') -> bool:
        return self.representative.distance(creature) <= self.threshold

    def add(self, creature: 'Creature') -> None:
        self.members.append(creature)
        creature.niche = self

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator['Creature']:
        return iter(self.members)

    def __getitem__(self, index: int) -> 'Creature':
        return self.members[index]

    def __repr__(self):
        return f"Niche(representative={self.representative.ID}, size={len(self)})"

def reassign_niches(previous : Sequence[Niche],
                    creatures: Sequence['Creature'],
                    threshold: float) -> list[Niche]:
    """
    Cluster a generation of creatures into niches.

    Every previous niche is replaced by a fresh, empty niche whose
    representative is one of its former members, picked at random. Each
    creature then joins the first niche whose representative is within the
    threshold, or founds a new niche of which it is the representative.
    Niches left without members are dropped. The result depends on the order
    of the creatures.

    The previous niches keep their members. A representative taken from the
    previous generation loses its own niche, so older niches can be freed.

    Parameters:
        previous:  the niches of the previous generation
        creatures: the creatures to cluster
        threshold: the niche radius

    Returns:
        the new niches
    """
    current = {id(creature) for creature in creatures}
    niches  = []
    for niche in previous:
        if not niche.members:
            continue
        representative = random.choice(niche.members)
        if id(representative) not in current:
            # the old niche must not outlive its generation
            representative.niche = None
        niches.append(Niche(representative, threshold))

    for creature in creatures:
        niche = next((niche for niche in niches if niche.compatible(creature)), None)
        if niche is None:
            niche = Niche(creature, threshold)
            niches.append(niche)
        niche.add(creature)

    niches = [niche for niche in niches if niche.members]
    logger.debug("assigned %d creatures to %d niches", len(creatures), len(niches))
    return niches

def clear_niches(creatures: Sequence['Creature']) -> None:
    for creature in creatures:
        creature.niche = None

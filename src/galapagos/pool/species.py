"""
Species Module

This module implements the Species class. A species evolves either whole
creatures or, under cooperative coevolution, a single chromosome of them,
using one or more island groups.

Classes:
    Species: A sub-population of island groups responsible for some chromosomes
"""

import logging
from joblib import Parallel, delayed
from typing import Iterator, Mapping, TYPE_CHECKING

from galapagos.genotype.chromosome import Chromosome
from galapagos.pool.creature       import Creature
from galapagos.pool.group          import Group
from galapagos.pool.topology       import CircularTopology
from galapagos.stochastic          import shuffle

if TYPE_CHECKING:
    from galapagos.genotype     import InnovationRegistry
    from galapagos.run.metadata import PopulationMetadata

logger = logging.getLogger(__name__)

class Species:
    """
    A sub-population responsible for evolving some of the chromosomes of a creature.

    The chromosome filter is either '*' (the species evolves whole creatures)
    or the name of a single chromosome (cooperative coevolution). Creatures of
    a species only own the chromosomes it is responsible for; they read the
    others from a read-only snapshot of the champions of the other species.

    The creatures of a species are split into island groups of (nearly) equal
    size. Each generation the species runs a number of inner iterations; in
    each of them every group breeds a new generation, then, when there are
    several groups, the best group colonizes its weakest neighbour.

    Public Attributes:
        chromosome_filter: '*' or the name of the chromosome the species evolves
        groups:            The island groups of the species

    Public Properties:
        names:            Names of the chromosomes the species evolves
        optimal_creature: The creature with the highest true fitness

    Public Methods:
        evolve(num_jobs):         Run the inner iterations of one generation
        colonize():               Let the best group colonize its weakest neighbour
        set_champions(champions): Hand a new champion snapshot to every creature
    """

    def __init__(self,
                 metadata         : 'PopulationMetadata',
                 registry         : 'InnovationRegistry',
                 chromosome_filter: str                            = "*",
                 champions        : Mapping[str, Chromosome] | None = None):
        """
        Parameters:
            metadata:          description of the population
            registry:          innovation trackers of the run
            chromosome_filter: '*' for all chromosomes, or a single chromosome name
            champions:         snapshot of the other species' champions
        """
        if chromosome_filter != "*" and chromosome_filter not in metadata:
            raise KeyError(f"'{chromosome_filter}' is not a valid chromosome name")

        self._metadata        : 'PopulationMetadata' = metadata
        self.chromosome_filter: str                  = chromosome_filter

        # Split the species into groups whose sizes differ by at most one
        base, extra = divmod(metadata.size, metadata.group_count)
        sizes = [base + (1 if i < extra else 0) for i in range(metadata.group_count)]

        self.groups: list[Group] = [
            Group(metadata, [Creature.random(metadata, registry, self.names, champions) for _ in range(size)])
            for size in sizes]
        self._topology: CircularTopology = CircularTopology(self.groups)
        self._optimal : Creature | None  = None

    @property
    def names(self) -> list[str]:
        if self.chromosome_filter == "*":
            return self._metadata.names
        return [self.chromosome_filter]

    @property
    def creatures(self) -> list[Creature]:
        return [creature for group in self.groups for creature in group]

    @property
    def optimal_creature(self) -> Creature:
        if self._optimal is None:
            self._optimal = self._find_optimal_creature()
        return self._optimal

    def _find_optimal_creature(self) -> Creature:
        return max((group.optimal_creature for group in self.groups),
                   key=lambda creature: creature.true_fitness)

    def evolve(self, num_jobs: int = 1) -> None:
        """
        Run the inner iterations of one generation.

        With a single group the group evaluates fitness with 'num_jobs'
        processes. With several groups and num_jobs != 1 the groups evolve
        concurrently, on threads, and evaluate fitness serially.

        Parameters:
            num_jobs: number of parallel jobs
                       1 = serial (no parallelization)
                      -1 = use all available CPU cores
                      >1 = use specified number of jobs
        """
        for _ in range(self._metadata.species_iterations):
            if num_jobs == 1 or len(self.groups) == 1:
                for group in self.groups:
                    group.evolve(num_jobs)
            else:
                Parallel(num_jobs, backend="threading")(delayed(group.evolve)(1) for group in self.groups)

            if len(self.groups) > 1:
                self.colonize()

        self._optimal = self._find_optimal_creature()

    def colonize(self) -> None:
        """
        Let the best group colonize its weakest neighbour.

        The group holding the fittest creature breeds a new generation; its
        current and new creatures are pooled and shuffled. The front of the
        pool replaces the colonist group, the back of it replaces the weakest
        of the colonist's neighbours in the group topology.
        """
        indices  = range(len(self._topology))
        best     = max(indices, key=lambda i: self._topology[i].optimal_creature.true_fitness)
        colonist = self._topology[best]
        extinct  = min(self._topology.neighbors(best), key=lambda group: group.optimal_creature.true_fitness)
        if extinct is colonist:
            return

        pool  = shuffle(colonist.creatures, colonist.breed_new_generation())
        front = pool[:len(colonist)]
        back  = pool[len(colonist):len(colonist) + len(extinct)]

        # Groups may differ in size by one
        while len(back) < len(extinct):
            back.append(front[len(back) % len(front)].clone())

        logger.debug("group %d colonizes a group of %d creatures", best, len(extinct))
        colonist.assign_creatures(front)
        extinct.assign_creatures(back)

    def set_champions(self, champions: Mapping[str, Chromosome]) -> None:
        for creature in self.creatures:
            creature.set_champions(champions)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self.creatures)

    def __len__(self) -> int:
        return sum(len(group) for group in self.groups)

    def __repr__(self):
        return f"Species(filter={self.chromosome_filter!r}, groups={len(self.groups)})"

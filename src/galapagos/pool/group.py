"""
Group Module

This module implements the Group class, an island of creatures that only breed
among themselves. Groups are the unit at which one generation is bred.

Classes:
    Group: A fixed-size island sub-population
"""

import math
from joblib import Parallel, delayed
from typing import Iterator, Sequence, TYPE_CHECKING

from galapagos.pool.niche import Niche, reassign_niches
if TYPE_CHECKING:
    from galapagos.pool.creature import Creature
    from galapagos.run.metadata  import PopulationMetadata
    from galapagos.selection     import SelectionAlgorithm

class Group:
    """
    A fixed-size island of creatures that only breed among themselves.

    One generation of a group goes through the following steps:
    1. evaluate the fitness of every creature (serially or in parallel)
    2. carry the fittest creatures unchanged into the next generation (elitism)
    3. initialize the selection algorithm with the current creatures
    4. breed pairs of selected parents until the next generation is full
    5. replace the current creatures with the next generation
    6. cluster the new generation into niches (when niching is enabled)
    7. evaluate the new generation and find its optimal creature

    Every group works with its own copy of the selection algorithm.

    Public Attributes:
        creatures: The creatures of the current generation
        niches:    The niches of the current generation

    Public Properties:
        optimal_creature: The creature with the highest true fitness

    Public Methods:
        evolve(num_jobs):             Breed the next generation
        evaluate_fitness(num_jobs):   Compute the fitness of every creature
        breed_new_generation():       Produce a next generation without installing it
        assign_creatures(creatures):  Install a new set of creatures
    """

    def __init__(self, metadata: 'PopulationMetadata', creatures: Sequence['Creature']):
        """
        Parameters:
            metadata:  description of the population
            creatures: the initial creatures of the group
        """
        if not creatures:
            raise ValueError("a group needs at least one creature")

        self._metadata : 'PopulationMetadata' = metadata
        self._selection: 'SelectionAlgorithm' = metadata.selection_algorithm.copy()
        self._optimal  : 'Creature | None'    = None

        self.creatures: list['Creature'] = list(creatures)
        self.niches   : list[Niche]      = []

    @property
    def optimal_creature(self) -> 'Creature':
        if self._optimal is None:
            self._optimal = self._find_optimal_creature()
        return self._optimal

    def _find_optimal_creature(self) -> 'Creature':
        # The first creature wins ties
        return max(self.creatures, key=lambda creature: creature.true_fitness)

    def evolve(self, num_jobs: int = 1) -> None:
        """
        Breed the next generation of the group.

        Parameters:
            num_jobs: number of parallel processes for fitness evaluation
                       1 = serial (no parallelization)
                      -1 = use all available CPU cores
                      >1 = use specified number of processes
        """
        self.evaluate_fitness(num_jobs)
        self.assign_creatures(self.breed_new_generation())
        self.evaluate_fitness(num_jobs)
        self._optimal = self._find_optimal_creature()

    def evaluate_fitness(self, num_jobs: int = 1) -> None:
        """
        Compute the fitness of every creature whose fitness is not cached yet.

        With more than one job, the fitness function runs in worker processes
        and the results are stored back into the creatures; the final state is
        the same as with serial evaluation.

        Parameters:
            num_jobs: number of parallel processes for fitness evaluation
        """
        pending = [creature for creature in self.creatures if not creature.evaluated]
        if not pending:
            return

        if num_jobs == 1:
            for creature in pending:
                _ = creature.true_fitness
        else:
            fitness_function = self._metadata.fitness_function
            fitness_all      = Parallel(num_jobs)(delayed(fitness_function)(c) for c in pending)
            for creature, fitness in zip(pending, fitness_all):
                creature.true_fitness = fitness

    def breed_new_generation(self) -> list['Creature']:
        """
        Produce a next generation from the current creatures.

        The fittest ceil(size * survival rate) creatures (by effective fitness)
        are cloned into the next generation with their fitness; the rest of
        it is bred from parents picked by the selection algorithm.

        Returns:
            the next generation (the group itself is left unchanged)
        """
        size           = len(self.creatures)
        new_generation = []

        if self._metadata.survival_rate > 0:
            elite_number   = min(size, math.ceil(size * self._metadata.survival_rate))
            sorted_members = sorted(self.creatures, key=lambda creature: creature.fitness, reverse=True)
            new_generation = [creature.clone() for creature in sorted_members[:elite_number]]

        self._selection.initialize(self.creatures)
        while len(new_generation) < size:
            parent_x = self._selection.invoke()
            parent_y = self._selection.invoke()
            new_generation.append(parent_x.breed(parent_y))

        return new_generation

    def assign_creatures(self, creatures: Sequence['Creature']) -> None:
        """
        Replace the creatures of the group, in place, and cluster them into
        niches when niching is enabled. The optimal creature is recomputed
        on its next access.
        """
        self.creatures[:] = creatures
        if self._metadata.distance_threshold > 0:
            self.niches = reassign_niches(self.niches, self.creatures, self._metadata.distance_threshold)
        self._optimal = None

    def __iter__(self) -> Iterator['Creature']:
        return iter(self.creatures)

    def __getitem__(self, index: int) -> 'Creature':
        return self.creatures[index]

    def __len__(self) -> int:
        return len(self.creatures)

    def __repr__(self):
        return f"Group(size={len(self)}, niches={len(self.niches)})"

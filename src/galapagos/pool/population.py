"""
Population Module

This module implements the Population class, the top-level orchestrator of the
evolutionary process. The population manages the complete lifecycle of a run,
from the initial random creatures to the generation at which one of the
termination conditions is satisfied.

Classes:
    Population: Top-level container of species, driving the generational loop
"""

import logging
from types  import MappingProxyType
from typing import Iterator, Mapping

from galapagos.genotype.chromosome         import Chromosome
from galapagos.genotype.innovation_tracker import InnovationRegistry
from galapagos.pool.creature               import Creature
from galapagos.pool.niche                  import clear_niches
from galapagos.pool.species                import Species
from galapagos.run.data_logger             import DataLogger
from galapagos.run.metadata                import PopulationMetadata

logger = logging.getLogger(__name__)

class Population:
    """
    A population of evolving creatures.

    Without cooperative coevolution the population holds a single species
    evolving whole creatures. With it, there is one species per chromosome;
    each species evolves its own chromosome and reads the others from a
    read-only snapshot of the champions of the other species, refreshed after
    every generation.

    One generation runs every species once, increments the generation counter,
    refreshes the champion snapshot and (optionally) logs the best fitness.
    The run stops after the first generation at which any of the termination
    conditions is satisfied; all conditions are checked every generation.

    Public Attributes:
        metadata:   Description of the population and its evolution
        registry:   Innovation trackers of the run
        species:    The species of the population
        generation: Number of generations bred so far

    Public Properties:
        optimal_creature:  The creature with the highest true fitness
        best_true_fitness: True fitness of the optimal creature

    Public Methods:
        evolve(num_jobs):          Evolve until a termination condition is satisfied
        parallel_evolve(num_jobs): Same as evolve(), evaluating fitness in parallel by default
        step(num_jobs):            Breed a single generation
        terminated():              Check the termination conditions
        release_niches():          Take every creature out of its niche
        champions():               Snapshot of the best chromosome for each name
        enable_logging(path):      Log the best fitness of every generation
        disable_logging():         Stop logging
    """

    def __init__(self, metadata: PopulationMetadata, registry: InnovationRegistry | None = None):
        """
        Create the initial, random creatures of every species.

        Parameters:
            metadata: description of the population and its evolution
            registry: innovation trackers to use (a new registry when None)
        """
        self.metadata  : PopulationMetadata = metadata
        self.registry  : InnovationRegistry = registry if registry is not None else InnovationRegistry()
        self.generation: int                = 0

        self._logging_enabled: bool              = False
        self._data_logger    : DataLogger | None = None

        if metadata.cooperative_coevolution:
            self.species: list[Species] = [Species(metadata, self.registry, name) for name in metadata.names]
        else:
            self.species: list[Species] = [Species(metadata, self.registry, "*")]

        # Before the first evaluation the champions are arbitrary creatures
        self._share_champions()

    @property
    def creatures(self) -> list[Creature]:
        return [creature for species in self.species for creature in species]

    @property
    def optimal_creature(self) -> Creature:
        return max((species.optimal_creature for species in self.species),
                   key=lambda creature: creature.true_fitness)

    @property
    def best_true_fitness(self) -> float:
        return self.optimal_creature.true_fitness

    def champions(self) -> Mapping[str, Chromosome]:
        """
        Read-only snapshot of the best chromosome for each chromosome name.

        Under cooperative coevolution each chromosome comes from the optimal
        creature of the species evolving it; otherwise all chromosomes come
        from the optimal creature of the population.
        """
        if self.metadata.cooperative_coevolution:
            snapshot = {species.chromosome_filter:
                        species.optimal_creature.get_chromosome(species.chromosome_filter)
                        for species in self.species}
        else:
            optimal  = self.optimal_creature
            snapshot = {name: optimal.get_chromosome(name) for name in self.metadata.names}
        return MappingProxyType(snapshot)

    def _share_champions(self) -> None:
        if not self.metadata.cooperative_coevolution:
            return

        # Creatures can be scored only once every chromosome has a value,
        # so the first snapshot is taken without evaluating anybody
        if self.generation == 0:
            snapshot = MappingProxyType({species.chromosome_filter:
                                         species.groups[0].creatures[0].get_chromosome(species.chromosome_filter)
                                         for species in self.species})
        else:
            snapshot = self.champions()
        for species in self.species:
            species.set_champions(snapshot)

    def enable_logging(self, path: str | None = None) -> None:
        """
        Log the best fitness of every generation, at INFO level.

        Parameters:
            path: if given, also append the records to this CSV file
        """
        self._logging_enabled = True
        self._data_logger     = DataLogger(path) if path else None

    def disable_logging(self) -> None:
        self._logging_enabled = False
        self._data_logger     = None

    def step(self, num_jobs: int = 1) -> None:
        """
        Breed one generation of every species.

        Parameters:
            num_jobs: number of parallel jobs for fitness evaluation
                       1 = serial (no parallelization)
                      -1 = use all available CPU cores
                      >1 = use specified number of processes
        """
        for species in self.species:
            species.evolve(num_jobs)
        self.generation += 1
        self._share_champions()

        if self._logging_enabled:
            fitness = self.best_true_fitness
            logger.info("Generation: %d, Fitness: %s", self.generation, fitness)
            if self._data_logger is not None:
                self._data_logger.log(self.generation, fitness)

    def terminated(self) -> bool:
        # Every condition is checked, so that stateful conditions see every generation
        results = [condition.check(self) for condition in self.metadata.termination_conditions]
        return any(results)

    def evolve(self, num_jobs: int = 1) -> None:
        """
        Evolve the population until a termination condition is satisfied.
        At the end of the run the creatures leave their niches.

        Parameters:
            num_jobs: number of parallel jobs for fitness evaluation
        """
        while True:
            self.step(num_jobs)
            if self.terminated():
                break
        self.release_niches()

    def release_niches(self) -> None:
        clear_niches(self.creatures)

    def parallel_evolve(self, num_jobs: int = -1) -> None:
        self.evolve(num_jobs)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self.creatures)

    def __getitem__(self, index: int) -> Creature:
        return self.creatures[index]

    def __len__(self) -> int:
        return sum(len(species) for species in self.species)

    def __str__(self):
        return '\n'.join(str(creature) for creature in self)

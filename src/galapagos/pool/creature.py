"""
Creature Module

This module implements the Creature class, a candidate solution evolved by the
engine: a set of named chromosomes plus a lazily evaluated, cached fitness.

Classes:
    Creature: A candidate solution made of named chromosomes
"""

from itertools import count
from types     import MappingProxyType
from typing    import Mapping, TYPE_CHECKING

from galapagos.errors              import ConfigurationError, IncompatibilityError
from galapagos.genotype.chromosome import Chromosome, ChromosomeType
from galapagos.stochastic          import evaluate_probability

if TYPE_CHECKING:
    from galapagos.genotype     import InnovationRegistry
    from galapagos.pool.niche   import Niche
    from galapagos.run.metadata import PopulationMetadata

_NO_CHAMPIONS: Mapping[str, Chromosome] = MappingProxyType({})

class Creature:
    """
    A candidate solution to the optimization problem.

    A creature owns the chromosomes it is responsible for. Under cooperative
    coevolution, where each species evolves a single chromosome, the other
    chromosomes are read from a read-only snapshot of the champions of the
    other species; without coevolution a creature owns all of its chromosomes.

    The fitness function is called at most once per creature: the result is
    cached and returned on later accesses. A cached 0 is recomputed only when
    the metadata asks for it ('recompute_zero_fitness'). A creature that
    belongs to a niche shares its fitness with the other members: its
    effective fitness is its true fitness divided by the niche size.

    Public Attributes:
        ID:    Unique identifier of this creature
        niche: The niche this creature belongs to (None when niching is off)

    Public Properties:
        names:        Names of the chromosomes this creature owns
        chromosomes:  Read-only view of the chromosomes this creature owns
        evaluated:    Whether the cached fitness can be used as is
        true_fitness: The fitness computed by the fitness function
        fitness:      The effective fitness, shared among the niche members

    Public Methods:
        random(metadata, registry, names): Create a creature with random chromosomes
        get_chromosome(name, expected):    Look up a chromosome by name
        set_champions(champions):          Set the snapshot of the other species' champions
        distance(other):                   Genetic distance to another creature
        breed(mate):                       Produce a child with another creature
        clone():                           Copy of this creature, fitness included
    """

    _id_generator = count(0)

    def __init__(self,
                 metadata   : 'PopulationMetadata',
                 chromosomes: Mapping[str, Chromosome],
                 champions  : Mapping[str, Chromosome] | None = None):
        """
        Parameters:
            metadata:    description of the population the creature belongs to
            chromosomes: the chromosomes owned by the creature, by name
            champions:   read-only snapshot of the champion chromosomes of the other species
        """
        for name in chromosomes:
            if name not in metadata:
                raise KeyError(f"'{name}' is not a valid chromosome name")

        self.ID   : int            = next(Creature._id_generator)
        self.niche: 'Niche | None' = None

        self._metadata   : 'PopulationMetadata'     = metadata
        self._chromosomes: dict[str, Chromosome]    = dict(chromosomes)
        self._champions  : Mapping[str, Chromosome] = champions if champions is not None else _NO_CHAMPIONS
        self._fitness    : float | None             = None

    @classmethod
    def random(cls,
               metadata : 'PopulationMetadata',
               registry : 'InnovationRegistry',
               names    : list[str] | None = None,
               champions: Mapping[str, Chromosome] | None = None) -> 'Creature':
        """
        Create a creature whose chromosomes are drawn at random.

        Parameters:
            metadata:  description of the population
            registry:  innovation trackers of the run
            names:     names of the chromosomes the creature owns (all of them when None)
            champions: snapshot of the other species' champions
        """
        names = metadata.names if names is None else names
        chromosomes = {name: metadata[name].new_chromosome(registry) for name in names}
        return cls(metadata, chromosomes, champions)

    @property
    def names(self) -> list[str]:
        return list(self._chromosomes)

    @property
    def chromosomes(self) -> Mapping[str, Chromosome]:
        return MappingProxyType(self._chromosomes)

    def set_champions(self, champions: Mapping[str, Chromosome]) -> None:
        self._champions = champions

    def get_chromosome(self, name: str, expected: ChromosomeType | type | None = None) -> Chromosome:
        """
        Look up a chromosome by name.

        Chromosomes the creature does not own are read from the champion snapshot.

        Parameters:
            name:     the chromosome name
            expected: optional chromosome variant (or class) the caller expects

        Returns:
            the chromosome
        """
        if name in self._chromosomes:
            chromosome = self._chromosomes[name]
        elif name in self._champions:
            chromosome = self._champions[name]
        else:
            raise KeyError(f"'{name}' is not a valid chromosome name")

        if isinstance(expected, ChromosomeType):
            if chromosome.kind is not expected:
                raise IncompatibilityError(f"chromosome '{name}' is not of type {expected.value}")
        elif expected is not None and not isinstance(chromosome, expected):
            raise IncompatibilityError(f"chromosome '{name}' is not of type {expected.__name__}")
        return chromosome

    def __getitem__(self, name: str) -> Chromosome:
        return self.get_chromosome(name)

    @property
    def evaluated(self) -> bool:
        if self._fitness is None:
            return False
        return not (self._metadata.recompute_zero_fitness and self._fitness == 0)

    @property
    def true_fitness(self) -> float:
        if not self.evaluated:
            self._fitness = self._metadata.fitness_function(self)
        return self._fitness

    @true_fitness.setter
    def true_fitness(self, value: float):
        self._fitness = value

    @property
    def fitness(self) -> float:
        if self.niche is None or len(self.niche) == 0:
            return self.true_fitness
        return self.true_fitness / len(self.niche)

    def distance(self, other: 'Creature') -> float:
        """
        Sum of the distances between the chromosomes this creature owns
        and the chromosomes of the same names in the other creature.
        """
        return sum(chromosome.distance(other.get_chromosome(name))
                   for name, chromosome in self._chromosomes.items())

    def breed(self, mate: 'Creature') -> 'Creature':
        """
        Produce a child with another creature.

        For each chromosome this creature owns: with probability equal to the
        crossover rate, the child's chromosome is the result of a crossover
        between this creature's chromosome and the mate's; otherwise it is this
        creature's chromosome. Then, with probability equal to the mutation rate,
        the result is mutated. Operators are chosen at random by weight.

        Parameters:
            mate: the other parent

        Returns:
            the child
        """
        chromosomes = {}
        for name, chromosome in self._chromosomes.items():
            metadata = self._metadata[name]

            if evaluate_probability(metadata.crossover_rate):
                if name not in mate._chromosomes:
                    raise ConfigurationError(f"mate {mate.ID} has no chromosome named '{name}'")
                crossover   = metadata.select_crossover()
                x_is_fitter = self.true_fitness >= mate.true_fitness if crossover.uses_fitness else True
                chromosome  = crossover(chromosome, mate._chromosomes[name], x_is_fitter)

            if evaluate_probability(metadata.mutation_rate):
                chromosome = metadata.select_mutation()(chromosome)

            chromosomes[name] = chromosome

        return Creature(self._metadata, chromosomes, self._champions)

    def clone(self) -> 'Creature':
        """
        Copy of this creature with a new ID. Chromosomes are immutable and
        shared; the cached fitness is kept, the niche membership is not.
        """
        clone = Creature(self._metadata, self._chromosomes, self._champions)
        clone._fitness = self._fitness
        return clone

    def __getstate__(self):
        # Sent to worker processes for fitness evaluation: the niche is not
        # needed there, and mapping proxies cannot be pickled
        state = self.__dict__.copy()
        state['niche']      = None
        state['_champions'] = dict(self._champions)
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._champions = MappingProxyType(self._champions)

    def __repr__(self):
        return f"Creature(ID={self.ID}, chromosomes={self.names})"

    def __str__(self):
        fitness = "n/a" if self._fitness is None else f"{self._fitness:.4f}"
        lines   = [f"ID={self.ID}, fitness={fitness}"]
        lines  += [f"  {name}: {chromosome}" for name, chromosome in self._chromosomes.items()]
        return '\n'.join(lines)

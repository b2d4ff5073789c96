"""
Metadata Module

This module implements the validated, in-memory description of an evolutionary
run: what chromosomes make up a creature, how each of them is bred, and how the
population as a whole evolves. Metadata objects are built either directly in
code or from a configuration file (see 'galapagos.run.config').

All validation happens eagerly, at construction time, so that a bad setting
fails before the first generation is bred.

Classes:
    ChromosomeMetadata: Description of one named chromosome of a creature
    PopulationMetadata: Description of the population and its evolution
"""

from typing import Callable, Iterator, Sequence, TYPE_CHECKING

from galapagos.activations                     import activations
from galapagos.errors                          import ConfigurationError
from galapagos.genotype.binary_chromosome      import BinaryChromosome
from galapagos.genotype.chromosome             import Chromosome, ChromosomeType
from galapagos.genotype.neural_chromosome      import NeuralChromosome
from galapagos.genotype.permutation_chromosome import PermutationChromosome
from galapagos.operators                       import (Crossover,
                                                       Mutation,
                                                       default_crossovers,
                                                       default_mutations,
                                                       select_operator)
from galapagos.phenotype                       import EVALUATION_ORDERS
from galapagos.selection                       import FitnessProportionateSelection, SelectionAlgorithm
from galapagos.termination                     import GenerationThreshold, TerminationCondition

if TYPE_CHECKING:
    from galapagos.genotype import InnovationRegistry
    from galapagos.pool     import Creature

DEFAULT_CROSSOVER_RATE       = 1.0
DEFAULT_MUTATION_RATE        = 0.25
DEFAULT_SIZE                 = 1000
DEFAULT_GENERATION_THRESHOLD = 1000

def _check_rate(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be in [0, 1], got {value}")
    return float(value)

class ChromosomeMetadata:
    """
    Description of one named chromosome of a creature.

    Besides the variant-specific properties (gene count for binary and
    permutation chromosomes, input/output sizes, compatibility weights and
    network settings for neural ones), the metadata carries the breeding
    parameters of the chromosome: the crossover and mutation rates, and the
    weighted operators to choose from.

    Public Attributes:
        name:              Name of the chromosome, unique within a creature
        kind:              Chromosome variant
        gene_count:        Number of genes (binary and permutation chromosomes)
        crossover_rate:    Probability that a child's chromosome comes from crossover
        mutation_rate:     Probability that a child's chromosome is mutated
        crossovers:        Weighted crossover operators
        mutations:         Weighted mutation operators
        input_size:        Number of network inputs (neural chromosomes)
        output_size:       Number of network outputs (neural chromosomes)
        c1, c2, c3:        Compatibility distance weights (neural chromosomes)
        activation:        Activation function name (neural chromosomes)
        evaluation_order:  Node visiting order of the network (neural chromosomes)
        reuse_innovations: Whether identical structural mutations share IDs (neural chromosomes)

    Public Methods:
        new_chromosome(registry): Create a random chromosome of this kind
        select_crossover():       Pick a crossover operator at random, by weight
        select_mutation():        Pick a mutation operator at random, by weight
    """

    def __init__(self,
                 name             : str,
                 kind             : ChromosomeType | str,
                 gene_count       : int | None                = None,
                 crossover_rate   : float                     = DEFAULT_CROSSOVER_RATE,
                 mutation_rate    : float                     = DEFAULT_MUTATION_RATE,
                 crossovers       : Sequence[Crossover] | None = None,
                 mutations        : Sequence[Mutation]  | None = None,
                 input_size       : int                       = 1,
                 output_size      : int                       = 1,
                 c1               : float                     = 1.0,
                 c2               : float                     = 1.0,
                 c3               : float                     = 1.0,
                 activation       : str                       = "identity",
                 evaluation_order : str                       = "id",
                 reuse_innovations: bool                      = False):
        if not name:
            raise ConfigurationError("chromosome name cannot be empty")

        try:
            kind = ChromosomeType(kind)
        except ValueError:
            raise ConfigurationError(f"unknown chromosome type '{kind}'") from None

        self.name             : str            = name
        self.kind             : ChromosomeType = kind
        self.crossover_rate   : float          = _check_rate("crossover rate", crossover_rate)
        self.mutation_rate    : float          = _check_rate("mutation rate", mutation_rate)
        self.gene_count       : int | None     = gene_count
        self.input_size       : int            = input_size
        self.output_size      : int            = output_size
        self.c1               : float          = c1
        self.c2               : float          = c2
        self.c3               : float          = c3
        self.activation       : str            = activation
        self.evaluation_order : str            = evaluation_order
        self.reuse_innovations: bool           = reuse_innovations

        if kind is ChromosomeType.NEURAL:
            if input_size <= 0:
                raise ConfigurationError(f"chromosome '{name}': input size must be positive, got {input_size}")
            if output_size <= 0:
                raise ConfigurationError(f"chromosome '{name}': output size must be positive, got {output_size}")
            if activation not in activations:
                raise ConfigurationError(f"chromosome '{name}': unknown activation function '{activation}'")
            if evaluation_order not in EVALUATION_ORDERS:
                raise ConfigurationError(f"chromosome '{name}': unknown evaluation order '{evaluation_order}'")
        else:
            if gene_count is None:
                raise ConfigurationError(f"chromosome '{name}': missing required property 'gene_count'")
            if gene_count <= 0:
                raise ConfigurationError(f"chromosome '{name}': gene count must be positive, got {gene_count}")

        self.crossovers: list[Crossover] = self._check_operators(crossovers, default_crossovers, Crossover)
        self.mutations : list[Mutation]  = self._check_operators(mutations, default_mutations, Mutation)

    def _check_operators(self, operators, defaults, base) -> list:
        if operators is None:
            return defaults(self.kind)

        operators = list(operators)
        if not operators:
            raise ConfigurationError(f"chromosome '{self.name}': operator selection is empty")
        for operator in operators:
            if not isinstance(operator, base):
                raise ConfigurationError(f"chromosome '{self.name}': {operator!r} is not a {base.__name__.lower()}")
            if self.kind not in operator.chromosome_types:
                raise ConfigurationError(
                    f"chromosome '{self.name}': {type(operator).__name__} does not apply to {self.kind.value} chromosomes")
        return operators

    def new_chromosome(self, registry: 'InnovationRegistry') -> Chromosome:
        """
        Create a new random chromosome described by this metadata.

        Binary and permutation chromosomes are drawn uniformly at random. Neural
        chromosomes start as minimal genomes (inputs and outputs, no edges),
        whose structure grows through mutation; the genome family is named
        after the chromosome.

        Parameters:
            registry: innovation trackers of the run (only used by neural chromosomes)

        Returns:
            the new chromosome
        """
        if self.kind is ChromosomeType.BINARY:
            return BinaryChromosome.random(self.gene_count)
        if self.kind is ChromosomeType.PERMUTATION:
            return PermutationChromosome.random(self.gene_count)

        tracker = registry.create(self.name, self.input_size + self.output_size, self.reuse_innovations)
        return NeuralChromosome.minimal(self.input_size, self.output_size, tracker,
                                        c1=self.c1, c2=self.c2, c3=self.c3,
                                        activation=self.activation, order=self.evaluation_order)

    def select_crossover(self) -> Crossover:
        return select_operator(self.crossovers)

    def select_mutation(self) -> Mutation:
        return select_operator(self.mutations)

    def __repr__(self):
        return f"ChromosomeMetadata(name={self.name!r}, kind={self.kind.value})"

class PopulationMetadata:
    """
    Description of a population and of the way it evolves.

    Public Attributes:
        fitness_function:        Callable scoring a creature (higher is better)
        size:                    Number of creatures in each species
        survival_rate:           Fraction of each group carried unchanged into the next generation
        distance_threshold:      Niche radius; 0 disables niching
        selection_algorithm:     Parent selection strategy (each group works on its own copy)
        termination_conditions:  The run stops as soon as any of them is satisfied
        cooperative_coevolution: Whether each chromosome is evolved by its own species
        group_count:             Number of island groups in each species
        species_iterations:      Inner iterations each species runs per generation
        recompute_zero_fitness:  Whether a cached fitness of 0 is recomputed on access

    Public Properties:
        names: Chromosome names, in declaration order

    The chromosome metadata can be looked up by position or by name.
    """

    def __init__(self,
                 fitness_function       : Callable[['Creature'], float],
                 chromosomes            : Sequence[ChromosomeMetadata],
                 size                   : int                                      = DEFAULT_SIZE,
                 survival_rate          : float                                    = 0.0,
                 distance_threshold     : float                                    = 0.0,
                 selection_algorithm    : SelectionAlgorithm | None                = None,
                 termination_conditions : Sequence[TerminationCondition] | None    = None,
                 cooperative_coevolution: bool                                     = False,
                 group_count            : int                                      = 1,
                 species_iterations     : int                                      = 1,
                 recompute_zero_fitness : bool                                     = False):
        if not callable(fitness_function):
            raise ConfigurationError("a fitness function is required")
        if size <= 0:
            raise ConfigurationError(f"population size must be positive, got {size}")
        if distance_threshold < 0:
            raise ConfigurationError(f"distance threshold cannot be negative, got {distance_threshold}")
        if group_count <= 0:
            raise ConfigurationError(f"group count must be positive, got {group_count}")
        if group_count > size:
            raise ConfigurationError(f"cannot split {size} creatures into {group_count} groups")
        if species_iterations <= 0:
            raise ConfigurationError(f"species iterations must be positive, got {species_iterations}")

        self.fitness_function       : Callable[['Creature'], float] = fitness_function
        self.size                   : int                           = size
        self.survival_rate          : float                         = _check_rate("survival rate", survival_rate)
        self.distance_threshold     : float                         = float(distance_threshold)
        self.cooperative_coevolution: bool                          = cooperative_coevolution
        self.group_count            : int                           = group_count
        self.species_iterations     : int                           = species_iterations
        self.recompute_zero_fitness : bool                          = recompute_zero_fitness

        self.selection_algorithm: SelectionAlgorithm = \
            selection_algorithm if selection_algorithm is not None else FitnessProportionateSelection()

        # No condition means the default generation threshold
        termination_conditions = list(termination_conditions or [])
        self.termination_conditions: list[TerminationCondition] = \
            termination_conditions or [GenerationThreshold(DEFAULT_GENERATION_THRESHOLD)]

        self._chromosomes: dict[str, ChromosomeMetadata] = {}
        for chromosome in chromosomes:
            if chromosome.name in self._chromosomes:
                raise ConfigurationError(f"chromosome metadata named '{chromosome.name}' already exists")
            self._chromosomes[chromosome.name] = chromosome
        if not self._chromosomes:
            raise ConfigurationError("a creature needs at least one chromosome")

    @property
    def names(self) -> list[str]:
        return list(self._chromosomes)

    def __getitem__(self, key: int | str) -> ChromosomeMetadata:
        if isinstance(key, int):
            return list(self._chromosomes.values())[key]
        if key not in self._chromosomes:
            raise KeyError(f"'{key}' is not a valid chromosome name")
        return self._chromosomes[key]

    def __contains__(self, name: str) -> bool:
        return name in self._chromosomes

    def __iter__(self) -> Iterator[ChromosomeMetadata]:
        return iter(self._chromosomes.values())

    def __len__(self) -> int:
        return len(self._chromosomes)

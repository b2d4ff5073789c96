import configparser
import os
from typing import Callable, TYPE_CHECKING

from galapagos.errors              import ConfigurationError
from galapagos.genotype.chromosome import ChromosomeType
from galapagos.operators           import crossovers, mutations
from galapagos.run.metadata        import ChromosomeMetadata, PopulationMetadata
from galapagos.selection           import selection_algorithms
from galapagos.termination         import termination_conditions

if TYPE_CHECKING:
    from galapagos.pool import Creature

CHROMOSOME_PREFIX = "CHROMOSOME:"

# Sentinel for missing default values
_NO_DEFAULT = object()

class Config:

    @staticmethod
    def _parse_operators(raw_operators: str | None, catalogue: dict, section: str) -> list | None:
        """
        Parse a comma-separated operator list into operator instances.

        Parameters:
            raw_operators: e.g. "single_point, uniform:2" ('name' or 'name:weight' items), or None
            catalogue:     operator classes by name, for the chromosome type at hand
            section:       name of the section being parsed (for error messages)

        Returns:
            list of operators, or None to use the defaults of the chromosome type
        """
        if raw_operators is None:
            return None

        operators = []
        for item in raw_operators.split(','):
            item = item.strip()
            if not item:
                continue
            name, _, weight = item.partition(':')
            name = name.strip()
            if name not in catalogue:
                raise ConfigurationError(f"[{section}]: unknown operator '{name}'")
            try:
                weight = float(weight) if weight else 1.0
            except ValueError:
                raise ConfigurationError(f"[{section}]: bad weight in '{item}'") from None
            operators.append(catalogue[name](weight=weight))

        if not operators:
            raise ConfigurationError(f"[{section}]: operator selection is empty")
        return operators

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the engine defaults
                         (and no chromosomes) for manual attribute setting.
        """
        # [POPULATION] defaults
        self.population_size         = 1000
        self.survival_rate           = 0.0
        self.distance_threshold      = 0.0
        self.cooperative_coevolution = False
        self.group_count             = 1
        self.species_iterations      = 1
        self.recompute_zero_fitness  = False

        # [SELECTION] defaults
        self.selection_algorithm = "fitness_proportionate"
        self.selection_argument  = None

        # [TERMINATION] defaults
        self.termination = {"generation_threshold": 1000}

        # [CHROMOSOME:<name>] sections, in file order
        self.chromosomes: list[ChromosomeMetadata] = []

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise
            except ValueError as error:
                raise ConfigurationError(f"[{section}] {key}: {error}") from None

        # [POPULATION]

        # The number of creatures in each species.
        self.population_size = get_value('POPULATION', 'size', int, self.population_size)

        # The fraction of each group carried unchanged into the next generation.
        # 0 disables elitism.
        self.survival_rate = get_value('POPULATION', 'survival_rate', float, self.survival_rate)

        # Creatures closer than this distance share their fitness.
        # 0 disables niching.
        self.distance_threshold = get_value('POPULATION', 'distance_threshold', float, self.distance_threshold)

        # Whether each chromosome is evolved by its own species.
        self.cooperative_coevolution = \
            get_value('POPULATION', 'cooperative_coevolution', bool, self.cooperative_coevolution)

        # The number of island groups in each species, and the number
        # of inner iterations each species runs per generation.
        self.group_count        = get_value('POPULATION', 'group_count', int, self.group_count)
        self.species_iterations = get_value('POPULATION', 'species_iterations', int, self.species_iterations)

        # Whether a cached fitness of 0 means "not evaluated yet".
        self.recompute_zero_fitness = \
            get_value('POPULATION', 'recompute_zero_fitness', bool, self.recompute_zero_fitness)

        # [SELECTION]

        # Allowed values: see 'galapagos.selection.selection_algorithms'.
        # The optional argument is the pointer count (stochastic universal
        # sampling), the tournament size, or the truncation rate.
        self.selection_algorithm = get_value('SELECTION', 'algorithm', str, self.selection_algorithm)
        self.selection_argument  = get_value('SELECTION', 'argument', float, None)
        if self.selection_algorithm not in selection_algorithms:
            raise ConfigurationError(f"unknown selection algorithm '{self.selection_algorithm}'")

        # [TERMINATION]

        # Any of the conditions in 'galapagos.termination.termination_conditions',
        # each with its threshold. The run stops when any of them is satisfied.
        if parser.has_section('TERMINATION'):
            self.termination = {}
            for key in parser.options('TERMINATION'):
                if key not in termination_conditions:
                    raise ConfigurationError(f"unknown termination condition '{key}'")
                self.termination[key] = get_value('TERMINATION', key, float)

        # [CHROMOSOME:<name>]

        for section in parser.sections():
            if not section.startswith(CHROMOSOME_PREFIX):
                continue

            # The name may contain '%i', replaced by the repetition index
            name   = section[len(CHROMOSOME_PREFIX):].strip()
            repeat = get_value(section, 'repeat', int, 1)
            if repeat <= 0:
                raise ConfigurationError(f"[{section}]: repeat must be positive, got {repeat}")
            if repeat > 1 and '%i' not in name:
                raise ConfigurationError(f"[{section}]: a repeated chromosome name must contain '%i'")

            try:
                kind = ChromosomeType(get_value(section, 'type', str))
            except ValueError:
                raise ConfigurationError(f"[{section}]: unknown chromosome type") from None
            except configparser.NoOptionError:
                raise ConfigurationError(f"[{section}]: missing required property 'type'") from None

            for i in range(repeat):
                metadata = ChromosomeMetadata(
                    name              = name.replace('%i', str(i)),
                    kind              = kind,
                    gene_count        = get_value(section, 'gene_count', int, None),
                    crossover_rate    = get_value(section, 'crossover_rate', float, 1.0),
                    mutation_rate     = get_value(section, 'mutation_rate', float, 0.25),
                    crossovers        = self._parse_operators(get_value(section, 'crossovers', str, None),
                                                              crossovers[kind], section),
                    mutations         = self._parse_operators(get_value(section, 'mutations', str, None),
                                                              mutations[kind], section),
                    input_size        = get_value(section, 'input_size', int, 1),
                    output_size       = get_value(section, 'output_size', int, 1),
                    c1                = get_value(section, 'c1', float, 1.0),
                    c2                = get_value(section, 'c2', float, 1.0),
                    c3                = get_value(section, 'c3', float, 1.0),
                    activation        = get_value(section, 'activation', str, "identity"),
                    evaluation_order  = get_value(section, 'evaluation_order', str, "id"),
                    reuse_innovations = get_value(section, 'reuse_innovations', bool, False))
                self.chromosomes.append(metadata)

    def to_metadata(self, fitness_function: Callable[['Creature'], float]) -> PopulationMetadata:
        """
        Build the population metadata described by this configuration.

        Parameters:
            fitness_function: callable scoring a creature

        Returns:
            the validated population metadata
        """
        selection_class = selection_algorithms[self.selection_algorithm]
        if self.selection_argument is None:
            selection = selection_class()
        elif self.selection_algorithm == "truncation":
            selection = selection_class(self.selection_argument)
        elif self.selection_algorithm == "fitness_proportionate":
            raise ConfigurationError("fitness proportionate selection takes no argument")
        else:
            selection = selection_class(int(self.selection_argument))

        conditions = []
        for name, threshold in self.termination.items():
            condition_class = termination_conditions[name]
            if name in ("generation_threshold", "fitness_plateau"):
                threshold = int(threshold)
            conditions.append(condition_class(threshold))

        return PopulationMetadata(fitness_function,
                                  self.chromosomes,
                                  size                    = self.population_size,
                                  survival_rate           = self.survival_rate,
                                  distance_threshold      = self.distance_threshold,
                                  selection_algorithm     = selection,
                                  termination_conditions  = conditions,
                                  cooperative_coevolution = self.cooperative_coevolution,
                                  group_count             = self.group_count,
                                  species_iterations      = self.species_iterations,
                                  recompute_zero_fitness  = self.recompute_zero_fitness)

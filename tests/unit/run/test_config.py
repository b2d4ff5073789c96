"""
Unit tests for Config class.
"""

import os

import pytest

from galapagos.errors      import ConfigurationError
from galapagos.genotype    import ChromosomeType
from galapagos.operators   import (AlternatingPositionCrossover,
                                   BoundaryMutation,
                                   DisplacementMutation,
                                   FlipBitMutation,
                                   OrderCrossover,
                                   SinglePointCrossover,
                                   UniformCrossover)
from galapagos.run.config  import Config
from galapagos.selection   import TournamentSelection, TruncationSelection
from galapagos.termination import (FitnessPlateau,
                                   FitnessThreshold,
                                   GenerationThreshold,
                                   Timer)


def constant(creature):
    return 1.0


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


@pytest.fixture
def write_config(tmp_path):
    """Write an INI file into a temporary directory and return its path."""
    def write(text):
        path = tmp_path / "config.ini"
        path.write_text(text)
        return str(path)
    return write


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_holds_defaults(self):
        """Test that Config() without file holds the engine defaults."""
        config = Config()

        assert config.population_size == 1000
        assert config.survival_rate == 0.0
        assert config.selection_algorithm == "fitness_proportionate"
        assert config.termination == {"generation_threshold": 1000}
        assert config.chromosomes == []

    def test_init_with_nonexistent_file_raises_error(self):
        """Test that Config with nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_minimal_config(self, test_config_dir):
        """Test that omitted settings keep their defaults."""
        config = Config(os.path.join(test_config_dir, 'minimal.ini'))

        assert config.population_size == 100
        assert config.group_count == 1
        assert config.termination == {"generation_threshold": 1000}

        [bits] = config.chromosomes
        assert bits.name == "bits"
        assert bits.kind is ChromosomeType.BINARY
        assert bits.gene_count == 16
        assert bits.mutation_rate == 0.25
        assert [type(op) for op in bits.crossovers] == [SinglePointCrossover]


# ============================================================================
# Test Config Sections
# ============================================================================

class TestConfigSections:
    """Test parsing of every section of a complete file."""

    @pytest.fixture
    def config(self, test_config_dir):
        return Config(os.path.join(test_config_dir, 'full.ini'))

    def test_population_section(self, config):
        """Test [POPULATION] parsing."""
        assert config.population_size == 60
        assert config.survival_rate == 0.1
        assert config.distance_threshold == 2.5
        assert config.group_count == 3
        assert config.species_iterations == 2
        assert config.recompute_zero_fitness is True
        assert config.cooperative_coevolution is False

    def test_selection_section(self, config):
        """Test [SELECTION] parsing."""
        assert config.selection_algorithm == "tournament"
        assert config.selection_argument == 3.0

    def test_termination_section(self, config):
        """Test [TERMINATION] parsing."""
        assert config.termination == {"generation_threshold": 50,
                                      "fitness_threshold"   : 15.5,
                                      "fitness_plateau"     : 10,
                                      "timer"               : 30}

    def test_chromosome_sections_keep_file_order(self, config):
        """Test that chromosomes are listed in file order."""
        assert [chromosome.name for chromosome in config.chromosomes] == ["bits", "route", "brain"]

    def test_weighted_operators(self, config):
        """Test that 'name:weight' items become weighted operators."""
        bits = config.chromosomes[0]

        assert [(type(op), op.weight) for op in bits.crossovers] == [(SinglePointCrossover, 2.0),
                                                                     (UniformCrossover, 1.0)]
        assert [(type(op), op.weight) for op in bits.mutations] == [(FlipBitMutation, 1.0),
                                                                    (BoundaryMutation, 0.5)]
        assert bits.crossover_rate == 0.8
        assert bits.mutation_rate == 0.1

    def test_permutation_operators(self, config):
        """Test operator lists of a permutation chromosome."""
        route = config.chromosomes[1]

        assert [type(op) for op in route.crossovers] == [OrderCrossover, AlternatingPositionCrossover]
        assert [type(op) for op in route.mutations] == [DisplacementMutation]

    def test_neural_chromosome(self, config):
        """Test neural chromosome settings."""
        brain = config.chromosomes[2]

        assert brain.kind is ChromosomeType.NEURAL
        assert (brain.input_size, brain.output_size) == (3, 2)
        assert (brain.c1, brain.c2, brain.c3) == (2.0, 1.0, 0.5)
        assert brain.activation == "sigmoid"
        assert brain.evaluation_order == "topological"
        assert brain.reuse_innovations is True

    def test_to_metadata(self, config):
        """Test that the configuration turns into population metadata."""
        metadata = config.to_metadata(constant)

        assert metadata.size == 60
        assert metadata.names == ["bits", "route", "brain"]
        assert isinstance(metadata.selection_algorithm, TournamentSelection)
        assert metadata.selection_algorithm.size == 3
        assert [type(c) for c in metadata.termination_conditions] == \
               [GenerationThreshold, FitnessThreshold, FitnessPlateau, Timer]
        assert metadata.termination_conditions[0].threshold == 50
        assert isinstance(metadata.termination_conditions[0].threshold, int)


# ============================================================================
# Test Repeated Chromosomes
# ============================================================================

class TestConfigRepeat:
    """Test chromosome sections repeated with '%i' names."""

    def test_repeat_expands_names(self, test_config_dir):
        """Test that a repeated section yields one chromosome per index."""
        config = Config(os.path.join(test_config_dir, 'coevolution.ini'))

        assert [chromosome.name for chromosome in config.chromosomes] == ["part_0", "part_1", "part_2"]
        assert config.cooperative_coevolution is True

    def test_truncation_argument(self, test_config_dir):
        """Test that the truncation argument stays a rate."""
        metadata = Config(os.path.join(test_config_dir, 'coevolution.ini')).to_metadata(constant)

        assert isinstance(metadata.selection_algorithm, TruncationSelection)
        assert metadata.selection_algorithm.rate == 0.5

    def test_repeat_without_placeholder_raises_error(self, write_config):
        """Test that a repeated name needs a '%i' placeholder."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\nrepeat = 2\n")

        with pytest.raises(ConfigurationError, match="%i"):
            Config(path)


# ============================================================================
# Test Config Errors
# ============================================================================

class TestConfigErrors:
    """Test that bad configuration files are refused eagerly."""

    def test_unknown_operator(self, write_config):
        """Test that operator names must be known for the chromosome type."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\ncrossovers = order\n")

        with pytest.raises(ConfigurationError, match="unknown operator 'order'"):
            Config(path)

    def test_bad_operator_weight(self, write_config):
        """Test that operator weights must be numbers."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\nmutations = flip_bit:heavy\n")

        with pytest.raises(ConfigurationError, match="bad weight"):
            Config(path)

    def test_empty_operator_list(self, write_config):
        """Test that an empty operator list is refused."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\nmutations = ,\n")

        with pytest.raises(ConfigurationError, match="empty"):
            Config(path)

    def test_missing_type(self, write_config):
        """Test that the chromosome type is required."""
        path = write_config("[CHROMOSOME:bits]\ngene_count = 4\n")

        with pytest.raises(ConfigurationError, match="type"):
            Config(path)

    def test_unknown_type(self, write_config):
        """Test that the chromosome type must be known."""
        path = write_config("[CHROMOSOME:bits]\ntype = ternary\ngene_count = 4\n")

        with pytest.raises(ConfigurationError, match="unknown chromosome type"):
            Config(path)

    def test_missing_gene_count(self, write_config):
        """Test that binary chromosomes need a gene count."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\n")

        with pytest.raises(ConfigurationError, match="gene_count"):
            Config(path)

    def test_bad_number(self, write_config):
        """Test that malformed numbers are reported with their section."""
        path = write_config("[POPULATION]\nsize = many\n")

        with pytest.raises(ConfigurationError, match=r"\[POPULATION\] size"):
            Config(path)

    def test_unknown_selection_algorithm(self, write_config):
        """Test that the selection algorithm must be known."""
        path = write_config("[SELECTION]\nalgorithm = lottery\n")

        with pytest.raises(ConfigurationError, match="lottery"):
            Config(path)

    def test_unknown_termination_condition(self, write_config):
        """Test that termination conditions must be known."""
        path = write_config("[TERMINATION]\nforever = 1\n")

        with pytest.raises(ConfigurationError, match="forever"):
            Config(path)

    def test_argument_for_fitness_proportionate(self, write_config):
        """Test that fitness proportionate selection refuses an argument."""
        path = write_config("[SELECTION]\nargument = 3\n[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\n")

        with pytest.raises(ConfigurationError):
            Config(path).to_metadata(constant)

    def test_invalid_rate(self, write_config):
        """Test that metadata validation applies to configuration files."""
        path = write_config("[CHROMOSOME:bits]\ntype = binary\ngene_count = 4\nmutation_rate = 2\n")

        with pytest.raises(ConfigurationError):
            Config(path)

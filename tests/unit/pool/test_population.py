"""
Unit tests for Population class.
"""

import logging

import pytest

from galapagos.genotype    import InnovationRegistry
from galapagos.pool        import Population
from galapagos.run         import ChromosomeMetadata, PopulationMetadata
from galapagos.termination import GenerationThreshold, TerminationCondition


# ============================================================================
# Fixtures
# ============================================================================

def ones(creature):
    return float(creature["bits"].bits.sum()) + 1.0


def ones_and_order(creature):
    order = creature["order"].permutation.tolist()
    return ones(creature) + sum(1 for a, b in zip(order, order[1:]) if a < b)


class CountingCondition(TerminationCondition):
    """Condition that always returns the same answer and counts its checks."""

    name = "counting"

    def __init__(self, answer):
        self.answer = answer
        self.checks = 0

    def check(self, population):
        self.checks += 1
        return self.answer


def make_metadata(conditions=None, **kwargs):
    chromosomes = [ChromosomeMetadata("bits", "binary", gene_count=8)]
    return PopulationMetadata(ones, chromosomes, size=kwargs.pop("size", 10),
                              termination_conditions=conditions or [GenerationThreshold(5)], **kwargs)


@pytest.fixture
def coevolution_metadata():
    chromosomes = [ChromosomeMetadata("bits", "binary", gene_count=8),
                   ChromosomeMetadata("order", "permutation", gene_count=5)]
    return PopulationMetadata(ones_and_order, chromosomes, size=6,
                              cooperative_coevolution=True,
                              termination_conditions=[GenerationThreshold(3)])


# ============================================================================
# Test Construction
# ============================================================================

class TestPopulationInit:
    """Test Population construction."""

    def test_single_species(self, binary_metadata):
        """Test that a population without coevolution holds one species of whole creatures."""
        population = Population(binary_metadata)

        assert len(population.species) == 1
        assert population.species[0].chromosome_filter == "*"
        assert len(population) == binary_metadata.size
        assert population.generation == 0

    def test_one_species_per_chromosome(self, coevolution_metadata):
        """Test that coevolution creates a species for each chromosome."""
        population = Population(coevolution_metadata)

        assert [species.chromosome_filter for species in population.species] == ["bits", "order"]
        assert len(population) == 12

    def test_coevolving_creatures_read_other_chromosomes(self, coevolution_metadata):
        """Test that a creature owns its own chromosome and can read every other one."""
        population = Population(coevolution_metadata)

        for species in population.species:
            for creature in species:
                assert creature.names == [species.chromosome_filter]
                assert creature["bits"] is not None
                assert creature["order"] is not None
                assert creature.true_fitness > 0

    def test_neural_population_registers_family(self, neural_metadata):
        """Test that neural chromosomes create their genome family in the registry."""
        population = Population(neural_metadata)

        population.step()

        assert "brain" in population.registry
        assert all(creature["brain"].family == "brain" for creature in population)

    def test_registry_is_shared(self, binary_metadata):
        """Test that the population uses the registry it is given."""
        registry = InnovationRegistry()

        assert Population(binary_metadata, registry).registry is registry


# ============================================================================
# Test Evolution
# ============================================================================

class TestPopulationEvolve:
    """Test the generational loop."""

    def test_step_breeds_one_generation(self, binary_metadata):
        """Test that one step increments the generation counter and keeps the size."""
        population = Population(binary_metadata)

        population.step()

        assert population.generation == 1
        assert len(population) == binary_metadata.size
        assert population.best_true_fitness == max(creature.true_fitness for creature in population)

    def test_evolve_stops_at_generation_threshold(self, binary_metadata):
        """Test that evolution stops exactly at the generation threshold."""
        population = Population(binary_metadata)

        population.evolve()

        assert population.generation == 5

    def test_any_condition_stops_the_run(self):
        """Test that the run stops as soon as any condition holds, and every condition is checked."""
        never  = CountingCondition(False)
        always = CountingCondition(True)
        population = Population(make_metadata([never, always]))

        population.evolve()

        assert population.generation == 1
        assert never.checks == 1
        assert always.checks == 1

    def test_elitism_keeps_best_fitness(self):
        """Test that with elitism the best fitness never decreases."""
        population = Population(make_metadata(survival_rate=0.2, size=12))

        history = []
        for _ in range(6):
            population.step()
            history.append(population.best_true_fitness)

        assert history == sorted(history)

    def test_coevolution_evolves(self, coevolution_metadata):
        """Test that coevolving species breed until the threshold and keep their sizes."""
        population = Population(coevolution_metadata)

        population.evolve()

        assert population.generation == 3
        assert [len(species) for species in population.species] == [6, 6]

    def test_release_niches(self):
        """Test that after a run no creature remains in a niche."""
        population = Population(make_metadata(distance_threshold=2.0))

        population.evolve()

        assert all(creature.niche is None for creature in population)


# ============================================================================
# Test Champions
# ============================================================================

class TestChampions:
    """Test the champion snapshot."""

    def test_champions_come_from_optimal_creature(self, binary_metadata):
        """Test that without coevolution the champions are the optimal creature's chromosomes."""
        population = Population(binary_metadata)
        population.step()

        champions = population.champions()

        assert champions["bits"] is population.optimal_creature["bits"]

    def test_champions_are_read_only(self, binary_metadata):
        """Test that the snapshot cannot be modified."""
        champions = Population(binary_metadata).champions()

        with pytest.raises(TypeError):
            champions["bits"] = None

    def test_coevolution_champions_per_species(self, coevolution_metadata):
        """Test that each champion comes from the species evolving it."""
        population = Population(coevolution_metadata)
        population.step()

        champions = population.champions()

        assert set(champions) == {"bits", "order"}
        for species in population.species:
            name = species.chromosome_filter
            assert champions[name] is species.optimal_creature[name]


# ============================================================================
# Test Logging
# ============================================================================

class TestPopulationLogging:
    """Test per-generation logging."""

    def test_logs_best_fitness(self, binary_metadata, caplog):
        """Test that every generation is logged at INFO level."""
        population = Population(binary_metadata)
        population.enable_logging()

        with caplog.at_level(logging.INFO, logger="galapagos.pool.population"):
            population.step()

        assert "Generation: 1" in caplog.text

    def test_logs_to_csv(self, binary_metadata, tmp_path):
        """Test that the best fitness of every generation is appended to a CSV file."""
        path       = tmp_path / "fitness.csv"
        population = Population(binary_metadata)
        population.enable_logging(str(path))

        population.evolve()

        lines = path.read_text().strip().splitlines()
        assert lines[0] == "Generation,Fitness"
        assert len(lines) == 6
        assert lines[1].startswith("1,")

    def test_disable_logging(self, binary_metadata, caplog):
        """Test that nothing is logged after logging is disabled."""
        population = Population(binary_metadata)
        population.enable_logging()
        population.disable_logging()

        with caplog.at_level(logging.INFO, logger="galapagos.pool.population"):
            population.step()

        assert "Generation" not in caplog.text

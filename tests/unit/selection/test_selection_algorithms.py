"""
Unit tests for the selection algorithms.
"""

from collections   import Counter
from unittest.mock import Mock

import pytest

from galapagos.errors    import ConfigurationError
from galapagos.pool      import Creature
from galapagos.selection import (FitnessProportionateSelection,
                                 StochasticUniversalSampling,
                                 TournamentSelection,
                                 TruncationSelection,
                                 selection_algorithms)


# ============================================================================
# Fixtures
# ============================================================================

def make_creature(fitness, ID):
    creature = Mock(spec=Creature)
    creature.fitness = fitness
    creature.ID = ID
    return creature


@pytest.fixture
def creatures():
    """Four creatures with fitness 1, 2, 3, 4."""
    return [make_creature(float(fitness), i) for i, fitness in enumerate([1, 2, 3, 4])]


ALGORITHMS = [FitnessProportionateSelection(),
              StochasticUniversalSampling(),
              TournamentSelection(),
              TruncationSelection()]


# ============================================================================
# Test Common Behavior
# ============================================================================

class TestSelectionAlgorithm:
    """Test the behavior shared by every selection algorithm."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_invoke_before_initialize_raises_error(self, algorithm):
        """Test that an algorithm must be initialized before it is invoked."""
        with pytest.raises(RuntimeError, match="initialized"):
            algorithm.copy().invoke()

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_initialize_empty_raises_error(self, algorithm):
        """Test that selecting from nobody is an error."""
        with pytest.raises(ValueError):
            algorithm.copy().initialize([])

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_invoke_returns_a_creature(self, algorithm, creatures):
        """Test that selected creatures come from the initialized set."""
        algorithm = algorithm.copy()
        algorithm.initialize(creatures)

        for _ in range(20):
            assert algorithm.invoke() in creatures

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_copy_is_uninitialized(self, algorithm, creatures):
        """Test that a copy does not share the snapshot of the original."""
        original = algorithm.copy()
        original.initialize(creatures)

        clone = original.copy()

        assert type(clone) is type(original)
        with pytest.raises(RuntimeError):
            clone.invoke()

    def test_catalogue_names(self):
        """Test that algorithms are registered under their configuration names."""
        assert set(selection_algorithms) == {"fitness_proportionate", "stochastic_universal_sampling",
                                             "tournament", "truncation"}


# ============================================================================
# Test Individual Algorithms
# ============================================================================

class TestFitnessProportionateSelection:
    """Test roulette-wheel selection."""

    def test_selection_is_proportional(self, creatures):
        """Test that creatures are selected in proportion to their fitness."""
        algorithm = FitnessProportionateSelection()
        algorithm.initialize(creatures)

        counts = Counter(algorithm.invoke().ID for _ in range(20000))

        for creature in creatures:
            assert counts[creature.ID] / 20000 == pytest.approx(creature.fitness / 10, abs=0.02)

    def test_non_positive_fitness_raises_error(self):
        """Test that every fitness must be positive."""
        with pytest.raises(ValueError, match="positive"):
            FitnessProportionateSelection().initialize([make_creature(1.0, 0), make_creature(0.0, 1)])


class TestStochasticUniversalSampling:
    """Test stochastic universal sampling."""

    def test_pointers_follow_fitness(self, creatures):
        """Test that the pointers fall on creatures in proportion to their fitness."""
        algorithm = StochasticUniversalSampling(pointer_count=100)
        algorithm.initialize(creatures)

        counts = Counter(creature.ID for creature in algorithm._selected)

        assert len(algorithm._selected) == 100
        for creature in creatures:
            assert abs(counts[creature.ID] - creature.fitness * 10) <= 1

    def test_non_positive_pointer_count_raises_error(self):
        """Test that the pointer count must be positive."""
        with pytest.raises(ConfigurationError):
            StochasticUniversalSampling(pointer_count=0)


class TestTournamentSelection:
    """Test tournament selection."""

    def test_large_tournament_picks_the_best(self, creatures):
        """Test that a very large tournament almost always picks the fittest creature."""
        algorithm = TournamentSelection(size=100)
        algorithm.initialize(creatures)

        assert all(algorithm.invoke().ID == 3 for _ in range(20))

    def test_tournament_of_one_is_uniform(self, creatures):
        """Test that a tournament of size 1 picks uniformly."""
        algorithm = TournamentSelection(size=1)
        algorithm.initialize(creatures)

        counts = Counter(algorithm.invoke().ID for _ in range(8000))

        assert all(counts[i] / 8000 == pytest.approx(0.25, abs=0.03) for i in range(4))

    def test_non_positive_size_raises_error(self):
        """Test that the tournament size must be positive."""
        with pytest.raises(ConfigurationError):
            TournamentSelection(size=0)


class TestTruncationSelection:
    """Test truncation selection."""

    def test_only_top_fraction_breeds(self, creatures):
        """Test that only the fittest half is selected with rate 0.5."""
        algorithm = TruncationSelection(rate=0.5)
        algorithm.initialize(creatures)

        assert {algorithm.invoke().ID for _ in range(100)} == {2, 3}

    def test_at_least_one_creature_breeds(self, creatures):
        """Test that a tiny rate still keeps the fittest creature."""
        algorithm = TruncationSelection(rate=0.01)
        algorithm.initialize(creatures)

        assert algorithm.invoke().ID == 3

    @pytest.mark.parametrize("rate", [0.0, 1.5])
    def test_invalid_rate_raises_error(self, rate):
        """Test that the rate must be in (0, 1]."""
        with pytest.raises(ConfigurationError):
            TruncationSelection(rate=rate)

"""
Unit tests for the operator base classes and weighted operator selection.
"""

import pytest

from galapagos.errors    import ConfigurationError
from galapagos.genotype  import ChromosomeType
from galapagos.operators import (NodeMutation,
                                 OrderCrossover,
                                 ReverseMutation,
                                 SingleBitMutation,
                                 SinglePointCrossover,
                                 crossovers,
                                 default_crossovers,
                                 default_mutations,
                                 mutations,
                                 select_operator)


class TestSelectOperator:
    """Test weighted operator selection."""

    def test_empty_selection_raises_error(self):
        """Test that an empty operator list is rejected."""
        with pytest.raises(ConfigurationError):
            select_operator([])

    def test_single_operator_is_always_selected(self):
        """Test that a single operator is always returned."""
        operator = SingleBitMutation()

        assert all(select_operator([operator]) is operator for _ in range(20))

    def test_selection_follows_weights(self):
        """Test that operators are chosen in proportion to their weights."""
        heavy = SingleBitMutation(weight=3.0)
        light = ReverseMutation(weight=1.0)

        picks = [select_operator([heavy, light]) for _ in range(10000)]

        assert picks.count(heavy) / len(picks) == pytest.approx(0.75, abs=0.03)

    def test_non_positive_weight_raises_error(self):
        """Test that operator weights must be positive."""
        with pytest.raises(ConfigurationError):
            SingleBitMutation(weight=0.0)


class TestOperatorCatalogues:
    """Test the operator catalogues and defaults."""

    def test_catalogue_operators_support_their_type(self):
        """Test that every catalogued operator accepts the chromosome type it is listed under."""
        for catalogue in (crossovers, mutations):
            for kind, operators in catalogue.items():
                for operator_class in operators.values():
                    assert kind in operator_class.chromosome_types

    def test_catalogue_names(self):
        """Test that operators are listed under their configuration names."""
        assert crossovers[ChromosomeType.BINARY]["single_point"] is SinglePointCrossover
        assert mutations[ChromosomeType.NEURAL]["node"] is NodeMutation

    def test_defaults(self):
        """Test the default operators of each chromosome type."""
        assert isinstance(default_crossovers(ChromosomeType.BINARY)[0], SinglePointCrossover)
        assert isinstance(default_crossovers(ChromosomeType.PERMUTATION)[0], OrderCrossover)
        assert isinstance(default_mutations(ChromosomeType.BINARY)[0], SingleBitMutation)
        assert len(default_mutations(ChromosomeType.NEURAL)) == 2

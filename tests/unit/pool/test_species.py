"""
Unit tests for Species class and group topologies.
"""

from types         import MappingProxyType
from unittest.mock import patch

import pytest

from galapagos.genotype import InnovationRegistry, PermutationChromosome
from galapagos.pool     import CircularTopology, Group, Species
from galapagos.run      import ChromosomeMetadata, PopulationMetadata


# ============================================================================
# Fixtures
# ============================================================================

def ones(creature):
    return float(creature["bits"].bits.sum()) + 1.0


def make_metadata(size=10, group_count=1, **kwargs):
    chromosomes = [ChromosomeMetadata("bits", "binary", gene_count=8),
                   ChromosomeMetadata("order", "permutation", gene_count=4)]
    return PopulationMetadata(ones, chromosomes, size=size, group_count=group_count, **kwargs)


# ============================================================================
# Test Topology
# ============================================================================

class TestCircularTopology:
    """Test the ring of groups."""

    def test_neighbors_wrap_around(self):
        """Test that the first and last groups are neighbours."""
        topology = CircularTopology(["a", "b", "c", "d"])

        assert topology.neighbors(0) == ["d", "b"]
        assert topology.neighbors(3) == ["c", "a"]
        assert len(topology) == 4
        assert topology[1] == "b"

    def test_two_groups_are_each_others_neighbors(self):
        """Test a ring of two groups."""
        assert CircularTopology(["a", "b"]).neighbors(0) == ["b", "b"]


# ============================================================================
# Test Construction
# ============================================================================

class TestSpeciesInit:
    """Test Species construction."""

    def test_groups_have_nearly_equal_sizes(self):
        """Test that creatures are split into groups differing by at most one."""
        species = Species(make_metadata(size=10, group_count=3), InnovationRegistry())

        assert [len(group) for group in species.groups] == [4, 3, 3]
        assert len(species) == 10
        assert len(species.creatures) == 10

    def test_whole_creature_species(self):
        """Test that a '*' species evolves every chromosome."""
        species = Species(make_metadata(), InnovationRegistry())

        assert species.names == ["bits", "order"]
        assert all(creature.names == ["bits", "order"] for creature in species)

    def test_single_chromosome_species(self):
        """Test that a species can be responsible for one chromosome only."""
        species = Species(make_metadata(), InnovationRegistry(), "order")

        assert species.names == ["order"]
        assert all(creature.names == ["order"] for creature in species)

    def test_unknown_filter_raises_error(self):
        """Test that the filter must name a chromosome."""
        with pytest.raises(KeyError):
            Species(make_metadata(), InnovationRegistry(), "unknown")


# ============================================================================
# Test Evolution
# ============================================================================

class TestSpeciesEvolve:
    """Test Species.evolve and colonization."""

    def test_evolve_keeps_group_sizes(self):
        """Test that evolving several groups, with colonization, keeps their sizes."""
        species = Species(make_metadata(size=11, group_count=3), InnovationRegistry())

        species.evolve()

        assert [len(group) for group in species.groups] == [4, 4, 3]
        assert species.optimal_creature.true_fitness == max(creature.true_fitness for creature in species)

    def test_threaded_evolution(self):
        """Test that groups can evolve concurrently."""
        species = Species(make_metadata(size=12, group_count=3), InnovationRegistry())

        species.evolve(num_jobs=2)

        assert [len(group) for group in species.groups] == [4, 4, 4]
        assert all(creature.evaluated for creature in species)

    def test_inner_iterations(self):
        """Test that every group evolves once per inner iteration."""
        species = Species(make_metadata(species_iterations=3), InnovationRegistry())

        with patch.object(Group, "evolve", autospec=True) as evolve:
            species.evolve()

        assert evolve.call_count == 3

    def test_colonization_replaces_weakest_neighbor(self):
        """Test that the best group takes over its weakest neighbour."""
        species = Species(make_metadata(size=9, group_count=3), InnovationRegistry())
        for group, fitness in zip(species.groups, [10.0, 1.0, 5.0]):
            for creature in group:
                creature.true_fitness = fitness
        colonist_ids = {creature.ID for creature in species.groups[0]}
        extinct_ids  = {creature.ID for creature in species.groups[1]}
        bystanders   = list(species.groups[2].creatures)

        species.colonize()

        assert [len(group) for group in species.groups] == [3, 3, 3]
        assert species.groups[2].creatures == bystanders
        assert extinct_ids.isdisjoint(creature.ID for creature in species.groups[1])
        assert extinct_ids.isdisjoint(creature.ID for creature in species.groups[0])
        new_ids = {creature.ID for group in species.groups[:2] for creature in group}
        assert new_ids - colonist_ids

    def test_single_group_never_colonizes(self):
        """Test that a species with one group leaves it alone."""
        species = Species(make_metadata(size=5), InnovationRegistry())
        for creature in species:
            creature.true_fitness = 1.0
        creatures = list(species.groups[0].creatures)

        species.colonize()

        assert species.groups[0].creatures == creatures

    def test_set_champions(self):
        """Test that champions are handed to every creature."""
        species   = Species(make_metadata(), InnovationRegistry(), "bits")
        champions = MappingProxyType({"order": PermutationChromosome([3, 2, 1, 0])})

        species.set_champions(champions)

        assert all(creature["order"] is champions["order"] for creature in species)

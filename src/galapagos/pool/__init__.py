"""
Galapagos Pool Package

This package contains the classes that hold and evolve creatures: the creature
itself, the niches used for fitness sharing, and the population hierarchy that
drives one generation to the next.

Modules:
    creature:   A candidate solution made of named chromosomes
    niche:      Fitness sharing among genetically similar creatures
    group:      An island sub-population breeding only internally
    topology:   Neighbourhood relations between groups
    species:    Groups jointly evolving all or one of the chromosomes
    population: Top-level container driving the generational loop

Exported Classes:
    Creature:         Candidate solution with a cached fitness
    Niche:            Cluster of creatures sharing their fitness
    Group:            Island sub-population
    GroupTopology:    Abstract group arrangement
    CircularTopology: Groups arranged on a ring
    Species:          Sub-population of groups
    Population:       Top-level evolutionary coordinator

Exported Functions:
    reassign_niches: Cluster a new generation into niches
    clear_niches:    Take creatures out of their niches
"""

from galapagos.pool.creature   import Creature
from galapagos.pool.niche      import Niche, reassign_niches, clear_niches
from galapagos.pool.group      import Group
from galapagos.pool.topology   import GroupTopology, CircularTopology
from galapagos.pool.species    import Species
from galapagos.pool.population import Population

__all__ = [
    'CircularTopology',
    'Creature',
    'Group',
    'GroupTopology',
    'Niche',
    'Population',
    'Species',
    'clear_niches',
    'reassign_niches',
]

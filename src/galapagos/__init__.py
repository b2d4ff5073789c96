"""
Galapagos - a generic evolutionary-optimization engine.

This package evolves populations of candidate solutions ("creatures"), each made
of one or more named chromosomes, toward a user-supplied fitness function. It
provides the chromosome encodings (bit vectors, permutations and NEAT genomes),
their genetic operators, selection strategies, fitness sharing among niches, and
a generational loop over island groups and cooperating species.

Main components:
- genotype: Chromosome encodings, NEAT genes, innovation tracking
- operators: Crossover and mutation operators, weighted operator choice
- phenotype: Neural networks expressed by NEAT genomes
- activations: Activation functions for neural networks
- selection: Parent selection algorithms
- termination: Termination conditions
- pool: Creatures, niches, groups, species and populations
- run: Metadata, configuration, trial and experiment framework

Example:
    >>> from galapagos import Config, Trial
    >>> config = Config("config.ini")
    >>> class MyTrial(Trial):
    ...     def _evaluate_fitness(self, creature):
    ...         # Implement fitness evaluation
    ...         pass
    >>> trial = MyTrial(config)
    >>> trial.run()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from galapagos.errors import ConfigurationError, IncompatibilityError
from galapagos.run.metadata import ChromosomeMetadata, PopulationMetadata
from galapagos.run.config import Config
from galapagos.run.trial import Trial
from galapagos.run.experiment import Experiment
from galapagos.genotype import (ChromosomeType,
                                BinaryChromosome,
                                PermutationChromosome,
                                NeuralChromosome,
                                InnovationRegistry)
from galapagos.phenotype import NeuralNetwork
from galapagos.pool import Creature, Population

__all__ = [
    "BinaryChromosome",
    "ChromosomeMetadata",
    "ChromosomeType",
    "Config",
    "ConfigurationError",
    "Creature",
    "Experiment",
    "IncompatibilityError",
    "InnovationRegistry",
    "NeuralChromosome",
    "NeuralNetwork",
    "PermutationChromosome",
    "Population",
    "PopulationMetadata",
    "Trial",
]

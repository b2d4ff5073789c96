"""
Genotype Package

This package implements the chromosome encodings evolved by the engine and
their distance metrics.

Three chromosome variants are supported:
- Binary:      fixed-length bit vectors, Hamming distance
- Permutation: orderings of 0..N-1, Kendall-tau distance
- Neural:      NEAT genomes (node and edge genes), NEAT compatibility distance

Modules:
    chromosome:             ChromosomeType enumeration and Chromosome base class
    binary_chromosome:      BinaryChromosome class
    permutation_chromosome: PermutationChromosome class
    node_gene:              NodeType enumeration and NodeGene class
    edge_gene:              EdgeGene class
    neural_chromosome:      NeuralChromosome class
    innovation_tracker:     InnovationTracker and InnovationRegistry classes

Exported Classes:
    ChromosomeType:        Enumeration for chromosome variants
    Chromosome:            Abstract base class of all chromosomes
    BinaryChromosome:      Bit-vector chromosome
    PermutationChromosome: Permutation chromosome
    NodeType:              Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:              Gene encoding a single network node
    EdgeGene:              Gene encoding a weighted connection between nodes
    NeuralChromosome:      NEAT genome
    InnovationTracker:     Node ID and innovation number counters for a genome family
    InnovationRegistry:    Innovation trackers keyed by genome family
"""

from galapagos.genotype.chromosome             import ChromosomeType, Chromosome
from galapagos.genotype.binary_chromosome      import BinaryChromosome
from galapagos.genotype.permutation_chromosome import PermutationChromosome
from galapagos.genotype.node_gene              import NodeType, NodeGene
from galapagos.genotype.edge_gene              import EdgeGene
from galapagos.genotype.innovation_tracker     import InnovationTracker, InnovationRegistry
from galapagos.genotype.neural_chromosome      import NeuralChromosome

__all__ = ['BinaryChromosome',
           'Chromosome',
           'ChromosomeType',
           'EdgeGene',
           'InnovationRegistry',
           'InnovationTracker',
           'NeuralChromosome',
           'NodeGene',
           'NodeType',
           'PermutationChromosome']

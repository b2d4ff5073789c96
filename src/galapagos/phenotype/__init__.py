"""
Phenotype Package

This package implements the networks expressed by NEAT genomes.

Modules:
    neural_network: NeuralNetwork class

Exported Classes:
    NeuralNetwork: Evaluable network built from node and edge genes
"""

from galapagos.phenotype.neural_network import NeuralNetwork, EVALUATION_ORDERS

__all__ = ['EVALUATION_ORDERS',
           'NeuralNetwork']

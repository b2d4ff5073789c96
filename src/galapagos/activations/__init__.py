"""
Activations Package

This package provides activation functions for networks built from NEAT genomes.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: identity_activation, binary_step_activation,
                                     sigmoid_activation, tanh_activation, arctan_activation,
                                     sinusoid_activation, softsign_activation, relu_activation,
                                     leaky_relu_activation, softplus_activation,
                                     bent_identity_activation, sinc_activation, gaussian_activation
"""

from galapagos.activations.basic_activations import (
    activations,
    activation_codes,
    identity_activation,
    binary_step_activation,
    sigmoid_activation,
    tanh_activation,
    arctan_activation,
    sinusoid_activation,
    softsign_activation,
    relu_activation,
    leaky_relu_activation,
    softplus_activation,
    bent_identity_activation,
    sinc_activation,
    gaussian_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'identity_activation',
    'binary_step_activation',
    'sigmoid_activation',
    'tanh_activation',
    'arctan_activation',
    'sinusoid_activation',
    'softsign_activation',
    'relu_activation',
    'leaky_relu_activation',
    'softplus_activation',
    'bent_identity_activation',
    'sinc_activation',
    'gaussian_activation'
]

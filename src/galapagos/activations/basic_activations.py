import numpy as np

def identity_activation(z):
    return z

def binary_step_activation(z):
    return np.where(z < 0.0, 0.0, 1.0)

def sigmoid_activation(z):
    # Clip to keep np.exp from overflowing
    z = np.clip(z, -60.0, 60.0)
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

def arctan_activation(z):
    return np.arctan(z)

def sinusoid_activation(z):
    return np.sin(z)

def softsign_activation(z):
    return z / (1.0 + np.abs(z))

def relu_activation(z):
    return np.maximum(0.0, z)

def leaky_relu_activation(z):
    return np.where(z < 0.0, 0.01 * z, z)

def softplus_activation(z):
    return np.logaddexp(0.0, z)

def bent_identity_activation(z):
    return (np.sqrt(z * z + 1.0) - 1.0) / 2.0 + z

def sinc_activation(z):
    # np.sinc is the normalized sinc, sin(pi x)/(pi x)
    return np.sinc(np.asarray(z) / np.pi)

def gaussian_activation(z):
    return np.exp(-np.square(z))

activations = {
    "identity"     : identity_activation,
    "binary_step"  : binary_step_activation,
    "sigmoid"      : sigmoid_activation,
    "tanh"         : tanh_activation,
    "arctan"       : arctan_activation,
    "sinusoid"     : sinusoid_activation,
    "softsign"     : softsign_activation,
    "relu"         : relu_activation,
    "leaky_relu"   : leaky_relu_activation,
    "softplus"     : softplus_activation,
    "bent_identity": bent_identity_activation,
    "sinc"         : sinc_activation,
    "gaussian"     : gaussian_activation,
    }

# Short codes, used when printing genomes
activation_codes = {
    "identity"     : "IDN",
    "binary_step"  : "BST",
    "sigmoid"      : "SIG",
    "tanh"         : "TNH",
    "arctan"       : "ATN",
    "sinusoid"     : "SIN",
    "softsign"     : "SSG",
    "relu"         : "RLU",
    "leaky_relu"   : "LRU",
    "softplus"     : "SPL",
    "bent_identity": "BID",
    "sinc"         : "SNC",
    "gaussian"     : "GSS",
    }

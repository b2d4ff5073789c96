"""
Galapagos Errors Module

Exception types raised by the evolutionary engine.

Classes:
    ConfigurationError:  Invalid or missing configuration (rates, operator lists, sizes)
    IncompatibilityError: Operation attempted on chromosomes that cannot be combined
"""

class ConfigurationError(ValueError):
    """
    Raised when configuration or metadata is invalid: a rate outside [0, 1],
    an empty operator selection, a missing required property, a zero-sized
    genome or an unknown name. Raised eagerly, at construction time.
    """

class IncompatibilityError(TypeError):
    """
    Raised when chromosomes of different variants, lengths or genome
    families are compared, combined, or handed to an operator built
    for another chromosome type.
    """

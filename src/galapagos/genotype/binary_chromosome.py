"""
Binary Chromosome Module

This module implements the fixed-length bit-vector chromosome.

Classes:
    BinaryChromosome: Chromosome encoding an ordered sequence of bits
"""

import numpy as np
from typing import Iterable

from galapagos.errors               import ConfigurationError
from galapagos.genotype.chromosome import Chromosome, ChromosomeType

class BinaryChromosome(Chromosome):
    """
    A fixed-length ordered sequence of bits.

    The bits are stored in a read-only numpy boolean array; operators that
    need to modify them work on a copy and build a new chromosome.
    Position 0 is the first bit of the sequence.

    Public Attributes:
        bits:      Read-only numpy array of booleans

    Public Methods:
        random(bit_count):  Create a chromosome with uniformly random bits
        from_string(text):  Create a chromosome from a string of '0' and '1'
        distance(other):    Hamming distance to another binary chromosome

    Public Properties:
        bit_count: Number of bits in the chromosome
    """

    kind = ChromosomeType.BINARY

    def __init__(self, bits: Iterable[bool] | np.ndarray):
        """
        Parameters:
            bits: the bit sequence (any iterable of truthy/falsy values)
        """
        array = np.array(list(bits) if not isinstance(bits, np.ndarray) else bits, dtype=bool)
        if array.ndim != 1 or array.size == 0:
            raise ConfigurationError("a binary chromosome needs a non-empty, one-dimensional bit sequence")

        array.flags.writeable = False
        self.bits: np.ndarray = array

    @classmethod
    def random(cls, bit_count: int) -> 'BinaryChromosome':
        if bit_count <= 0:
            raise ConfigurationError(f"bit count must be positive, got {bit_count}")
        return cls(np.random.randint(0, 2, size=bit_count).astype(bool))

    @classmethod
    def from_string(cls, text: str) -> 'BinaryChromosome':
        if any(c not in "01" for c in text):
            raise ValueError(f"'{text}' is not a bit string")
        return cls([c == "1" for c in text])

    @property
    def bit_count(self) -> int:
        return int(self.bits.size)

    def __len__(self) -> int:
        return self.bit_count

    def distance(self, other: 'BinaryChromosome') -> int:
        """
        Hamming distance: the number of positions at which the bits differ.
        """
        self._check_compatible(other)
        return int(np.count_nonzero(self.bits != other.bits))

    def __eq__(self, other):
        if not isinstance(other, BinaryChromosome):
            return NotImplemented
        return np.array_equal(self.bits, other.bits)

    def __hash__(self):
        return hash(self.bits.tobytes())

    def __repr__(self):
        return f"BinaryChromosome('{self}')"

    def __str__(self):
        return "".join("1" if bit else "0" for bit in self.bits)

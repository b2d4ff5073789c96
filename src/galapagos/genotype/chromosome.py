"""
Chromosome Module

This module defines the closed set of chromosome variants supported by the
engine and the abstract base class they share.

Classes:
    ChromosomeType: Enumeration tagging the chromosome variants (BINARY, PERMUTATION, NEURAL)
    Chromosome:     Abstract base class for all chromosome encodings
"""

from abc  import ABC, abstractmethod
from enum import Enum

from galapagos.errors import IncompatibilityError

class ChromosomeType(Enum):
    BINARY      = "binary"
    PERMUTATION = "permutation"
    NEURAL      = "neural"

class Chromosome(ABC):
    """
    A single named genetic encoding carried by a creature.

    Chromosomes are treated as immutable once constructed: genetic operators
    always build new instances. Two chromosomes can only be compared, measured
    against each other or recombined when they are of the same variant and,
    for fixed-length encodings, of the same length.

    Public Attributes:
        kind: The ChromosomeType tag of this chromosome

    Public Methods:
        distance(other): Non-negative genomic distance to another chromosome
    """

    kind: ChromosomeType

    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def distance(self, other: 'Chromosome') -> float:
        """
        Calculate the genomic distance between this chromosome and another.

        Parameters:
            other: a chromosome of the same variant

        Returns:
            non-negative distance; 0 for identical chromosomes
        """
        pass

    def _check_compatible(self, other: 'Chromosome', same_length: bool = True) -> None:
        """
        Raise IncompatibilityError unless 'other' can be combined with this chromosome.
        """
        if not isinstance(other, Chromosome) or other.kind is not self.kind:
            other_kind = other.kind.value if isinstance(other, Chromosome) else type(other).__name__
            raise IncompatibilityError(f"cannot combine a {self.kind.value} chromosome with a {other_kind} one")
        if same_length and len(self) != len(other):
            raise IncompatibilityError(f"chromosome lengths differ ({len(self)} vs {len(other)})")

"""
Permutation Chromosome Module

This module implements the permutation chromosome and the Kendall-tau
distance between two permutations.

Classes:
    PermutationChromosome: Chromosome encoding an ordering of the integers 0..N-1
"""

import numpy as np
from typing import Iterable

from galapagos.errors               import ConfigurationError
from galapagos.genotype.chromosome import Chromosome, ChromosomeType

class PermutationChromosome(Chromosome):
    """
    An ordered sequence of N distinct integers, each in [0, N).

    Every value 0..N-1 appears exactly once; construction fails otherwise.
    The distance between two permutations is the Kendall-tau distance, the
    number of pairs of values that the two orderings place in opposite order.

    Public Attributes:
        permutation: Read-only numpy integer array

    Public Methods:
        random(n):       Create a uniformly random permutation of size n
        distance(other): Kendall-tau distance to another permutation

    Public Properties:
        n: Size of the permutation
    """

    kind = ChromosomeType.PERMUTATION

    def __init__(self, permutation: Iterable[int] | np.ndarray):
        """
        Parameters:
            permutation: sequence containing every integer in [0, N) exactly once
        """
        array = np.array(list(permutation) if not isinstance(permutation, np.ndarray) else permutation,
                         dtype=np.int64)
        if array.ndim != 1 or array.size == 0:
            raise ConfigurationError("a permutation chromosome needs a non-empty, one-dimensional sequence")

        # Every value in [0, N) exactly once
        if not np.array_equal(np.sort(array), np.arange(array.size)):
            raise ConfigurationError(f"{array.tolist()} is not a permutation of 0..{array.size - 1}")

        array.flags.writeable = False
        self.permutation: np.ndarray = array

    @classmethod
    def random(cls, n: int) -> 'PermutationChromosome':
        if n <= 0:
            raise ConfigurationError(f"permutation size must be positive, got {n}")
        return cls(np.random.permutation(n))

    @property
    def n(self) -> int:
        return int(self.permutation.size)

    def __len__(self) -> int:
        return self.n

    def distance(self, other: 'PermutationChromosome') -> int:
        """
        Calculate the Kendall-tau distance to another permutation in O(N log N).

        The first permutation is mapped onto the identity through its inverse;
        applying the same mapping to the second permutation turns every pair
        of values the two orderings disagree on into an inversion, which are
        then counted with a merge sort.

        Parameters:
            other: a permutation of the same size

        Returns:
            number of discordant pairs
        """
        self._check_compatible(other)

        # position of each value in 'self'
        index = np.empty(self.n, dtype=np.int64)
        index[self.permutation] = np.arange(self.n)

        remapped = [int(index[value]) for value in other.permutation]
        _, inversions = _count_inversions(remapped)
        return inversions

    def __eq__(self, other):
        if not isinstance(other, PermutationChromosome):
            return NotImplemented
        return np.array_equal(self.permutation, other.permutation)

    def __hash__(self):
        return hash(self.permutation.tobytes())

    def __repr__(self):
        return f"PermutationChromosome({self.permutation.tolist()})"

    def __str__(self):
        return " ".join(str(value) for value in self.permutation)

def _count_inversions(sequence: list[int]) -> tuple[list[int], int]:
    """
    Sort 'sequence' with a merge sort, counting inversions along the way.

    Returns:
        2-tuple: (sorted sequence, number of inversions)
    """
    if len(sequence) <= 1:
        return sequence, 0

    middle = len(sequence) // 2
    left,  inversions_left  = _count_inversions(sequence[:middle])
    right, inversions_right = _count_inversions(sequence[middle:])

    merged     = []
    inversions = inversions_left + inversions_right
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            # right[j] jumps ahead of every element still waiting in 'left'
            merged.append(right[j])
            inversions += len(left) - i
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions

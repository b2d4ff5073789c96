"""
Unit tests for BinaryChromosome class.
"""

import numpy as np
import pytest

from galapagos.errors   import ConfigurationError, IncompatibilityError
from galapagos.genotype import BinaryChromosome, ChromosomeType, PermutationChromosome


# ============================================================================
# Test Construction
# ============================================================================

class TestBinaryChromosomeInit:
    """Test BinaryChromosome construction."""

    def test_init_from_list(self):
        """Test that bits are stored as a boolean array."""
        chromosome = BinaryChromosome([1, 0, 1, 1])

        assert chromosome.bits.dtype == bool
        assert chromosome.bits.tolist() == [True, False, True, True]
        assert chromosome.bit_count == 4
        assert len(chromosome) == 4
        assert chromosome.kind is ChromosomeType.BINARY

    def test_init_empty_raises_error(self):
        """Test that an empty bit sequence is rejected."""
        with pytest.raises(ConfigurationError):
            BinaryChromosome([])

    def test_bits_are_read_only(self):
        """Test that the bits cannot be modified in place."""
        chromosome = BinaryChromosome([0, 0, 0])

        with pytest.raises(ValueError):
            chromosome.bits[0] = True

    def test_init_does_not_share_caller_array(self):
        """Test that later changes to the caller's array do not leak into the chromosome."""
        bits = np.zeros(4, dtype=bool)
        chromosome = BinaryChromosome(bits)
        bits[0] = True

        assert str(chromosome) == "0000"

    def test_from_string(self):
        """Test parsing of a bit string."""
        chromosome = BinaryChromosome.from_string("11110000")

        assert str(chromosome) == "11110000"
        assert chromosome.bit_count == 8

    def test_from_string_rejects_other_characters(self):
        """Test that characters other than '0' and '1' are rejected."""
        with pytest.raises(ValueError):
            BinaryChromosome.from_string("10a1")

    def test_random_has_requested_size(self):
        """Test that random chromosomes have the requested number of bits."""
        chromosome = BinaryChromosome.random(16)

        assert chromosome.bit_count == 16

    def test_random_zero_size_raises_error(self):
        """Test that a zero-sized random chromosome is rejected."""
        with pytest.raises(ConfigurationError):
            BinaryChromosome.random(0)


# ============================================================================
# Test Distance
# ============================================================================

class TestBinaryChromosomeDistance:
    """Test the Hamming distance."""

    def test_distance_to_itself_is_zero(self):
        """Test that a chromosome has distance 0 to itself."""
        chromosome = BinaryChromosome.from_string("1011")

        assert chromosome.distance(chromosome) == 0

    def test_distance_counts_differing_bits(self):
        """Test the Hamming distance between two chromosomes."""
        x = BinaryChromosome.from_string("1100")
        y = BinaryChromosome.from_string("1010")

        assert x.distance(y) == 2
        assert y.distance(x) == 2

    def test_distance_to_complement_is_bit_count(self):
        """Test that complementary chromosomes differ in every bit."""
        x = BinaryChromosome.from_string("11110000")
        y = BinaryChromosome.from_string("00001111")

        assert x.distance(y) == 8

    def test_distance_different_lengths_raises_error(self):
        """Test that chromosomes of different lengths cannot be compared."""
        x = BinaryChromosome.from_string("101")
        y = BinaryChromosome.from_string("1010")

        with pytest.raises(IncompatibilityError):
            x.distance(y)

    def test_distance_to_permutation_raises_error(self):
        """Test that a binary chromosome cannot be compared with a permutation."""
        x = BinaryChromosome.from_string("101")
        y = PermutationChromosome([2, 0, 1])

        with pytest.raises(IncompatibilityError):
            x.distance(y)


# ============================================================================
# Test Equality
# ============================================================================

class TestBinaryChromosomeEquality:
    """Test equality and hashing."""

    def test_equal_bits_are_equal(self):
        """Test that chromosomes with the same bits are equal and hash the same."""
        x = BinaryChromosome.from_string("0110")
        y = BinaryChromosome([0, 1, 1, 0])

        assert x == y
        assert hash(x) == hash(y)

    def test_different_bits_are_not_equal(self):
        """Test that chromosomes with different bits are not equal."""
        assert BinaryChromosome.from_string("0110") != BinaryChromosome.from_string("0111")

    def test_repr(self):
        """Test the representation of a chromosome."""
        assert repr(BinaryChromosome.from_string("01")) == "BinaryChromosome('01')"

"""Pytest configuration and shared fixtures."""

import random
import sys
from itertools import count
from pathlib   import Path

import numpy as np
import pytest

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from galapagos.genotype import InnovationRegistry          # noqa: E402
from galapagos.pool     import Creature                    # noqa: E402
from galapagos.run      import ChromosomeMetadata, PopulationMetadata  # noqa: E402
from galapagos.termination import GenerationThreshold      # noqa: E402


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Seed both random generators and restart creature IDs before each test."""
    random.seed(42)
    np.random.seed(42)
    Creature._id_generator = count(0)

    yield

    random.seed(None)
    np.random.seed(None)


def onemax(creature):
    """Number of ones in the 'bits' chromosome, plus one so that it stays positive."""
    return float(creature["bits"].bits.sum()) + 1.0


@pytest.fixture
def registry():
    return InnovationRegistry()


@pytest.fixture
def binary_metadata():
    """Population of 10 creatures with a single 8-bit chromosome."""
    chromosome = ChromosomeMetadata("bits", "binary", gene_count=8)
    return PopulationMetadata(onemax, [chromosome], size=10,
                              termination_conditions=[GenerationThreshold(5)])


@pytest.fixture
def neural_metadata():
    """Population of 10 creatures with a single 2-input, 1-output genome."""
    chromosome = ChromosomeMetadata("brain", "neural", input_size=2, output_size=1)
    return PopulationMetadata(lambda creature: 1.0, [chromosome], size=10)

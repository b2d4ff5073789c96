"""
Genetic Operator Module

This module defines the base classes shared by all crossover and mutation
operators, and the weighted random choice used to pick one operator out of a
configured selection.

Classes:
    GeneticOperator: Base class carrying the operator's relative weight
    Crossover:       Base class for operators combining two parent chromosomes
    Mutation:        Base class for operators perturbing a single chromosome

Functions:
    select_operator: Weighted random choice of an operator
"""

import random
from abc    import ABC, abstractmethod
from typing import Sequence, TypeVar

from galapagos.errors              import ConfigurationError, IncompatibilityError
from galapagos.genotype.chromosome import Chromosome, ChromosomeType

class GeneticOperator(ABC):
    """
    Base class of all genetic operators.

    Each operator declares the chromosome variants it accepts and carries a
    relative weight, used when several operators are configured for the same
    chromosome. Operators never modify their inputs: they return new
    chromosome instances.

    Public Attributes:
        weight:           Relative weight of the operator in weighted selection
        chromosome_types: Chromosome variants the operator accepts
        name:             Name under which the operator is known in configuration files
    """

    chromosome_types: tuple[ChromosomeType, ...] = ()
    name            : str                        = ""

    def __init__(self, weight: float = 1.0):
        """
        Parameters:
            weight: relative weight of the operator, must be positive
        """
        if weight <= 0:
            raise ConfigurationError(f"operator weight must be positive, got {weight}")
        self.weight: float = float(weight)

    def _validate(self, chromosome: Chromosome) -> None:
        if not isinstance(chromosome, Chromosome) or chromosome.kind not in self.chromosome_types:
            kind = chromosome.kind.value if isinstance(chromosome, Chromosome) else type(chromosome).__name__
            raise IncompatibilityError(f"{type(self).__name__} cannot operate on a {kind} chromosome")

    def __repr__(self):
        return f"{type(self).__name__}(weight={self.weight})"

class Crossover(GeneticOperator):
    """
    Base class for operators producing one child chromosome from two parents.

    Both parents are validated before the operator runs: they must be of a
    variant the operator accepts and compatible with each other.

    Public Attributes:
        uses_fitness: Whether the operator needs to know which parent is fitter
    """

    uses_fitness: bool = False

    def __call__(self, x: Chromosome, y: Chromosome, x_is_fitter: bool = True) -> Chromosome:
        """
        Combine two parent chromosomes into a child.

        Parameters:
            x:           the first parent
            y:           the second parent
            x_is_fitter: whether 'x' is at least as fit as 'y' (only used by
                         operators whose 'uses_fitness' is True)

        Returns:
            the child chromosome
        """
        self._validate(x)
        self._validate(y)
        x._check_compatible(y)
        return self._invoke(x, y, x_is_fitter)

    @abstractmethod
    def _invoke(self, x: Chromosome, y: Chromosome, x_is_fitter: bool) -> Chromosome:
        pass

class Mutation(GeneticOperator):
    """
    Base class for operators producing a perturbed copy of one chromosome.
    """

    def __call__(self, chromosome: Chromosome) -> Chromosome:
        """
        Parameters:
            chromosome: the chromosome to mutate (left untouched)

        Returns:
            the mutated chromosome
        """
        self._validate(chromosome)
        return self._invoke(chromosome)

    @abstractmethod
    def _invoke(self, chromosome: Chromosome) -> Chromosome:
        pass

TOperator = TypeVar('TOperator', bound=GeneticOperator)

def select_operator(operators: Sequence[TOperator]) -> TOperator:
    """
    Pick one operator at random, with probability proportional to its weight.

    Draws u ~ U(0, total weight) and subtracts the operator weights, in order,
    until the remainder drops to zero or below.

    Parameters:
        operators: the configured operators

    Returns:
        the selected operator
    """
    if not operators:
        raise ConfigurationError("operator selection is empty")

    value = random.random() * sum(operator.weight for operator in operators)
    for operator in operators:
        value -= operator.weight
        if value <= 0:
            return operator

    # Floating point leftovers
    return operators[-1]

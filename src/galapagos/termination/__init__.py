"""
Termination Package

This package implements the conditions that end the generational loop.
The loop stops as soon as any registered condition is satisfied.

Modules:
    termination_condition: TerminationCondition base class
    generation_threshold:  GenerationThreshold class
    fitness_threshold:     FitnessThreshold class
    fitness_plateau:       FitnessPlateau class
    timer:                 Timer class

Exported:
    termination_conditions: Termination condition classes by configuration name
"""

from galapagos.termination.termination_condition import TerminationCondition
from galapagos.termination.generation_threshold  import GenerationThreshold
from galapagos.termination.fitness_threshold     import FitnessThreshold
from galapagos.termination.fitness_plateau       import FitnessPlateau
from galapagos.termination.timer                 import Timer

termination_conditions = {cls.name: cls for cls in (GenerationThreshold,
                                                    FitnessThreshold,
                                                    FitnessPlateau,
                                                    Timer)}

__all__ = ['FitnessPlateau',
           'FitnessThreshold',
           'GenerationThreshold',
           'TerminationCondition',
           'Timer',
           'termination_conditions']

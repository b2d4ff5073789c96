"""
Galapagos Run Package

This package describes evolutionary runs and executes them.

A trial represents a complete evolutionary run, managing the population through
generations until one of the termination conditions is satisfied.

An experiment represents a collection of multiple trials for gathering statistical data.

Modules:
    metadata:    In-memory, validated description of a run
    config:      Configuration files, turned into metadata
    data_logger: Per-generation fitness records in a CSV file
    trial:       Abstract base class for trials
    experiment:  Abstract base class for experiments

Exported Classes:
    ChromosomeMetadata: Description of one named chromosome
    PopulationMetadata: Description of the population and its evolution
    Config:             Configuration parameters read from an INI file
    DataLogger:         CSV fitness logger
    Trial:              Abstract base class for trials with joblib parallelization
    Experiment:         Abstract base class for experiments (multi-trial runs)
"""

from galapagos.run.metadata    import ChromosomeMetadata, PopulationMetadata
from galapagos.run.config      import Config
from galapagos.run.data_logger import DataLogger
from galapagos.run.trial       import Trial
from galapagos.run.experiment  import Experiment

__all__ = ['ChromosomeMetadata', 'Config', 'DataLogger', 'Experiment', 'PopulationMetadata', 'Trial']

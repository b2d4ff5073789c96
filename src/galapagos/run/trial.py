"""
Galapagos Trial Module

A trial is a single run of the engine: one population, built from a
configuration, bred generation after generation until a termination
condition holds. Fitness evaluation can be spread over joblib workers.
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from galapagos.run.config  import Config
from galapagos.termination import FitnessThreshold
if TYPE_CHECKING:
    from galapagos.pool import Creature, Population

class Trial(ABC):
    """
    Abstract base class for implementing a trial.

    The configuration supplies the chromosomes, the population layout and the
    termination conditions; the subclass supplies the fitness function and the
    reports.

    Subclasses must implement:
    - _reset(): Reset trial-specific state and call super()._reset()
    - _evaluate_fitness(creature): Score one creature
    - _report_progress(): Called after every generation
    - _final_report(): Called once the run is over

    Subclasses can override:
    - _terminate(): Decide when to stop (default: any configured condition holds)

    Public Attributes:
        failed: False only if the run ended on a fitness threshold

    Public Methods:
        run(num_jobs=1): Execute a complete trial

    num_jobs is handed to joblib: 1 evaluates fitness in-process,
    -1 uses every core, any other value is a worker count.
    """

    def __init__(self, config: Config, suppress_output: bool = False, log_file: str | None = None):
        """
        Parameters:
            config:          Configuration parameters
            suppress_output: Skip the progress and final reports (experiments set this)
            log_file:        CSV file receiving the best fitness of every generation
        """
        self._config            : Config              = config
        self._generation_counter: int                 = 0
        self._population        : 'Population | None' = None
        self._suppress_output   : bool                = suppress_output
        self._log_file          : str | None          = log_file
        self.failed             : bool                = True

    def run(self, num_jobs: int = 1):
        """
        Build a fresh population and breed it until _terminate() says stop.

        Parameters:
            num_jobs: Number of joblib workers evaluating fitness
        """
        # circular import
        from galapagos.pool import Population

        self._reset()

        metadata         = self._config.to_metadata(self._evaluate_fitness)
        self._population = Population(metadata)
        if self._log_file:
            self._population.enable_logging(self._log_file)

        while True:
            self._population.step(num_jobs)
            self._generation_counter = self._population.generation

            if not self._suppress_output:
                self._report_progress()

            if self._terminate():
                break
        self._population.release_niches()

        if not self._suppress_output:
            self._final_report()

    @abstractmethod
    def _reset(self):
        """
        Clear the state left by a previous run.
        Overrides call this first, then set up their own data.
        """
        self._generation_counter = 0
        self._population         = None
        self.failed              = True

    @abstractmethod
    def _evaluate_fitness(self, creature: 'Creature') -> float:
        """
        Score a creature; higher is better.

        With fitness proportionate selection every score must be positive.
        The method may run in a worker process, so it should not rely on
        state mutated during the run.
        """
        pass

    @abstractmethod
    def _report_progress(self):
        """Per-generation report; not called when output is suppressed."""
        pass

    @abstractmethod
    def _final_report(self):
        """End-of-run report; not called when output is suppressed."""
        pass

    def _terminate(self) -> bool:
        """
        Stop once any configured termination condition holds.

        When the configuration has fitness thresholds, the trial is marked
        successful only if one of them was met.
        """
        terminate = self._population.terminated()

        if terminate:
            thresholds = [condition for condition in self._population.metadata.termination_conditions
                          if isinstance(condition, FitnessThreshold)]
            if thresholds:
                self.failed = not any(condition.check(self._population) for condition in thresholds)

        return terminate

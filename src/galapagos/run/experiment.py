"""
Galapagos Experiment Module

An experiment runs the same trial many times, independently, to measure how
reliably and how quickly the engine solves a problem. Trials can run one
after the other or in joblib worker processes.

Classes:
    Experiment: Abstract base class for multi-trial experiments
"""

import logging
from abc    import ABC, abstractmethod
from joblib import Parallel, delayed
from sys    import stdout
from typing import Type

from galapagos.run.config import Config
from galapagos.run.trial  import Trial

logger = logging.getLogger(__name__)

class Experiment(ABC):
    """
    Abstract base class for implementing an experiment.

    Every trial is built from the same configuration and the same constructor
    arguments; the experiment collects one result dictionary per trial and
    keeps statistics about the successful ones (those that reached a fitness
    threshold).

    Subclasses must implement:
    - _reset(): Clear per-experiment statistics, after super()._reset()
    - _prepare_trial(trial, trial_number): Hook called on each trial before it runs
    - _extract_trial_results(trial, trial_number): Build the result dictionary of a finished trial
    - _analyze_trial_results(results): Fold one result into the statistics
    - _final_report(): Summarize the whole experiment

    Public Attributes:
        results: The result dictionaries of the trials run so far, by trial number

    Public Properties:
        success_rate: Fraction of the trials run so far that succeeded

    Public Methods:
        run(num_jobs_trials=1, num_jobs_fitness=1): Run every trial and report

    Parallelization:
        num_jobs_trials:  processes running trials (1 = serial, -1 = all cores)
        num_jobs_fitness: processes evaluating fitness inside each trial; keep it
                          at 1 when trials run in parallel
    """

    def __init__(self, trial_class: Type[Trial], num_trials: int, config: Config,
                 *args, **kwargs):
        """
        Parameters:
            trial_class: Trial subclass instantiated once per trial
            num_trials:  how many independent trials to run
            config:      configuration shared by every trial
            *args:       extra positional arguments for the trial constructor
            **kwargs:    extra keyword arguments for the trial constructor
        """
        if num_trials <= 0:
            raise ValueError(f"an experiment needs at least one trial, got {num_trials}")

        self._num_trials  : int         = num_trials
        self._trial_class : Type[Trial] = trial_class
        self._config      : Config      = config
        self._trial_args                = args
        self._trial_kwargs              = kwargs

        self.results: list[dict] = []

        # progress counters
        self._trial_counter  : int = 0  # trials started
        self._success_counter: int = 0  # how many trials reached the fitness threshold

        # statistics of the successful trials
        self._number_generations: list[int]   = []
        self._max_fitness       : list[float] = []

    @property
    def success_rate(self) -> float:
        return self._success_counter / self._trial_counter if self._trial_counter else 0.0

    @abstractmethod
    def _reset(self):
        self.results             = []
        self._trial_counter      = 0
        self._success_counter    = 0
        self._number_generations = []
        self._max_fitness        = []

    def run(self, num_jobs_trials: int = 1, num_jobs_fitness: int = 1):
        """
        Run the experiment: reset, run every trial, analyze every result in
        trial order, then produce the final report.

        Parameters:
            num_jobs_trials:  joblib workers running whole trials
            num_jobs_fitness: joblib workers evaluating fitness inside one trial
        """
        self._reset()

        if num_jobs_trials != 1 and num_jobs_fitness != 1:
            logger.warning("nested parallelism: %s trial jobs, each with %s fitness jobs",
                           num_jobs_trials, num_jobs_fitness)

        if num_jobs_trials == 1:
            results = []
            while self._trial_counter < self._num_trials:
                self._trial_counter += 1
                results.append(self._run_trial(self._trial_counter, num_jobs_fitness))
        else:
            results = Parallel(num_jobs_trials)(
                delayed(self._run_trial)(n, num_jobs_fitness)
                for n in range(1, self._num_trials + 1))
            self._trial_counter = self._num_trials

        for r in sorted(results, key=lambda r: r["trial_number"]):
            self.results.append(r)
            self._analyze_trial_results(r)
        self._final_report()

    def _run_trial(self, trial_number: int, num_jobs: int = 1) -> dict:
        trial = \
            self._trial_class(*self._trial_args, config=self._config, suppress_output=True, **self._trial_kwargs)

        self._prepare_trial(trial, trial_number)
        trial.run(num_jobs)
        return self._extract_trial_results(trial, trial_number)

    @abstractmethod
    def _prepare_trial(self, trial: Trial, trial_number: int):
        """
        Configure a trial before it runs.
        The default implementation prints a progress line.
        """
        stdout.write(f"Starting trial {trial_number:03d} of {self._num_trials}...\r")
        stdout.flush()

    @abstractmethod
    def _extract_trial_results(self, trial: Trial, trial_number: int) -> dict:
        """
        Collect the outcome of a finished trial.
        Overrides must call this and extend the returned dictionary.
        """
        population = trial._population

        return {"trial_number"      : trial_number,
                "number_generations": population.generation,
                "max_fitness"       : population.best_true_fitness,
                "success"           : not trial.failed}

    @abstractmethod
    def _analyze_trial_results(self, results: dict):
        """
        Update the statistics common to all experiments.
        Overrides must call this before using the result.
        """
        if results["success"]:
            self._success_counter += 1
            self._number_generations.append(results["number_generations"])
            self._max_fitness.append(results["max_fitness"])

    @abstractmethod
    def _final_report(self):
        pass

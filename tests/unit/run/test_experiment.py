"""
Unit tests for galapagos.run.experiment module.
"""

import pytest

from galapagos.run import ChromosomeMetadata, Config, Experiment, Trial


# ============================================================================
# Concrete Implementations for Testing
# ============================================================================

class OneMaxTrial(Trial):
    """Trial maximizing the number of ones in a short bit string."""

    def __init__(self, config, suppress_output=False, bonus=1.0):
        super().__init__(config, suppress_output)
        self.bonus = bonus

    def _reset(self):
        super()._reset()

    def _evaluate_fitness(self, creature):
        return float(creature["bits"].bits.sum()) + self.bonus

    def _report_progress(self):
        pass

    def _final_report(self):
        pass


class RecordingExperiment(Experiment):
    """Experiment keeping track of every hook call."""

    def _reset(self):
        super()._reset()
        self.prepared = []
        self.analyzed = []
        self.final_report_called = False

    def _prepare_trial(self, trial, trial_number):
        super()._prepare_trial(trial, trial_number)
        self.prepared.append(trial_number)

    def _extract_trial_results(self, trial, trial_number):
        results = super()._extract_trial_results(trial, trial_number)
        results["bonus"] = trial.bonus
        return results

    def _analyze_trial_results(self, results):
        super()._analyze_trial_results(results)
        self.analyzed.append(results)

    def _final_report(self):
        self.final_report_called = True


def make_config(**termination):
    config = Config()
    config.population_size = 8
    config.termination = termination
    config.chromosomes = [ChromosomeMetadata("bits", "binary", gene_count=4)]
    return config


# ============================================================================
# Test Experiment Run
# ============================================================================

class TestExperimentRun:
    """Test Experiment.run method."""

    def test_serial_trials(self):
        """Test that every trial is prepared, run and analyzed in order."""
        config     = make_config(generation_threshold=20, fitness_threshold=2.0)
        experiment = RecordingExperiment(OneMaxTrial, 3, config, bonus=1.0)

        experiment.run()

        assert experiment.prepared == [1, 2, 3]
        assert [r["trial_number"] for r in experiment.analyzed] == [1, 2, 3]
        assert all(r["bonus"] == 1.0 for r in experiment.analyzed)
        assert experiment.final_report_called
        assert experiment._trial_counter == 3

    def test_successful_trials_are_counted(self):
        """Test that success statistics only include successful trials."""
        config     = make_config(generation_threshold=20, fitness_threshold=2.0)
        experiment = RecordingExperiment(OneMaxTrial, 2, config)

        experiment.run()

        assert experiment._success_counter == 2
        assert len(experiment._number_generations) == 2
        assert all(fitness >= 2.0 for fitness in experiment._max_fitness)

    def test_failed_trials_are_not_counted(self):
        """Test that trials missing the fitness threshold add no statistics."""
        config     = make_config(generation_threshold=2, fitness_threshold=100.0)
        experiment = RecordingExperiment(OneMaxTrial, 2, config)

        experiment.run()

        assert experiment._success_counter == 0
        assert experiment._number_generations == []
        assert [r["success"] for r in experiment.analyzed] == [False, False]
        assert [r["number_generations"] for r in experiment.analyzed] == [2, 2]

    def test_parallel_trials(self):
        """Test that trials can run in parallel processes."""
        config     = make_config(generation_threshold=2)
        experiment = RecordingExperiment(OneMaxTrial, 3, config)

        experiment.run(num_jobs_trials=2)

        assert sorted(r["trial_number"] for r in experiment.analyzed) == [1, 2, 3]
        assert experiment._trial_counter == 3
        assert experiment.final_report_called

    def test_results_and_success_rate(self):
        """Test that every result is kept in trial order and the success rate covers all trials."""
        config     = make_config(generation_threshold=20, fitness_threshold=2.0)
        experiment = RecordingExperiment(OneMaxTrial, 2, config)

        experiment.run()

        assert [r["trial_number"] for r in experiment.results] == [1, 2]
        assert experiment.success_rate == 1.0

    def test_rerun_resets_statistics(self):
        """Test that running twice does not accumulate results."""
        config     = make_config(generation_threshold=2)
        experiment = RecordingExperiment(OneMaxTrial, 2, config)

        experiment.run()
        experiment.run()

        assert len(experiment.results) == 2
        assert experiment._trial_counter == 2


class TestExperimentInit:
    """Test Experiment construction."""

    def test_no_trials_raises_error(self):
        """Test that an experiment needs at least one trial."""
        with pytest.raises(ValueError):
            RecordingExperiment(OneMaxTrial, 0, make_config(generation_threshold=2))

    def test_success_rate_before_run(self):
        """Test that the success rate is zero before any trial has run."""
        experiment = RecordingExperiment(OneMaxTrial, 1, make_config(generation_threshold=2))

        assert experiment.success_rate == 0.0

"""
OneMax Problem Implementation

OneMax is the "hello world" of genetic algorithms: evolve a bit string
until every bit is set. The fitness of a creature is the number of ones in
its 'bits' chromosome, plus one so that fitness proportionate selection
always sees positive values.

Classes:
    Trial_OneMax:      Trial for solving OneMax
    Experiment_OneMax: Multi-trial experiment measuring convergence speed

Usage:
    config = Config("examples/configs/config_onemax.ini")
    trial = Trial_OneMax(config, log_file="onemax.csv")
    trial.run()
"""

from statistics import mean, stdev

from galapagos.genotype import BinaryChromosome
from galapagos.pool     import Creature
from galapagos.run      import Config, Experiment, Trial

class Trial_OneMax(Trial):
    """
    Trial maximizing the number of ones in a binary chromosome named 'bits'.
    """

    def _reset(self):
        return super()._reset()

    def _evaluate_fitness(self, creature: Creature) -> float:
        bits = creature.get_chromosome("bits", BinaryChromosome)
        return float(bits.bits.sum()) + 1.0

    def _report_progress(self):
        best = self._population.optimal_creature["bits"]
        print(f"generation {self._generation_counter:04d}: fitness={self._population.best_true_fitness:.0f} {best}")

    def _final_report(self):
        status = "FAILED" if self.failed else "SUCCESS"
        print(f"\n[{status}] after {self._generation_counter} generations")

class Experiment_OneMax(Experiment):

    def __init__(self, num_trials: int, config: Config):
        super().__init__(Trial_OneMax, num_trials, config)

    def _reset(self):
        super()._reset()

    def _prepare_trial(self, trial: Trial_OneMax, trial_number: int):
        super()._prepare_trial(trial, trial_number)

    def _extract_trial_results(self, trial: Trial_OneMax, trial_number: int) -> dict:
        return super()._extract_trial_results(trial, trial_number)

    def _analyze_trial_results(self, results: dict):
        super()._analyze_trial_results(results)

    def _final_report(self):
        s  = "\nSUMMARY:\n"
        s += f"Total trials:       = {self._trial_counter}\n"
        s += f"Success rate        = {100 * self.success_rate:.0f}%\n"
        if len(self._number_generations) > 1:
            s += f"Avg # generations   = {mean(self._number_generations):.1f}"
            s += f" (stdev {stdev(self._number_generations):.1f})\n"
        print(s)

if __name__ == "__main__":
    experiment = Experiment_OneMax(num_trials=20, config=Config("examples/configs/config_onemax.ini"))
    experiment.run(num_jobs_trials=-1)

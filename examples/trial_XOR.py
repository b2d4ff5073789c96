"""
XOR with Neural Chromosomes

Evolves a network that computes exclusive OR. No single layer of weights can
separate the XOR cases, so a solution needs at least one hidden node, which
the structural mutations have to discover.

Truth table:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact
    outputs. The configuration stops a trial once the fitness exceeds 3.9.

Classes:
    Trial_XOR:      Trial for solving XOR
    Experiment_XOR: Repeated XOR trials, reporting network sizes of the solutions

Usage:
    Single Trial:
        config = Config("examples/configs/config_xor.ini")
        trial = Trial_XOR(config)
        trial.run(num_jobs=1)

    Experiment (Multiple Trials):
        config = Config("examples/configs/config_xor.ini")
        experiment = Experiment_XOR(num_trials=100, config=config)
        experiment.run(num_jobs_trials=-1)
"""

import json
from statistics import mean

from galapagos.genotype import NeuralChromosome
from galapagos.pool     import Creature
from galapagos.run      import Config, Experiment, Trial

class Trial_XOR(Trial):
    """
    Trial evolving a neural chromosome named 'brain' to compute XOR.

    Problem Definition:
        Inputs: 2 binary values (0 or 1)
        Output: 1 value (XOR of inputs)
        Training cases: All 4 possible input combinations

    Implemented Methods:
        _evaluate_fitness(creature): Test the network on all 4 XOR cases
        _report_progress():          Display generation statistics and XOR truth table
        _final_report():             Save and visualize the evolved network
    """

    xor_inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    xor_outputs = [0.0, 1.0, 1.0, 0.0]

    def __init__(self, config: Config, suppress_output: bool = False, log_file: str | None = None,
                 genome_file: str | None = None):
        """
        Parameters:
            config:          Configuration parameters
            suppress_output: Skip the per-generation and final reports
            log_file:        CSV file receiving the best fitness of every generation
            genome_file:     If given, the final report saves the best genome there, as JSON
        """
        super().__init__(config, suppress_output, log_file)
        self._genome_file = genome_file

    def _reset(self):
        """Reset trial state."""
        return super()._reset()

    def _evaluate_fitness(self, creature: Creature) -> float:
        brain   = creature["brain"]
        fitness = 4.0  # max possible fitness
        for inputs, target in zip(self.xor_inputs, self.xor_outputs):
            output   = brain.evaluate(inputs)[0]
            fitness -= (output - target) ** 2
        return fitness

    def _best_brain(self) -> NeuralChromosome:
        return self._population.optimal_creature.get_chromosome("brain", NeuralChromosome)

    def _report_progress(self):
        """
        Print a report describing the current generation.
        """
        brain = self._best_brain()

        s  = f"===============\n"
        s += f"GENERATION {self._generation_counter:04d}\n"
        s += f"population size = {len(self._population)}\n"
        s += f"maximum fitness = {self._population.best_true_fitness:.4f}\n"
        s += f"hidden nodes    = {len(brain.hidden_nodes)}\n"
        s += f"enabled edges   = {sum(edge.enabled for edge in brain.edge_genes)}\n"
        s += '\n'

        s += "input         output   target  error\n"
        s += "------------------------------------\n"
        for inputs, target in zip(self.xor_inputs, self.xor_outputs):
            output = brain.evaluate(inputs)[0]
            s += f"{inputs} -> {output:.4f}    {target}   {abs(output - target):.4f}\n"

        print(s)

    def _final_report(self):
        """
        Save the best genome and visualize its network.
        """
        brain = self._best_brain()

        if self._genome_file:
            with open(self._genome_file, 'w') as file:
                json.dump(brain.to_dict(), file, indent=2)
            print(f"Best genome saved as '{self._genome_file}'")

        brain.network.visualize(view=False).render('xor_network', cleanup=True)
        print("Network visualization saved as 'xor_network.pdf'")

class Experiment_XOR(Experiment):

    def __init__(self, num_trials: int, config: Config):
        """
        Parameters:
            num_trials: Number of trials in this experiment
            config:     Configuration parameters
        """
        super().__init__(Trial_XOR, num_trials, config)

    def _reset(self):
        super()._reset()
        self._number_hidden: list[int] = []
        self._number_edges : list[int] = []

    def _prepare_trial(self, trial: Trial_XOR, trial_number: int):
        # the default implementation prints a progress report
        super()._prepare_trial(trial, trial_number)

    def _extract_trial_results(self, trial: Trial_XOR, trial_number: int) -> dict:
        results = super()._extract_trial_results(trial, trial_number)

        brain = trial._best_brain()
        results["number_hidden"] = len(brain.hidden_nodes)
        results["number_edges"]  = sum(edge.enabled for edge in brain.edge_genes)
        return results

    def _analyze_trial_results(self, results: dict):
        """
        Print one line per trial and keep the sizes of the solved networks.
        """
        super()._analyze_trial_results(results)
        if results['success']:
            self._number_hidden.append(results['number_hidden'])
            self._number_edges.append(results['number_edges'])

        s  = f"Trial {results['trial_number']:03d}: "
        s += f"max fitness={results['max_fitness']:.2f}, "
        s += f"hidden={results['number_hidden']:2}, "
        s += f"edges={results['number_edges']:3}, "
        s += f"generations={results['number_generations']:3} "
        s += "[SUCCESS]" if results['success'] else "[FAILED]"
        print(s)

    def _final_report(self):
        """
        Print averages over the successful trials.
        """
        s  = "\nSUMMARY:\n"
        s += f"Total trials:         = {self._trial_counter}\n"
        s += f"Success rate          = {100*self.success_rate:.0f}%\n"

        # statistics come from successful trials only
        if self._number_hidden:
            s += f"Avg # hidden nodes    = {mean(self._number_hidden):.2f}\n"
            s += f"Avg # enabled edges   = {mean(self._number_edges):.2f}\n"
            s += f"Avg # generations     = {mean(self._number_generations):.0f}\n"
            s += f"Avg max fitness       = {mean(self._max_fitness):.2f}\n"
        else:
            s += "No successful trials - cannot compute statistics\n"
        print(s)

if __name__ == "__main__":
    trial = Trial_XOR(Config("examples/configs/config_xor.ini"), genome_file="xor_genome.json")
    trial.run(num_jobs=1)

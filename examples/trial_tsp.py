"""
Travelling Salesman Problem Implementation

Cities are scattered at random on the unit square; a creature's 'tour'
permutation chromosome gives the order in which they are visited. The
fitness is the inverse of the length of the closed tour, so shorter tours
are fitter.

Classes:
    Trial_TSP: Trial evolving short tours

Usage:
    config = Config("examples/configs/config_tsp.ini")
    trial = Trial_TSP(config, seed=7)
    trial.run(num_jobs=-1)
"""

import numpy as np

from galapagos.genotype import PermutationChromosome
from galapagos.pool     import Creature
from galapagos.run      import Config, Trial

class Trial_TSP(Trial):
    """
    Trial searching for a short closed tour through randomly placed cities.

    The number of cities is the gene count of the 'tour' chromosome.
    """

    def __init__(self, config: Config, suppress_output: bool = False, log_file: str | None = None,
                 seed: int = 0):
        super().__init__(config, suppress_output, log_file)

        city_count     = next(c.gene_count for c in config.chromosomes if c.name == "tour")
        cities         = np.random.default_rng(seed).random((city_count, 2))
        self.distances = np.linalg.norm(cities[:, None, :] - cities[None, :, :], axis=-1)

    def _reset(self):
        return super()._reset()

    def tour_length(self, tour: PermutationChromosome) -> float:
        order = tour.permutation
        return float(self.distances[order, np.roll(order, -1)].sum())

    def _evaluate_fitness(self, creature: Creature) -> float:
        return 1.0 / self.tour_length(creature.get_chromosome("tour", PermutationChromosome))

    def _report_progress(self):
        if self._generation_counter % 10 == 0:
            tour = self._population.optimal_creature["tour"]
            print(f"generation {self._generation_counter:04d}: tour length={self.tour_length(tour):.4f}")

    def _final_report(self):
        tour = self._population.optimal_creature["tour"]
        print(f"\nBest tour: {tour}")
        print(f"Length:    {self.tour_length(tour):.4f}")

if __name__ == "__main__":
    trial = Trial_TSP(Config("examples/configs/config_tsp.ini"), seed=7)
    trial.run(num_jobs=-1)

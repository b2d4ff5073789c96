#!/usr/bin/env python3
"""
Utility script to run the examples easily.

Usage:
    python scripts/run_example.py xor
    python scripts/run_example.py onemax --mode experiment --num-trials 20
    python scripts/run_example.py tsp --num-jobs -1
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the repository root (for 'examples') and the sources to the path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))
sys.path.insert(0, str(root_dir / "src"))

from galapagos             import Config          # noqa: E402
from examples.trial_XOR    import Trial_XOR, Experiment_XOR          # noqa: E402
from examples.trial_onemax import Trial_OneMax, Experiment_OneMax    # noqa: E402
from examples.trial_tsp    import Trial_TSP                          # noqa: E402


EXAMPLES = {
    'xor': {
        'trial': Trial_XOR,
        'experiment': Experiment_XOR,
        'config': 'examples/configs/config_xor.ini',
        'description': 'XOR logic problem (neural chromosome)'
    },
    'onemax': {
        'trial': Trial_OneMax,
        'experiment': Experiment_OneMax,
        'config': 'examples/configs/config_onemax.ini',
        'description': 'OneMax (binary chromosome)'
    },
    'tsp': {
        'trial': Trial_TSP,
        'experiment': None,
        'config': 'examples/configs/config_tsp.ini',
        'description': 'Travelling salesman (permutation chromosome)'
    }
}


def main():
    parser = argparse.ArgumentParser(description='Run galapagos examples')
    parser.add_argument('example', choices=EXAMPLES.keys(),
                        help='Example to run')
    parser.add_argument('--mode', choices=['trial', 'experiment'], default='trial',
                        help='Run single trial or full experiment')
    parser.add_argument('--num-trials', type=int, default=30,
                        help='Number of trials for experiment mode')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs')
    parser.add_argument('--log-file', type=str, default=None,
                        help='CSV file receiving the best fitness of every generation')
    parser.add_argument('--verbose', action='store_true',
                        help='Show debug messages of the engine')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    example = EXAMPLES[args.example]
    print(f"Running {example['description']}...")
    print(f"Mode: {args.mode}")

    config = Config(str(root_dir / example['config']))

    if args.mode == 'trial':
        trial = example['trial'](config, log_file=args.log_file)
        trial.run(num_jobs=args.num_jobs)
        print(f"\nBest fitness: {trial._population.best_true_fitness:.4f}")
    elif example['experiment'] is None:
        parser.error(f"'{args.example}' has no experiment")
    else:
        experiment = example['experiment'](num_trials=args.num_trials, config=config)
        experiment.run(num_jobs_trials=args.num_jobs, num_jobs_fitness=1)


if __name__ == '__main__':
    main()

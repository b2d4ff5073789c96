#!/usr/bin/env python3
"""
Utility script to visualize a neural chromosome saved as JSON.

The file holds the dictionary produced by 'NeuralChromosome.to_dict()',
e.g. the 'xor_genome.json' written by the XOR example.

Usage:
    python scripts/visualize_network.py --genome xor_genome.json
"""

import argparse
import json
import sys
from pathlib import Path

# Add the sources to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from galapagos.genotype import InnovationTracker, NeuralChromosome, NodeType  # noqa: E402


def load_genome(path):
    """
    Rebuild a genome from its JSON description.

    A fresh innovation tracker is created for the genome family; it is only
    needed to satisfy the constructor, since the genome is not evolved further.
    """
    with open(path) as file:
        genome_dict = json.load(file)

    io_count = sum(1 for node in genome_dict['nodes'] if node['type'] != NodeType.HIDDEN.name.lower())
    tracker  = InnovationTracker(genome_dict.get('family', 'genome'), io_count)
    return NeuralChromosome.from_dict(genome_dict, tracker)


def main():
    parser = argparse.ArgumentParser(description='Visualize a neural chromosome')
    parser.add_argument('--genome', type=str, required=True,
                        help='Path to the JSON genome file')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    genome = load_genome(args.genome)
    print(genome)

    dot = genome.network.visualize(view=False)
    dot.format = args.format
    dot.render(args.output, view=not args.no_view, cleanup=True)
    print(f"Network visualization saved to {args.output}.{args.format}")


if __name__ == '__main__':
    main()

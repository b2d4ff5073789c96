"""
NEAT Operators Module

Crossover and mutation operators for NEAT genomes (neural chromosomes).

Structural mutations get their node IDs and innovation numbers from the
innovation tracker of the genome family, which keeps the IDs of independently
evolved genomes aligned.

Classes:
    NeatCrossover:         Recombine two genomes aligned by innovation number
    EdgeMutation:          Add a new connection
    NodeMutation:          Split a connection with a new hidden node
    EnableDisableMutation: Flip the enabled flag of a connection
    WeightMutation:        Perturb the weight of a connection
"""

import random

from galapagos.genotype.chromosome        import ChromosomeType
from galapagos.genotype.edge_gene         import EdgeGene
from galapagos.genotype.neural_chromosome import NeuralChromosome
from galapagos.genotype.node_gene         import NodeGene, NodeType
from galapagos.operators.operator         import Crossover, Mutation
from galapagos.stochastic                 import flip_coin

class NeatCrossover(Crossover):
    """
    NEAT crossover.

    The edge genes of both parents are sorted by innovation number and walked
    in step:
    - matching genes (same innovation number in both) are inherited from a
      parent chosen at random
    - disjoint and excess genes (present in only one parent) are inherited
      only when that parent is the fitter one; on equal fitness the first
      parent counts as the fitter one

    The child contains the input and output nodes plus every node referenced
    by an inherited edge.
    """

    chromosome_types = (ChromosomeType.NEURAL,)
    name             = "neat"
    uses_fitness     = True

    def _invoke(self, x: NeuralChromosome, y: NeuralChromosome, x_is_fitter: bool) -> NeuralChromosome:
        x_edges = sorted(x.edge_genes, key=lambda gene: gene.id)
        y_edges = sorted(y.edge_genes, key=lambda gene: gene.id)
        x_nodes = {gene.id: gene for gene in x.node_genes}
        y_nodes = {gene.id: gene for gene in y.node_genes}

        edge_genes: list[EdgeGene]      = []
        node_genes: dict[int, NodeGene] = {}

        # Input and output nodes are always present
        for node in x.node_genes:
            if node.type != NodeType.HIDDEN:
                node_genes[node.id] = NodeGene(node.id, node.type)

        def inherit(edge: EdgeGene, nodes: dict[int, NodeGene]) -> None:
            edge_genes.append(edge.copy())
            for node_id in (edge.source, edge.target):
                if node_id not in node_genes:
                    node_genes[node_id] = NodeGene(node_id, nodes[node_id].type)

        i = j = 0
        while i < len(x_edges) and j < len(y_edges):
            x_edge, y_edge = x_edges[i], y_edges[j]

            if x_edge.id == y_edge.id:
                if flip_coin():
                    inherit(x_edge, x_nodes)
                else:
                    inherit(y_edge, y_nodes)
                i += 1
                j += 1

            elif x_edge.id < y_edge.id:
                if x_is_fitter:
                    inherit(x_edge, x_nodes)
                i += 1

            else:
                if not x_is_fitter:
                    inherit(y_edge, y_nodes)
                j += 1

        # Whatever is left over is excess
        if x_is_fitter:
            for x_edge in x_edges[i:]:
                inherit(x_edge, x_nodes)
        else:
            for y_edge in y_edges[j:]:
                inherit(y_edge, y_nodes)

        ordered_nodes = [node_genes[node_id] for node_id in sorted(node_genes)]
        return x.derive(ordered_nodes, edge_genes)

class EdgeMutation(Mutation):
    """
    Add a new enabled connection with a weight drawn uniformly from [0, 1).

    A source node and a target node are picked at random (input nodes cannot
    be targets). If the genome already holds that connection, the following
    target candidates are tried in order, wrapping around; if every target is
    already connected to the source, the genome is returned unchanged.
    """

    chromosome_types = (ChromosomeType.NEURAL,)
    name             = "edge"

    def _invoke(self, chromosome: NeuralChromosome) -> NeuralChromosome:
        node_genes, edge_genes = chromosome.clone_genes()

        sources = node_genes
        targets = [node for node in node_genes if node.type != NodeType.INPUT]
        source  = random.choice(sources).id

        existing = {(edge.source, edge.target) for edge in edge_genes}
        start    = random.randrange(len(targets))
        index    = start
        while (source, targets[index].id) in existing:
            index = (index + 1) % len(targets)
            if index == start:
                return chromosome.derive(node_genes, edge_genes)   # saturated

        target     = targets[index].id
        innovation = chromosome.tracker.get_innovation_number(source, target)
        edge_genes.append(EdgeGene(innovation, source, target, random.random()))
        return chromosome.derive(node_genes, edge_genes)

class NodeMutation(Mutation):
    """
    Split a random connection by inserting a new hidden node.

    The chosen connection is disabled and replaced by two new ones:
    source -> new node (weight 1) and new node -> target (the old weight),
    so the network initially computes the same thing. A genome without
    connections is returned unchanged.
    """

    chromosome_types = (ChromosomeType.NEURAL,)
    name             = "node"

    def _invoke(self, chromosome: NeuralChromosome) -> NeuralChromosome:
        node_genes, edge_genes = chromosome.clone_genes()
        if not edge_genes:
            return chromosome.derive(node_genes, edge_genes)

        split_edge = random.choice(edge_genes)
        split_edge.enabled = False

        new_node_id, innov1, innov2 = chromosome.tracker.get_split_IDs(split_edge.id,
                                                                       split_edge.source,
                                                                       split_edge.target)

        # With signature reuse the genome may already hold some genes of this
        # split (inherited from a relative); those are only switched back on.
        if all(node.id != new_node_id for node in node_genes):
            node_genes.append(NodeGene(new_node_id, NodeType.HIDDEN))

        present = {edge.id: edge for edge in edge_genes}
        for innovation, source, target, weight in ((innov1, split_edge.source, new_node_id, 1.0),
                                                   (innov2, new_node_id, split_edge.target, split_edge.weight)):
            if innovation in present:
                present[innovation].enabled = True
            else:
                edge_genes.append(EdgeGene(innovation, source, target, weight))

        return chromosome.derive(node_genes, edge_genes)

class EnableDisableMutation(Mutation):
    """
    Flip the enabled flag of one random connection.
    """

    chromosome_types = (ChromosomeType.NEURAL,)
    name             = "enable_disable"

    def _invoke(self, chromosome: NeuralChromosome) -> NeuralChromosome:
        node_genes, edge_genes = chromosome.clone_genes()
        if edge_genes:
            edge = random.choice(edge_genes)
            edge.enabled = not edge.enabled
        return chromosome.derive(node_genes, edge_genes)

class WeightMutation(Mutation):
    """
    Add a uniform perturbation in [-step_size, step_size] to the weight of one random connection.
    """

    chromosome_types = (ChromosomeType.NEURAL,)
    name             = "weight"

    def __init__(self, weight: float = 1.0, step_size: float = 0.1):
        super().__init__(weight)
        self.step_size: float = step_size

    def _invoke(self, chromosome: NeuralChromosome) -> NeuralChromosome:
        node_genes, edge_genes = chromosome.clone_genes()
        if edge_genes:
            edge = random.choice(edge_genes)
            edge.weight += random.uniform(-self.step_size, self.step_size)
        return chromosome.derive(node_genes, edge_genes)

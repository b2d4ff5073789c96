"""
NEAT Neural Chromosome Module

This module implements the NeuralChromosome class, a NEAT genome: a graph of
node genes and edge genes whose edges carry innovation numbers.

Classes:
    NeuralChromosome: Chromosome encoding the topology and weights of a neural network
"""

import numpy as np
from typing import TYPE_CHECKING, Sequence

from galapagos.errors                       import ConfigurationError, IncompatibilityError
from galapagos.genotype.chromosome          import Chromosome, ChromosomeType
from galapagos.genotype.edge_gene           import EdgeGene
from galapagos.genotype.innovation_tracker  import InnovationTracker
from galapagos.genotype.node_gene           import NodeGene, NodeType
if TYPE_CHECKING:
    from galapagos.phenotype import NeuralNetwork

# Below this many edge genes (in the larger genome) the
# excess and disjoint counts are not normalized.
SMALL_GENOME_SIZE = 20

class NeuralChromosome(Chromosome):
    """
    A NEAT genome.

    The genome is made of node genes (input, hidden and output nodes) and edge
    genes (weighted, possibly disabled connections identified by their
    innovation number). Input nodes are numbered 0..I-1 and output nodes
    I..I+O-1; hidden nodes and edges get their IDs from the innovation tracker
    shared by every genome of the same family, so that two genomes with common
    ancestry can be aligned by ID.

    The number of input and output nodes is fixed when the family is created
    and can never be zero.

    Genes are never modified after the chromosome is built: mutation operators
    work on the copies returned by 'clone_genes()'.

    Public Attributes:
        node_genes: Node genes, in order of creation
        edge_genes: Edge genes, in order of creation
        tracker:    Innovation tracker of the genome family
        c1, c2, c3: Weights of the excess, disjoint and weight terms of the distance
        activation: Name of the activation function used by the network
        order:      Node visiting order used by the network ("id" or "topological")

    Public Methods:
        minimal(input_size, output_size, tracker, ...): Genome with only input and output nodes
        distance(other):   NEAT compatibility distance
        evaluate(inputs):  Run the network described by the genome
        clone_genes():     Deep copies of the node and edge genes
        to_dict():         Serialize the genome into a dictionary
        from_dict(d, tracker): Build a genome from a dictionary

    Public Properties:
        family:       Name of the genome family
        input_size:   Number of input nodes
        output_size:  Number of output nodes
        input_nodes:  Input node genes
        output_nodes: Output node genes
        hidden_nodes: Hidden node genes
        network:      The network described by the genome (built on first access)
    """

    kind = ChromosomeType.NEURAL

    def __init__(self,
                 node_genes: Sequence[NodeGene],
                 edge_genes: Sequence[EdgeGene],
                 tracker   : InnovationTracker,
                 c1        : float = 1.0,
                 c2        : float = 1.0,
                 c3        : float = 1.0,
                 activation: str   = "identity",
                 order     : str   = "id"):
        """
        Parameters:
            node_genes: node genes of the genome
            edge_genes: edge genes of the genome
            tracker:    innovation tracker of the genome family
            c1:         weight of the excess gene term in the distance
            c2:         weight of the disjoint gene term in the distance
            c3:         weight of the average weight difference in the distance
            activation: name of the activation function used by the network
            order:      node visiting order used by the network
        """
        self.node_genes: list[NodeGene]    = list(node_genes)
        self.edge_genes: list[EdgeGene]    = list(edge_genes)
        self.tracker   : InnovationTracker = tracker
        self.c1        : float             = c1
        self.c2        : float             = c2
        self.c3        : float             = c3
        self.activation: str               = activation
        self.order     : str               = order

        if self.input_size == 0:
            raise ConfigurationError("input size cannot be 0")
        if self.output_size == 0:
            raise ConfigurationError("output size cannot be 0")

        node_ids = {gene.id for gene in self.node_genes}
        if len(node_ids) != len(self.node_genes):
            raise ValueError("duplicate node IDs in genome")
        if len({gene.id for gene in self.edge_genes}) != len(self.edge_genes):
            raise ValueError("duplicate innovation numbers in genome")
        for edge in self.edge_genes:
            if edge.source not in node_ids or edge.target not in node_ids:
                raise ValueError(f"edge {edge} references a node missing from the genome")

        # genes may come from a file or from another tracker state
        tracker.observe(max(node_ids), max((gene.id for gene in self.edge_genes), default=-1))

        self._network: 'NeuralNetwork | None' = None

    @classmethod
    def minimal(cls,
                input_size : int,
                output_size: int,
                tracker    : InnovationTracker,
                **kwargs) -> 'NeuralChromosome':
        """
        Create a genome containing only input and output nodes, without any edges.

        Parameters:
            input_size:  number of input nodes
            output_size: number of output nodes
            tracker:     innovation tracker of the genome family
            kwargs:      forwarded to the constructor (c1, c2, c3, activation, order)
        """
        if input_size <= 0:
            raise ConfigurationError("input size cannot be 0")
        if output_size <= 0:
            raise ConfigurationError("output size cannot be 0")

        node_genes  = [NodeGene(i, NodeType.INPUT) for i in range(input_size)]
        node_genes += [NodeGene(input_size + i, NodeType.OUTPUT) for i in range(output_size)]
        return cls(node_genes, [], tracker, **kwargs)

    def derive(self, node_genes: Sequence[NodeGene], edge_genes: Sequence[EdgeGene]) -> 'NeuralChromosome':
        """
        Build a genome of the same family and settings from new genes.
        """
        return NeuralChromosome(node_genes, edge_genes, self.tracker,
                                self.c1, self.c2, self.c3, self.activation, self.order)

    @property
    def family(self) -> str:
        return self.tracker.family

    @property
    def input_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.INPUT]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.OUTPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.HIDDEN]

    @property
    def input_size(self) -> int:
        return len(self.input_nodes)

    @property
    def output_size(self) -> int:
        return len(self.output_nodes)

    def __len__(self) -> int:
        return len(self.edge_genes)

    def _check_compatible(self, other: Chromosome, same_length: bool = False) -> None:
        # Genomes grow independently, so only the variant and the family must match
        super()._check_compatible(other, same_length=False)
        if other.family != self.family:
            raise IncompatibilityError(f"genome families differ ('{self.family}' vs '{other.family}')")

    def distance(self, other: 'NeuralChromosome') -> float:
        """
        Calculate genetic distance between this genome and another using the NEAT formula.

           distance = (c1 * E / N) + (c2 * D / N) + c3 * W̄

        Where:
        - E  = number of excess edge genes (beyond the other genome's largest innovation number)
        - D  = number of disjoint edge genes (non-matching, within the common range)
        - N  = number of edge genes in the larger genome, or 1 for small genomes
        - W̄ = average absolute weight difference of matching edge genes

        Parameters:
            other: the genome relative to which we are calculating the distance

        Returns:
            the NEAT distance between this genome and 'other'
        """
        self._check_compatible(other)

        genes1 = {gene.id: gene for gene in self.edge_genes}
        genes2 = {gene.id: gene for gene in other.edge_genes}
        if not genes1 and not genes2:
            return 0.0

        matching_innovs     =  genes1.keys() & genes2.keys()
        non_matching_innovs = (genes1.keys() | genes2.keys()) - matching_innovs

        max_innov1 = max(genes1) if genes1 else -1
        max_innov2 = max(genes2) if genes2 else -1

        num_excess   = 0
        num_disjoint = 0
        for innov in non_matching_innovs:
            if innov > min(max_innov1, max_innov2):
                num_excess += 1
            else:
                num_disjoint += 1

        avg_weight_diff = 0.0
        if matching_innovs:
            weight_diff = sum(abs(genes1[i].weight - genes2[i].weight) for i in matching_innovs)
            avg_weight_diff = weight_diff / len(matching_innovs)

        N = max(len(genes1), len(genes2))
        if N < SMALL_GENOME_SIZE:
            N = 1

        return (self.c1 * num_excess   / N +
                self.c2 * num_disjoint / N +
                self.c3 * avg_weight_diff)

    @property
    def network(self) -> 'NeuralNetwork':
        if self._network is None:
            # Import here to avoid circular import
            from galapagos.phenotype import NeuralNetwork
            self._network = NeuralNetwork(self.node_genes, self.edge_genes, self.activation, self.order)
        return self._network

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Run the network described by this genome.

        Parameters:
            inputs: one value per input node

        Returns:
            numpy array with one value per output node
        """
        return self.network.evaluate(inputs)

    def clone_genes(self) -> tuple[list[NodeGene], list[EdgeGene]]:
        """
        Return deep copies of the node and edge genes, in order.
        """
        node_genes = [NodeGene(gene.id, gene.type) for gene in self.node_genes]
        edge_genes = [gene.copy() for gene in self.edge_genes]
        return node_genes, edge_genes

    def to_dict(self) -> dict:
        """
        Serialize the genome into a dictionary.

        The dictionary has the same layout accepted by 'from_dict':
            {'family': ..., 'activation': ..., 'order': ..., 'c1': ..., 'c2': ..., 'c3': ...,
             'nodes': [{'id': 0, 'type': 'input'}, ...],
             'edges': [{'id': 0, 'from': 0, 'to': 2, 'weight': 1.0, 'enabled': True}, ...]}
        """
        return {
            'family'    : self.family,
            'activation': self.activation,
            'order'     : self.order,
            'c1'        : self.c1,
            'c2'        : self.c2,
            'c3'        : self.c3,
            'nodes'     : [{'id': node.id, 'type': node.type.name.lower()} for node in self.node_genes],
            'edges'     : [{'id'     : edge.id,
                            'from'   : edge.source,
                            'to'     : edge.target,
                            'weight' : edge.weight,
                            'enabled': edge.enabled} for edge in self.edge_genes],
        }

    @classmethod
    def from_dict(cls, genome_dict: dict, tracker: InnovationTracker) -> 'NeuralChromosome':
        """
        Build a genome from a dictionary (see 'to_dict' for the layout).

        Parameters:
            genome_dict: dictionary describing the genome
            tracker:     innovation tracker of the genome family

        Returns:
            the genome
        """
        node_types = {'input': NodeType.INPUT, 'hidden': NodeType.HIDDEN, 'output': NodeType.OUTPUT}

        node_genes = []
        for node in genome_dict['nodes']:
            if node['type'] not in node_types:
                raise ValueError(f"invalid node type '{node['type']}'")
            node_genes.append(NodeGene(node['id'], node_types[node['type']]))

        edge_genes = [EdgeGene(edge['id'], edge['from'], edge['to'], edge['weight'], edge.get('enabled', True))
                      for edge in genome_dict.get('edges', [])]

        return cls(node_genes, edge_genes, tracker,
                   c1         = genome_dict.get('c1', 1.0),
                   c2         = genome_dict.get('c2', 1.0),
                   c3         = genome_dict.get('c3', 1.0),
                   activation = genome_dict.get('activation', "identity"),
                   order      = genome_dict.get('order', "id"))

    def __eq__(self, other):
        if not isinstance(other, NeuralChromosome):
            return NotImplemented
        return (self.family     == other.family     and
                self.node_genes == other.node_genes and
                self.edge_genes == other.edge_genes)

    def __hash__(self):
        return hash((self.family, tuple(self.node_genes), tuple(self.edge_genes)))

    def __getstate__(self):
        # The network is rebuilt on demand
        state = self.__dict__.copy()
        state['_network'] = None
        return state

    def __repr__(self):
        return (f"NeuralChromosome(family='{self.family}', nodes={len(self.node_genes)}, "
                f"edges={len(self.edge_genes)})")

    def __str__(self):
        s  = " ".join(str(node) for node in self.node_genes) + "\n"
        s += " ".join(str(edge) for edge in sorted(self.edge_genes, key=lambda e: e.id))
        return s

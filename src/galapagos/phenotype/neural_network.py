"""
Neural Network Module

This module implements the network expressed by a NEAT genome (its phenotype).

Classes:
    NeuralNetwork: Evaluable network built from node and edge genes
"""

import numpy as np
from collections import deque, defaultdict
from typing      import Iterable, Sequence
import graphviz  # type: ignore

from galapagos.activations            import activations
from galapagos.errors                 import ConfigurationError
from galapagos.genotype.edge_gene     import EdgeGene
from galapagos.genotype.node_gene     import NodeGene, NodeType

EVALUATION_ORDERS = ("id", "topological")

class NeuralNetwork:
    """
    A network built from the node and edge genes of a NEAT genome.

    Only enabled edges take part in the network. Evaluating the network sets
    the input nodes to the supplied values, then visits every node once,
    setting it to activation(sum of weight * source value) over its inbound
    edges. Nodes without inbound edges keep their initial value (0, or the
    supplied input). The outputs are the values of the output nodes, in the
    order they were declared.

    Two visiting orders are available:
     + "id":          ascending node ID. This is a feed-forward approximation:
                      it is exact as long as every edge goes from a lower to a
                      higher ID, otherwise a node may read a stale (zero) value.
     + "topological": Kahn's algorithm over the enabled edges, so every node is
                      visited after all its sources. Nodes caught in a cycle
                      are visited last, in ascending ID order.

    Public Methods:
        evaluate(inputs):                                    Compute the network outputs
        from_adjacency_matrix(matrix, inputs, outputs):      Build a network from a weight matrix
        visualize(view):                                     Render the network with Graphviz

    Public Properties:
        number_nodes:       Total number of nodes in the network
        number_connections: Number of (enabled) connections in the network
        input_ids:          IDs of the input nodes, in declaration order
        output_ids:         IDs of the output nodes, in declaration order
    """

    def __init__(self,
                 node_genes: Sequence[NodeGene],
                 edge_genes: Iterable[EdgeGene],
                 activation: str = "identity",
                 order     : str = "id"):
        """
        Parameters:
            node_genes: the node genes of the genome
            edge_genes: the edge genes of the genome (disabled ones are ignored)
            activation: name of the activation function applied to computed nodes
            order:      node visiting order, "id" or "topological"
        """
        if activation not in activations:
            raise ConfigurationError(f"unknown activation function '{activation}'")
        if order not in EVALUATION_ORDERS:
            raise ConfigurationError(f"evaluation order must be one of {EVALUATION_ORDERS}, got '{order}'")

        self._activation_name = activation
        self._activation      = activations[activation]
        self._order_name      = order

        self._node_genes = {gene.id: gene for gene in node_genes}
        self._input_ids  = [gene.id for gene in node_genes if gene.type == NodeType.INPUT]
        self._output_ids = [gene.id for gene in node_genes if gene.type == NodeType.OUTPUT]

        # Inbound enabled edges of each node: target -> [(source, weight), ...]
        self._edges  : list[EdgeGene] = [gene for gene in edge_genes if gene.enabled]
        self._inbound: dict[int, list[tuple[int, float]]] = defaultdict(list)
        for edge in self._edges:
            if edge.source not in self._node_genes or edge.target not in self._node_genes:
                raise ValueError(f"edge {edge} references a node missing from the genome")
            self._inbound[edge.target].append((edge.source, edge.weight))

        if order == "id":
            self._sorted_nodes = sorted(self._node_genes)
        else:
            self._sorted_nodes = self._topological_sort()

    @property
    def number_nodes(self) -> int:
        return len(self._node_genes)

    @property
    def number_connections(self) -> int:
        return len(self._edges)

    @property
    def input_ids(self) -> list[int]:
        return list(self._input_ids)

    @property
    def output_ids(self) -> list[int]:
        return list(self._output_ids)

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Process one input vector through the network.

        Parameters:
            inputs: one value per input node, in declaration order

        Returns:
            numpy array with one value per output node, in declaration order
        """
        inputs = np.asarray(inputs, dtype=float).ravel()
        if inputs.size != len(self._input_ids):
            raise ValueError(f"expected {len(self._input_ids)} inputs but received {inputs.size}")

        values = dict.fromkeys(self._node_genes, 0.0)
        for node_id, value in zip(self._input_ids, inputs):
            values[node_id] = float(value)

        for node_id in self._sorted_nodes:
            inbound = self._inbound.get(node_id)
            if not inbound:
                continue
            total = sum(weight * values[source] for source, weight in inbound)
            values[node_id] = float(self._activation(total))

        return np.array([values[node_id] for node_id in self._output_ids])

    def _topological_sort(self) -> list[int]:
        """
        Perform topological sort using Kahn's algorithm.

        Sorts the network nodes so that all sources of a node come before it.
        Nodes on a cycle never reach in-degree 0; they are appended at the end
        in ascending ID order.

        Returns:
            List of node IDs
        """
        adjacency = defaultdict(list)
        in_degree = {node_id: 0 for node_id in self._node_genes}
        for edge in self._edges:
            adjacency[edge.source].append(edge.target)
            in_degree[edge.target] += 1

        # Start with nodes that have no incoming edges
        queue  = deque(sorted(node_id for node_id, degree in in_degree.items() if degree == 0))
        result = []
        while queue:
            node_id = queue.popleft()
            result.append(node_id)
            for neighbor in adjacency[node_id]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        visited = set(result)
        result.extend(sorted(node_id for node_id in self._node_genes if node_id not in visited))
        return result

    @classmethod
    def from_adjacency_matrix(cls,
                              matrix      : Sequence[Sequence[float]] | np.ndarray,
                              input_nodes : Sequence[int],
                              output_nodes: Sequence[int],
                              activation  : str = "identity",
                              order       : str = "id") -> 'NeuralNetwork':
        """
        Build a network from a square weight matrix.

        Entry (i, j) is the weight of the edge from node i to node j; zero means no edge.
        Nodes that are neither inputs nor outputs become hidden nodes.

        Parameters:
            matrix:       square matrix of edge weights
            input_nodes:  indices of the input nodes, in input order
            output_nodes: indices of the output nodes, in output order
            activation:   name of the activation function
            order:        node visiting order, "id" or "topological"
        """
        matrix = np.asarray(matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] == 0:
            raise ValueError("adjacency matrix cannot have a zero dimension")
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError("adjacency matrix must be square")

        n = matrix.shape[0]
        if any(index >= n or index < 0 for index in input_nodes):
            raise ValueError("input node index out of bounds")
        if any(index >= n or index < 0 for index in output_nodes):
            raise ValueError("output node index out of bounds")
        if set(input_nodes) & set(output_nodes):
            raise ValueError("input nodes cannot also be output nodes")

        # Input and output genes are listed in the order given, so that
        # inputs and outputs keep that order.
        node_genes = [NodeGene(int(i), NodeType.INPUT) for i in input_nodes]
        node_genes += [NodeGene(int(i), NodeType.OUTPUT) for i in output_nodes]
        declared    = set(input_nodes) | set(output_nodes)
        node_genes += [NodeGene(i, NodeType.HIDDEN) for i in range(n) if i not in declared]

        sources, targets = np.nonzero(matrix)
        edge_genes = [EdgeGene(k, int(i), int(j), matrix[i, j]) for k, (i, j) in enumerate(zip(sources, targets))]

        return cls(node_genes, edge_genes, activation, order)

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Parameters:
            view: If True, render the graph and open the result

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout

        node_attrs = {
            NodeType.INPUT:  {'fillcolor': 'lightgrey', 'style': 'filled', 'shape': 'circle'},
            NodeType.HIDDEN: {'fillcolor': 'lightblue', 'style': 'filled', 'shape': 'circle'},
            NodeType.OUTPUT: {'fillcolor': 'white',     'style': 'filled', 'shape': 'circle'},
        }
        for node_id in sorted(self._node_genes):
            node_gene = self._node_genes[node_id]
            dot.node(str(node_id), label=f"{node_gene.type.value}{node_id}", **node_attrs[node_gene.type])

        for edge in self._edges:
            dot.edge(str(edge.source), str(edge.target),
                     label=f"i={edge.id},w={edge.weight:.2f}",
                     color='blue' if edge.weight > 0 else 'red')

        if view:
            dot.render(view=True)
        return dot

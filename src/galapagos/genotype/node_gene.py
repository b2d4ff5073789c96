"""
NEAT Node Gene Module.

This module implements the NodeGene class and NodeType enumeration
for NEAT genomes.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum import Enum

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    Node genes are identified by a node ID which remains consistent across
    structural mutations and crossover operations. Input and output nodes are
    numbered first (inputs 0..I-1, outputs I..I+O-1); hidden nodes receive
    IDs from the family's innovation tracker.

    Public Attributes:
        id:   Unique identifier for this node
        type: Type of node (INPUT, HIDDEN, or OUTPUT)
    """

    def __init__(self, node_id: int, node_type: NodeType):
        self.id  : int      = node_id
        self.type: NodeType = node_type

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self.id == other.id and self.type == other.type

    def __hash__(self):
        return hash((self.id, self.type))

    def __repr__(self):
        return f"NodeGene(node_id={self.id:03d}, node_type=NodeType.{self.type.name})"

    def __str__(self):
        return f"[{self.type.value}{self.id}]"

"""
NEAT Edge Gene Module

This module implements the EdgeGene class for NEAT genomes.

Classes:
    EdgeGene: Gene encoding a weighted connection between nodes
"""

class EdgeGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each edge gene represents a directed edge in the network graph. Edge genes
    are identified by their innovation number, the historical marker used to
    align genes of two genomes during crossover and distance calculations.

    Disabled edges keep their structural information but are left out of the
    network built from the genome; they may be re-enabled by mutation.

    Public Attributes:
        id:      Innovation number uniquely identifying this connection within its family
        source:  ID of the source node
        target:  ID of the destination node
        weight:  Weight of the connection
        enabled: Whether this connection is active in the network
    """

    def __init__(self,
                 edge_id: int,
                 source : int,
                 target : int,
                 weight : float,
                 enabled: bool = True):
        self.id     : int   = edge_id
        self.source : int   = source
        self.target : int   = target
        self.weight : float = float(weight)
        self.enabled: bool  = enabled

    def copy(self) -> 'EdgeGene':
        return EdgeGene(self.id, self.source, self.target, self.weight, self.enabled)

    def __eq__(self, other):
        if not isinstance(other, EdgeGene):
            return NotImplemented
        return (self.id, self.source, self.target, self.weight, self.enabled) == \
               (other.id, other.source, other.target, other.weight, other.enabled)

    def __hash__(self):
        return hash((self.id, self.source, self.target, self.weight, self.enabled))

    def __repr__(self):
        return (f"EdgeGene(edge_id={self.id:03d}, source={self.source:03d}, target={self.target:03d}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled})")

    def __str__(self):
        s  = f"[{self.id:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.source:02d}=>{self.target:02d},{self.weight:+.02f}]"
        return s

"""
Innovation Tracker Module

This module implements the bookkeeping that gives NEAT structural mutations
stable identifiers, so that independently mutated genomes of the same family
can later be aligned gene by gene.

Classes:
    InnovationTracker:  Node ID and innovation number counters for one genome family
    InnovationRegistry: Collection of trackers keyed by genome family name
"""

import logging
import threading

logger = logging.getLogger(__name__)

class InnovationTracker:
    """
    Tracks structural changes for one family of NEAT genomes.

    Node IDs start right after the input and output nodes (which are numbered
    0..I+O-1 in every genome of the family); innovation numbers start at 0.
    Both counters only ever increase, so an ID is never handed out twice.

    By default every structural mutation event receives fresh IDs. When
    'reuse_signatures' is set, the tracker remembers each connection ever
    created (keyed by its endpoints) and each connection ever split, and gives
    the same structural change the same IDs wherever it happens.

    Increments are serialized through a lock, so a tracker can be shared by
    groups evolving in parallel threads.

    Public Attributes:
        family:             Name of the genome family this tracker serves
        initial_node_count: Number of input plus output nodes in the family
        reuse_signatures:   Whether identical structural changes share IDs

    Public Methods:
        next_node_id():                    Allocate a new node ID
        next_edge_id():                    Allocate a new innovation number
        get_innovation_number(src, dst):   Innovation number for a new connection
        get_split_IDs(edge_id, src, dst):  Node ID and innovation numbers for splitting a connection
        observe(max_node_id, max_edge_id): Skip IDs already held by an existing genome
        reset():                           Restart both counters
    """

    def __init__(self, family: str, initial_node_count: int, reuse_signatures: bool = False):
        """
        Parameters:
            family:             name of the genome family
            initial_node_count: number of input plus output nodes
            reuse_signatures:   give identical structural changes identical IDs
        """
        self.family            : str  = family
        self.initial_node_count: int  = initial_node_count
        self.reuse_signatures  : bool = reuse_signatures
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self._next_node_id      : int                              = self.initial_node_count
            self._next_edge_id      : int                              = 0
            self._innovation_numbers: dict[tuple[int, int], int]       = {}  # (source, target) -> innovation number
            self._split_IDs         : dict[int, tuple[int, int, int]]  = {}  # split innovation -> (node ID, innov1, innov2)

    def next_node_id(self) -> int:
        with self._lock:
            return self._new_node_id()

    def next_edge_id(self) -> int:
        with self._lock:
            return self._new_edge_id()

    def observe(self, max_node_id: int, max_edge_id: int) -> None:
        """
        Move both counters past IDs that already exist in a genome, so they
        are never handed out again (genomes loaded from a file, built by hand).
        """
        with self._lock:
            self._next_node_id = max(self._next_node_id, max_node_id + 1)
            self._next_edge_id = max(self._next_edge_id, max_edge_id + 1)

    def get_innovation_number(self, source: int, target: int) -> int:
        """
        Get the innovation number for a new connection between two nodes.

        Parameters:
            source: node ID for the 'from' end of the connection
            target: node ID for the 'to'   end of the connection

        Returns:
            connection ID (a.k.a. innovation number)
        """
        with self._lock:
            return self._innovation_number(source, target)

    def get_split_IDs(self, edge_id: int, source: int, target: int) -> tuple[int, int, int]:
        """
        Get node ID and innovation numbers for splitting a connection.

        Parameters:
            edge_id: innovation number of the connection being split
            source:  its 'from' node
            target:  its 'to' node

        Returns:
            3-tuple: (new_node_id, innovation1, innovation2)
            innovation1 is for the connection 'source' -> new node
            innovation2 is for the connection new node -> 'target'
        """
        with self._lock:
            if self.reuse_signatures and edge_id in self._split_IDs:
                return self._split_IDs[edge_id]

            new_node_id = self._new_node_id()
            innov1      = self._innovation_number(source, new_node_id)
            innov2      = self._innovation_number(new_node_id, target)

            if self.reuse_signatures:
                self._split_IDs[edge_id] = (new_node_id, innov1, innov2)
            return new_node_id, innov1, innov2

    # Counter helpers; the caller holds the lock
    def _new_node_id(self) -> int:
        node_id = self._next_node_id
        self._next_node_id += 1
        return node_id

    def _new_edge_id(self) -> int:
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        return edge_id

    def _innovation_number(self, source: int, target: int) -> int:
        # Caller holds the lock
        if not self.reuse_signatures:
            return self._new_edge_id()

        key = (source, target)
        if key not in self._innovation_numbers:
            self._innovation_numbers[key] = self._new_edge_id()
        return self._innovation_numbers[key]

    def __getstate__(self):
        # Locks cannot be pickled (needed when creatures are shipped to worker processes)
        state = self.__dict__.copy()
        del state['_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.Lock()

    def __repr__(self):
        return (f"InnovationTracker(family='{self.family}', initial_node_count={self.initial_node_count}, "
                f"reuse_signatures={self.reuse_signatures})")

class InnovationRegistry:
    """
    The innovation trackers of a run, keyed by genome family name.

    A registry is owned by whichever scope creates the genome families
    (normally a Population); nothing about it is process-wide.

    Public Methods:
        create(family, initial_node_count, reuse_signatures): Get or create a tracker
        get(family):                                          Get an existing tracker
        delete(family):                                       Forget a tracker
    """

    def __init__(self):
        self._trackers: dict[str, InnovationTracker] = {}
        self._lock = threading.Lock()

    def create(self, family: str, initial_node_count: int, reuse_signatures: bool = False) -> InnovationTracker:
        """
        Return the tracker for 'family', creating it if this is the first genome of the family.
        """
        with self._lock:
            if family not in self._trackers:
                logger.debug("creating innovation tracker '%s' (%d initial nodes)", family, initial_node_count)
                self._trackers[family] = InnovationTracker(family, initial_node_count, reuse_signatures)
            return self._trackers[family]

    def get(self, family: str) -> InnovationTracker:
        with self._lock:
            if family not in self._trackers:
                raise KeyError(f"no innovation tracker named '{family}' exists")
            return self._trackers[family]

    def delete(self, family: str) -> None:
        with self._lock:
            if self._trackers.pop(family, None) is not None:
                logger.debug("deleted innovation tracker '%s'", family)

    def __contains__(self, family: str) -> bool:
        return family in self._trackers

    def __len__(self) -> int:
        return len(self._trackers)

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.Lock()

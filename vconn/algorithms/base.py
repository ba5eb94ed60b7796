from __future__ import annotations

from enum import IntEnum
from typing import Hashable

#: Node of a split digraph: ``+i`` is the out-node and ``-i`` the in-node of
#: the original vertex with index ``i``.
SplitNode = int

#: Node of an arbitrary flow graph handed to ``FlowEngine``.
FlowNodeID = Hashable

#: Residual capacity at or below this value is treated as saturated.
DEFAULT_TOLERANCE = 1e-10


class FlowAlgorithm(IntEnum):
    """
    Max-flow algorithms available to ``FlowEngine``.

    Each member maps to a function of ``networkx.algorithms.flow``.
    """

    #: Highest-label push-relabel with global relabeling.
    PREFLOW_PUSH = 1
    #: Shortest augmenting paths found by BFS.
    EDMONDS_KARP = 2
    #: Blocking flows on BFS level graphs.
    DINITZ = 3
    #: Augmenting paths guided by distance labels.
    SHORTEST_AUGMENTING_PATH = 4
    #: Bidirectional search trees, suited to sparse grid-like graphs.
    BOYKOV_KOLMOGOROV = 5

"""vconn: vertex connectivity of networkx graphs.

vconn computes minimum vertex separators, per-pair and graph-wide vertex
connectivity with the Even-Tarjan reduction to max-flow on a split digraph.

Primary API:
    VertexConnectivityInspector - Separator and connectivity queries on one graph
    SynchronizedVertexConnectivityInspector - Thread-safe variant
    ConnectivityConfig - Flow algorithm and capacity settings

Example:
    import networkx as nx
    from vconn import VertexConnectivityInspector

    inspector = VertexConnectivityInspector(nx.petersen_graph())
    inspector.get_connectivity()          # 3
    inspector.is_k_connected(4)           # False
    inspector.get_minimum_separator(0, 2) # three vertices, in node order
"""

from __future__ import annotations

from vconn import logging
from vconn._version import __version__
from vconn.algorithms.base import FlowAlgorithm
from vconn.algorithms.max_flow import FlowEngine
from vconn.algorithms.types import MinCut
from vconn.config import CONNECTIVITY_CONFIG, ConnectivityConfig
from vconn.connectivity import (
    ConnectivityEngine,
    FlowOracle,
    SeparatorCache,
    SynchronizedVertexConnectivityInspector,
    VertexConnectivityInspector,
)
from vconn.exceptions import InvalidInputError
from vconn.graph.split_digraph import SplitDigraph

__all__ = [
    # Version
    "__version__",
    # Connectivity (primary API)
    "VertexConnectivityInspector",
    "SynchronizedVertexConnectivityInspector",
    "ConnectivityEngine",
    "SeparatorCache",
    "FlowOracle",
    # Graph
    "SplitDigraph",
    # Flow
    "FlowAlgorithm",
    "FlowEngine",
    "MinCut",
    # Configuration and errors
    "ConnectivityConfig",
    "CONNECTIVITY_CONFIG",
    "InvalidInputError",
    # Utilities
    "logging",
]

"""Vertex connectivity queries.

`VertexConnectivityInspector` is the entry point; `ConnectivityEngine`,
`FlowOracle` and `SeparatorCache` are the pieces it is assembled from.
"""

from __future__ import annotations

from vconn.connectivity.cache import SeparatorCache
from vconn.connectivity.engine import ConnectivityEngine
from vconn.connectivity.inspector import (
    SynchronizedVertexConnectivityInspector,
    VertexConnectivityInspector,
)
from vconn.connectivity.oracle import FlowOracle

__all__ = [
    "ConnectivityEngine",
    "FlowOracle",
    "SeparatorCache",
    "SynchronizedVertexConnectivityInspector",
    "VertexConnectivityInspector",
]

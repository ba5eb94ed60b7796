"""Public entry point for vertex connectivity queries.

``VertexConnectivityInspector`` validates its input, builds the split digraph
and flow oracles once, and answers separator and connectivity queries. The
input graph is treated as immutable for the lifetime of the inspector; build a
new inspector after changing the graph.
"""

from __future__ import annotations

import operator
import threading
from typing import Optional

import networkx as nx

from vconn.config import CONNECTIVITY_CONFIG, ConnectivityConfig
from vconn.connectivity.cache import NodeID, Separator, SeparatorCache
from vconn.connectivity.engine import ConnectivityEngine
from vconn.connectivity.oracle import FlowOracle
from vconn.exceptions import InvalidInputError
from vconn.graph.split_digraph import SplitDigraph
from vconn.logging import get_logger

logger = get_logger(__name__)


def _as_threshold(k: object) -> int:
    """Normalise an integer-like threshold (numpy integers included) to ``int``."""
    message = f"k must be a non-negative integer, got {k!r}."
    if isinstance(k, bool):
        raise InvalidInputError(message)
    try:
        value = operator.index(k)
    except TypeError:
        raise InvalidInputError(message) from None
    if value < 0:
        raise InvalidInputError(message)
    return value


class VertexConnectivityInspector:
    """Vertex separators and vertex connectivity of a networkx graph.

    Example:
        >>> g = nx.cycle_graph(5)
        >>> inspector = VertexConnectivityInspector(g)
        >>> inspector.get_connectivity()
        2
        >>> len(inspector.get_minimum_separator(0, 2))
        2
        >>> inspector.is_k_connected(3)
        False

    Instances are not thread-safe: queries share the flow engines' residual
    networks and the separator cache. Use
    ``SynchronizedVertexConnectivityInspector`` or one inspector per thread.
    """

    def __init__(self, graph: nx.Graph, *, config: Optional[ConnectivityConfig] = None) -> None:
        """Build the split digraph and flow oracles for ``graph``.

        Args:
            graph: Directed or undirected networkx graph with at least two vertices.
            config: Flow algorithm, crossing capacity and tolerance settings.
                Defaults to ``CONNECTIVITY_CONFIG``.

        Raises:
            InvalidInputError: If ``graph`` is None, not a networkx graph, has
                fewer than two vertices, or the configured crossing capacity is
                below the vertex count.
        """
        if graph is None:
            raise InvalidInputError("Graph must not be None.")
        if not isinstance(graph, nx.Graph):
            raise InvalidInputError(
                f"Expected a networkx graph, got {type(graph).__name__}."
            )

        self.config = config if config is not None else CONNECTIVITY_CONFIG
        self._graph = graph
        self._vertex_connectivity = -1

        n = graph.number_of_nodes()
        self.split_digraph = SplitDigraph.from_graph(
            graph,
            crossing_capacity=self.config.resolve_crossing_capacity(n),
            capacity_attr=self.config.capacity_attr,
        )

        oracle = self._make_oracle(self.split_digraph.graph, "forward")
        reverse_oracle = None
        if self.split_digraph.directed:
            reverse_oracle = self._make_oracle(self.split_digraph.reverse(), "reverse")
        self._engine = ConnectivityEngine(
            self.split_digraph, oracle, reverse_oracle, SeparatorCache()
        )

        logger.debug(
            "Inspector ready: %d vertices, %d edges, directed=%s, algorithm=%s",
            n,
            graph.number_of_edges(),
            self.split_digraph.directed,
            self.config.flow_algorithm.name,
        )

    def _make_oracle(self, graph: nx.DiGraph, name: str) -> FlowOracle:
        return FlowOracle(
            graph,
            algorithm=self.config.flow_algorithm,
            capacity_attr=self.config.capacity_attr,
            tolerance=self.config.tolerance,
            name=name,
        )

    @property
    def num_vertices(self) -> int:
        return self.split_digraph.num_vertices

    @property
    def is_directed(self) -> bool:
        return self.split_digraph.directed

    @property
    def flow_query_count(self) -> int:
        """Number of max-flow / min-cut computations run so far."""
        return self._engine.query_count

    def _check_pair(self, source: NodeID, target: NodeID) -> None:
        for vertex in (source, target):
            if vertex not in self.split_digraph:
                raise InvalidInputError(f"Vertex {vertex!r} is not in the graph.")
        if source == target:
            raise InvalidInputError(f"Source and target are the same vertex {source!r}.")
        if self.split_digraph.is_adjacent(source, target):
            raise InvalidInputError(
                f"Vertices {source!r} and {target!r} are adjacent; no separator exists."
            )

    def get_minimum_separator(self, source: NodeID, target: NodeID) -> Separator:
        """Return a minimum-cardinality (source, target)-separator.

        Every path from ``source`` to ``target`` passes through a vertex of
        the separator. For undirected graphs the result is symmetric in its
        arguments. Results are cached; repeated calls return the same tuple.

        Args:
            source: Vertex on one side of the separator.
            target: Vertex on the other side. Must not be adjacent from ``source``.

        Returns:
            Separator: Separator vertices as a tuple in graph node order. Empty if
            ``target`` is unreachable from ``source``.

        Raises:
            InvalidInputError: If a vertex is missing, the vertices are equal,
                or ``(source, target)`` is an edge.
        """
        self._check_pair(source, target)
        return self._engine.minimum_separator(source, target)

    def get_local_connectivity(self, source: NodeID, target: NodeID) -> int:
        """Size of a minimum (source, target)-separator.

        Raises:
            InvalidInputError: Same conditions as ``get_minimum_separator``.
        """
        self._check_pair(source, target)
        return self._engine.local_connectivity(source, target)

    def is_k_connected(self, k: int) -> bool:
        """Return True if the graph is k-connected, i.e. its connectivity is at least ``k``.

        Cheaper than ``get_connectivity()`` when the connectivity is unknown:
        the Even-Tarjan loop visits at most ``k + 1`` vertices and stops once a
        vertex with connectivity below ``k`` is found.

        Raises:
            InvalidInputError: If ``k`` is not a non-negative integer.
        """
        k = _as_threshold(k)
        if self._vertex_connectivity > -1:
            return self._vertex_connectivity >= k
        if k == 0:
            return True
        if k > self.num_vertices - 1:
            return False

        bound = self._engine.connectivity(threshold=k)
        if bound == k:
            # kappa(G) >= k is proven and bound is an upper bound on kappa(G).
            self._vertex_connectivity = bound
        return bound >= k

    def get_connectivity(self) -> int:
        """Return the vertex connectivity of the graph.

        The connectivity is the largest ``k`` for which the graph is
        k-connected: the minimum number of vertices whose removal disconnects
        it, or ``n - 1`` if every pair is adjacent. Computed on first use and
        cached.
        """
        if self._vertex_connectivity > -1:
            return self._vertex_connectivity
        connectivity = self._engine.connectivity()
        self._vertex_connectivity = connectivity
        logger.debug("Vertex connectivity: %d", connectivity)
        return connectivity


class SynchronizedVertexConnectivityInspector(VertexConnectivityInspector):
    """``VertexConnectivityInspector`` whose queries are serialised by a lock.

    Safe to share between threads. Queries never run concurrently, so there is
    no speed-up from sharing; build one plain inspector per thread for that.
    """

    def __init__(self, graph: nx.Graph, *, config: Optional[ConnectivityConfig] = None) -> None:
        self._lock = threading.RLock()
        super().__init__(graph, config=config)

    def get_minimum_separator(self, source: NodeID, target: NodeID) -> Separator:
        with self._lock:
            return super().get_minimum_separator(source, target)

    def get_local_connectivity(self, source: NodeID, target: NodeID) -> int:
        with self._lock:
            return super().get_local_connectivity(source, target)

    def is_k_connected(self, k: int) -> bool:
        with self._lock:
            return super().is_k_connected(k)

    def get_connectivity(self) -> int:
        with self._lock:
            return super().get_connectivity()

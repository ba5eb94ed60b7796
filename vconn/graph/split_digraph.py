"""Vertex-split auxiliary digraph.

Every vertex ``v`` of the input graph with index ``i`` becomes two nodes of
the split digraph: the in-node ``-i`` and the out-node ``+i``, joined by an
internal arc ``-i -> +i`` of capacity 1. Every edge ``(u, v)`` becomes a
crossing arc ``+index(u) -> -index(v)`` whose capacity exceeds any achievable
vertex cut, so minimum cuts consist of internal arcs only and correspond to
minimum vertex separators of the input graph.

Example (path ``a - b``, undirected)::

      -1 ──1──► +1 ──3──► -2 ──1──► +2
       ▲                             │
       └─────────────3───────────────┘
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Optional

import networkx as nx

from vconn.algorithms.base import SplitNode
from vconn.exceptions import InvalidInputError
from vconn.logging import get_logger

logger = get_logger(__name__)

NodeID = Hashable


class SplitDigraph:
    """Split digraph of a networkx graph together with its vertex indexing.

    Attributes:
        graph: The split digraph as an ``nx.DiGraph`` over signed integer nodes.
        directed: Whether the input graph was directed.
        crossing_capacity: Capacity assigned to every crossing arc.
        capacity_attr: Arc attribute holding capacities.
    """

    def __init__(
        self,
        graph: nx.DiGraph,
        vertices: List[NodeID],
        directed: bool,
        crossing_capacity: int,
        capacity_attr: str = "capacity",
    ) -> None:
        self.graph = graph
        self.directed = directed
        self.crossing_capacity = crossing_capacity
        self.capacity_attr = capacity_attr
        self._vertices = vertices
        self._index: Dict[NodeID, int] = {v: i for i, v in enumerate(vertices, start=1)}

    @classmethod
    def from_graph(
        cls,
        graph: nx.Graph,
        crossing_capacity: Optional[int] = None,
        capacity_attr: str = "capacity",
    ) -> SplitDigraph:
        """Build the split digraph of ``graph``.

        Vertices are indexed ``1..n`` in ``graph.nodes`` order. Parallel edges
        of multigraphs collapse into one crossing arc and self-loops are
        skipped, since neither can change a vertex connectivity.

        Args:
            graph: Directed or undirected networkx graph with at least two vertices.
            crossing_capacity: Capacity of crossing arcs. Defaults to ``n + 1``;
                values below ``n`` are rejected.
            capacity_attr: Arc attribute to store capacities under.

        Returns:
            SplitDigraph: The split digraph and its vertex index.

        Raises:
            InvalidInputError: If ``graph`` has fewer than two vertices or
                ``crossing_capacity`` is smaller than the number of vertices.
        """
        vertices = list(graph.nodes)
        n = len(vertices)
        if n < 2:
            raise InvalidInputError(f"Graph has fewer than 2 vertices ({n}).")
        if crossing_capacity is None:
            crossing_capacity = n + 1
        elif crossing_capacity < n:
            raise InvalidInputError(
                f"Crossing capacity {crossing_capacity} is below the vertex count {n}; "
                "minimum cuts could then use crossing arcs."
            )

        directed = graph.is_directed()
        index = {v: i for i, v in enumerate(vertices, start=1)}

        split = nx.DiGraph()
        for i in range(1, n + 1):
            split.add_node(-i)
            split.add_node(i)
            split.add_edge(-i, i, **{capacity_attr: 1})

        skipped_loops = 0
        for u, v in graph.edges():
            if u == v:
                skipped_loops += 1
                continue
            iu, iv = index[u], index[v]
            split.add_edge(iu, -iv, **{capacity_attr: crossing_capacity})
            if not directed:
                split.add_edge(iv, -iu, **{capacity_attr: crossing_capacity})

        if skipped_loops:
            logger.debug("Skipped %d self-loop(s) while splitting", skipped_loops)
        logger.debug(
            "Built split digraph: %d vertices -> %d nodes, %d arcs (directed=%s, crossing capacity=%d)",
            n,
            split.number_of_nodes(),
            split.number_of_edges(),
            directed,
            crossing_capacity,
        )
        return cls(split, vertices, directed, crossing_capacity, capacity_attr)

    @property
    def num_vertices(self) -> int:
        """Number of vertices of the input graph."""
        return len(self._vertices)

    @property
    def vertices(self) -> List[NodeID]:
        """Input vertices in index order (index ``i`` is at position ``i - 1``)."""
        return list(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._index
        except TypeError:
            return False

    def index_of(self, vertex: NodeID) -> int:
        """Return the 1-based index of an input vertex.

        Raises:
            InvalidInputError: If ``vertex`` is not in the input graph.
        """
        if vertex not in self:
            raise InvalidInputError(f"Vertex {vertex!r} is not in the graph.")
        return self._index[vertex]

    def vertex_at(self, index: int) -> NodeID:
        """Return the input vertex with the given 1-based index."""
        if not 1 <= index <= len(self._vertices):
            raise IndexError(f"Vertex index {index} out of range 1..{len(self._vertices)}.")
        return self._vertices[index - 1]

    def in_node(self, vertex: NodeID) -> SplitNode:
        """Split node receiving every arc that enters ``vertex``."""
        return -self.index_of(vertex)

    def out_node(self, vertex: NodeID) -> SplitNode:
        """Split node emitting every arc that leaves ``vertex``."""
        return self.index_of(vertex)

    def has_crossing_arc(self, i: int, j: int) -> bool:
        """Whether the input graph has an edge from vertex ``i`` to vertex ``j``.

        For undirected inputs this is symmetric in ``i`` and ``j``.
        """
        return self.graph.has_edge(i, -j)

    def is_adjacent(self, source: NodeID, target: NodeID) -> bool:
        """Whether ``(source, target)`` is an edge of the input graph."""
        return self.has_crossing_arc(self.index_of(source), self.index_of(target))

    def reverse(self) -> nx.DiGraph:
        """Edge-reversed split digraph as a read-only view."""
        return self.graph.reverse(copy=False)

    def __repr__(self) -> str:
        return (
            f"SplitDigraph(num_vertices={self.num_vertices}, "
            f"arcs={self.graph.number_of_edges()}, directed={self.directed})"
        )

"""Maximum-flow and minimum-cut engine on top of ``networkx.algorithms.flow``.

``FlowEngine`` is bound to one directed graph at construction. It builds the
residual network once and hands it to the selected networkx flow function on
every query; networkx resets the residual flows before each run, so repeated
queries are independent of each other.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Set

import networkx as nx
from networkx.algorithms.flow import (
    boykov_kolmogorov,
    build_residual_network,
    dinitz,
    edmonds_karp,
    preflow_push,
    shortest_augmenting_path,
)

from vconn.algorithms.base import DEFAULT_TOLERANCE, FlowAlgorithm, FlowNodeID
from vconn.algorithms.types import Arc, MinCut
from vconn.logging import get_logger

logger = get_logger(__name__)

_FLOW_FUNCS: Dict[FlowAlgorithm, Callable[..., nx.DiGraph]] = {
    FlowAlgorithm.PREFLOW_PUSH: preflow_push,
    FlowAlgorithm.EDMONDS_KARP: edmonds_karp,
    FlowAlgorithm.DINITZ: dinitz,
    FlowAlgorithm.SHORTEST_AUGMENTING_PATH: shortest_augmenting_path,
    FlowAlgorithm.BOYKOV_KOLMOGOROV: boykov_kolmogorov,
}


class FlowEngine:
    """Max-flow / min-cut solver bound to a single directed graph.

    Example:
        >>> g = nx.DiGraph()
        >>> g.add_edge("A", "B", capacity=10)
        >>> g.add_edge("B", "C", capacity=5)
        >>> engine = FlowEngine(g)
        >>> engine.calc_max_flow("A", "C")
        5
        >>> sorted(engine.calc_min_cut("A", "C").source_partition)
        ['A', 'B']
    """

    def __init__(
        self,
        graph: nx.DiGraph,
        *,
        algorithm: FlowAlgorithm = FlowAlgorithm.PREFLOW_PUSH,
        capacity_attr: str = "capacity",
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        """Bind the engine to ``graph``.

        Args:
            graph: Directed graph carrying a capacity attribute on every arc.
                The engine never modifies it. Read-only views are accepted.
            algorithm: Which networkx flow function to run.
            capacity_attr: Name of the capacity attribute on arcs.
            tolerance: Residual capacity at or below this value is treated as
                saturated when extracting the cut.

        Raises:
            ValueError: If ``graph`` is not directed or ``algorithm`` is unknown.
        """
        if not graph.is_directed():
            raise ValueError("FlowEngine requires a directed graph.")
        if algorithm not in _FLOW_FUNCS:
            raise ValueError(f"Unsupported flow algorithm: {algorithm!r}")

        self.graph = graph
        self.algorithm = FlowAlgorithm(algorithm)
        self.capacity_attr = capacity_attr
        self.tolerance = tolerance
        self._flow_func = _FLOW_FUNCS[self.algorithm]
        self._residual = build_residual_network(graph, capacity_attr)

    def _run(self, src: FlowNodeID, dst: FlowNodeID, value_only: bool) -> nx.DiGraph:
        return self._flow_func(
            self.graph,
            src,
            dst,
            capacity=self.capacity_attr,
            residual=self._residual,
            value_only=value_only,
        )

    def calc_max_flow(self, src: FlowNodeID, dst: FlowNodeID) -> float:
        """Return the value of a maximum flow from ``src`` to ``dst``.

        Raises:
            networkx.NetworkXError: If a node is missing or ``src == dst``.
            networkx.NetworkXUnbounded: If an infinite-capacity path exists.
        """
        residual = self._run(src, dst, value_only=True)
        return residual.graph["flow_value"]

    def calc_min_cut(self, src: FlowNodeID, dst: FlowNodeID) -> MinCut:
        """Compute a maximum flow and the minimum cut it certifies.

        Unlike ``calc_max_flow`` this always completes the flow (no preflow
        shortcut), because the source partition is read off the residual
        graph of a valid flow.

        Args:
            src: Source node.
            dst: Sink node.

        Returns:
            MinCut: Flow value, source partition and cut arcs.
        """
        residual = self._run(src, dst, value_only=False)
        reachable = self._residual_reachable(residual, src)

        cut_arcs: List[Arc] = [
            (u, v) for u, v in self.graph.edges() if u in reachable and v not in reachable
        ]
        logger.debug(
            "Min cut %r -> %r: value=%s, |S|=%d, %d cut arcs",
            src,
            dst,
            residual.graph["flow_value"],
            len(reachable),
            len(cut_arcs),
        )
        return MinCut(
            value=residual.graph["flow_value"],
            source_partition=frozenset(reachable),
            cut_arcs=tuple(cut_arcs),
        )

    def _residual_reachable(self, residual: nx.DiGraph, src: FlowNodeID) -> Set[FlowNodeID]:
        # networkx stores reverse arcs explicitly with capacity 0 and negative
        # flow, so forward traversal of capacity - flow covers both directions.
        reachable: Set[FlowNodeID] = set()
        stack = [src]
        while stack:
            n = stack.pop()
            if n in reachable:
                continue
            reachable.add(n)
            for nbr, attr in residual.succ[n].items():
                if nbr not in reachable and attr["capacity"] - attr["flow"] > self.tolerance:
                    stack.append(nbr)
        return reachable

"""Integer flow queries on a split digraph."""

from __future__ import annotations

import networkx as nx

from vconn.algorithms.base import DEFAULT_TOLERANCE, FlowAlgorithm, SplitNode
from vconn.algorithms.max_flow import FlowEngine
from vconn.algorithms.types import MinCut
from vconn.logging import get_logger

logger = get_logger(__name__)


class FlowOracle:
    """Adapter around one ``FlowEngine`` bound to a split digraph (or its reversal).

    Capacities of split digraphs are integral, so flow values are returned as
    ``int``. ``query_count`` records how many flow computations were run,
    which makes the cost of the Even-Tarjan loop observable.
    """

    def __init__(
        self,
        graph: nx.DiGraph,
        *,
        algorithm: FlowAlgorithm = FlowAlgorithm.PREFLOW_PUSH,
        capacity_attr: str = "capacity",
        tolerance: float = DEFAULT_TOLERANCE,
        name: str = "forward",
    ) -> None:
        self.name = name
        self.query_count = 0
        self._engine = FlowEngine(
            graph,
            algorithm=algorithm,
            capacity_attr=capacity_attr,
            tolerance=tolerance,
        )

    @property
    def graph(self) -> nx.DiGraph:
        return self._engine.graph

    def max_flow(self, src: SplitNode, dst: SplitNode) -> int:
        """Max-flow value from ``src`` to ``dst``."""
        self.query_count += 1
        value = int(round(self._engine.calc_max_flow(src, dst)))
        logger.debug("[%s] max flow %d -> %d = %d", self.name, src, dst, value)
        return value

    def min_cut(self, src: SplitNode, dst: SplitNode) -> MinCut:
        """Minimum cut from ``src`` to ``dst`` with its source partition."""
        self.query_count += 1
        return self._engine.calc_min_cut(src, dst)

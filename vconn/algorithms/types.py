"""Result containers for flow computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from vconn.algorithms.base import FlowNodeID

# Arc identifier tuple: (source_node, destination_node)
Arc = Tuple[FlowNodeID, FlowNodeID]


@dataclass(frozen=True)
class MinCut:
    """Minimum s-t cut produced by ``FlowEngine.calc_min_cut``.

    Attributes:
        value: Maximum flow value, equal to the total capacity of ``cut_arcs``.
        source_partition: Nodes reachable from the source in the residual
            graph of a maximum flow. This is the smallest source side over all
            minimum cuts, so it does not depend on which maximum flow the
            algorithm found.
        cut_arcs: Saturated arcs leaving ``source_partition``, in graph scan order.
    """

    value: float
    source_partition: FrozenSet[FlowNodeID]
    cut_arcs: Tuple[Arc, ...]

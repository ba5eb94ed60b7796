"""Configuration classes for vconn components."""

from dataclasses import dataclass
from typing import Optional

from vconn.algorithms.base import DEFAULT_TOLERANCE, FlowAlgorithm


@dataclass
class ConnectivityConfig:
    """Configuration for split-digraph construction and flow queries."""

    # Max-flow algorithm driving every connectivity query
    flow_algorithm: FlowAlgorithm = FlowAlgorithm.PREFLOW_PUSH

    # Capacity of crossing arcs; None means number of vertices + 1
    crossing_capacity: Optional[int] = None

    # Arc attribute holding capacities in the split digraph
    capacity_attr: str = "capacity"

    # Residual capacity at or below this value counts as saturated
    tolerance: float = DEFAULT_TOLERANCE

    def resolve_crossing_capacity(self, num_vertices: int) -> int:
        """Return the crossing-arc capacity for a graph with ``num_vertices`` vertices."""
        if self.crossing_capacity is None:
            return num_vertices + 1
        return self.crossing_capacity


# Global configuration instance
CONNECTIVITY_CONFIG = ConnectivityConfig()

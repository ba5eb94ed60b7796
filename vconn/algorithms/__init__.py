"""Flow algorithms.

`FlowEngine` wraps the networkx max-flow functions selected by `FlowAlgorithm`
and extracts minimum cuts as `MinCut` records.
"""

"""Graph primitives.

This package provides `SplitDigraph`, the vertex-split auxiliary digraph that
reduces vertex connectivity to arc-capacity flow problems.
"""

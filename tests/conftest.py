"""Global pytest configuration and shared sample graphs.

Vertex names are single letters so expected separators read naturally.
"""

from __future__ import annotations

import networkx as nx
import pytest


@pytest.fixture
def path4():
    #  a ─── b ─── c ─── d
    g = nx.Graph()
    g.add_edges_from([("a", "b"), ("b", "c"), ("c", "d")])
    return g


@pytest.fixture
def cycle5():
    #      0
    #    /   \
    #   4     1
    #   |     |
    #   3 ─── 2
    return nx.cycle_graph(5)


@pytest.fixture
def complete4():
    return nx.complete_graph(["a", "b", "c", "d"])


@pytest.fixture
def two_isolated():
    g = nx.Graph()
    g.add_nodes_from(["a", "b"])
    return g


@pytest.fixture
def directed_cycle3():
    #  a ──► b ──► c
    #  ▲           │
    #  └───────────┘
    g = nx.DiGraph()
    g.add_edges_from([("a", "b"), ("b", "c"), ("c", "a")])
    return g


@pytest.fixture
def directed_chain3():
    #  a ──► b ──► c
    g = nx.DiGraph()
    g.add_edges_from([("a", "b"), ("b", "c")])
    return g


@pytest.fixture
def bowtie():
    # Two triangles sharing the cut vertex c.
    #  a       d
    #  │ \   / │
    #  │   c   │
    #  │ /   \ │
    #  b       e
    g = nx.Graph()
    g.add_edges_from(
        [("a", "b"), ("a", "c"), ("b", "c"), ("c", "d"), ("c", "e"), ("d", "e")]
    )
    return g

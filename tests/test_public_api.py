"""The top-level package re-exports the documented API."""

import networkx as nx

import vconn


def test_all_names_resolve():
    for name in vconn.__all__:
        assert hasattr(vconn, name), name


def test_version_string():
    assert isinstance(vconn.__version__, str)
    assert vconn.__version__.count(".") == 2


def test_readme_example():
    inspector = vconn.VertexConnectivityInspector(nx.petersen_graph())

    assert inspector.get_connectivity() == 3
    assert not inspector.is_k_connected(4)
    separator = inspector.get_minimum_separator(0, 2)
    assert len(separator) == 3
    assert list(separator) == sorted(separator)
